"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class CatalogError(DomainException):
    """Credit catalog file is missing or malformed"""

    pass


class CalculationError(DomainException):
    """Calculation request was rejected; always a caller input error"""

    pass


class UnsupportedCreditType(CalculationError):
    """Requested credit type is not in the catalog"""

    pass


class InvalidAmount(CalculationError):
    """Loan amount is not a positive finite number"""

    pass


class AmountTooLarge(CalculationError):
    """Loan amount exceeds the global ceiling"""

    pass


class InvalidDate(CalculationError):
    """Start or end date is not a valid calendar date"""

    pass


class InvalidDateRange(CalculationError):
    """Start date is after end date, or the period is empty"""

    pass


class AmountOutOfRange(CalculationError):
    """Loan amount is outside the bounds of a range-priced product"""

    pass


class NoMatchingTier(CalculationError):
    """Loan amount does not fall into any tier of a tiered product"""

    pass
