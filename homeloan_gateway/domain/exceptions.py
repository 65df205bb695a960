"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidScheduleError(DomainException):
    """Stamp duty bracket table is empty, out of order, or discontinuous"""

    pass
