"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class PredictionServiceError(DomainException):
    """Remote prediction service failed or returned an unusable response"""

    pass


class UnknownSettingError(DomainException):
    """Requested system setting key does not exist"""

    pass
