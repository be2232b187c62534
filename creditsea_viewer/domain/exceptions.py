"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ReportServiceError(DomainException):
    """Report backend returned an error or is unavailable"""

    pass


class ReportFetchError(ReportServiceError):
    """Report collection could not be fetched"""

    pass


class InvalidReportDataError(ReportFetchError):
    """Report payload is malformed or invalid"""

    pass


class ReportUploadError(ReportServiceError):
    """Report file could not be uploaded"""

    pass


class ReportNotFoundError(DomainException):
    """Report is not part of the current collection"""

    pass
