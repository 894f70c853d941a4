"""
Domain Exceptions - Falhas do pipeline de coleta
Clean Architecture: Domain layer exceptions

Falhas por localização (FetchError, ParseError) e de escrita (FileOpenError)
são recuperáveis. Apenas AllocationError aborta o batch.
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FetchError(DomainException):
    """Raised when the weather service could not be reached"""
    pass


class TransportInitError(FetchError):
    """Raised when the HTTP transport could not be created"""
    pass


class TransportCallError(FetchError):
    """Raised on DNS, connection, TLS or other transport-level failures"""
    pass


class ParseError(DomainException):
    """Raised when a response cannot be turned into an Observation"""
    pass


class MalformedResponseError(ParseError):
    """Raised when the response body is not a valid JSON document"""
    pass


class MissingCurrentWeatherError(ParseError):
    """Raised when a valid document has no current_weather object"""
    pass


class AllocationError(DomainException):
    """Raised when the batch working buffer cannot be allocated"""
    pass


class FileOpenError(DomainException):
    """Raised when an output log cannot be opened or written"""
    def __init__(self, message: str, path: str, details: dict = None):
        super().__init__(message, details)
        self.path = path
