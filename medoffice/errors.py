"""Error types shared by the calendar core and the API layer."""

from collections.abc import Mapping


class MedOfficeError(Exception):
    """Base class for application errors."""

    retryable = False

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidArgument(MedOfficeError, ValueError):
    """A caller passed a value the calendar core cannot work with.

    Raised for unknown granularities and malformed dates. These are
    programmer errors and are never coerced into a default window.
    """


class ExportFailure(MedOfficeError):
    """Building a CSV or PDF artifact failed or produced incomplete output."""

    retryable = True


class DataAccessError(MedOfficeError):
    """The backing store rejected or failed a query."""

    retryable = True


def error_message(value) -> str:
    """Pull a readable message out of an arbitrary error value.

    The data layer hands back exceptions, ``{"message": ...}`` mappings or
    plain strings depending on the backend.
    """
    if value is None:
        return "Unknown error"
    if isinstance(value, MedOfficeError) and value.message:
        return value.message
    if isinstance(value, Mapping):
        for key in ("message", "detail", "error", "msg"):
            if value.get(key):
                return str(value[key])
        return "Unknown error"
    if isinstance(value, BaseException):
        return str(value) or type(value).__name__
    return str(value)


def normalize_error(value, *, export: bool = False) -> MedOfficeError:
    """Fold an arbitrary error value into one of the application error kinds.

    Values that are already ``MedOfficeError`` instances pass through. During
    an export everything else becomes ``ExportFailure``; elsewhere it is a
    ``DataAccessError`` from the backing store.
    """
    if isinstance(value, MedOfficeError):
        return value
    message = error_message(value)
    if export:
        return ExportFailure(message)
    return DataAccessError(message)
