from medoffice.errors import (
    DataAccessError,
    ExportFailure,
    InvalidArgument,
    error_message,
    normalize_error,
)


def test_error_message_shapes():
    assert error_message({"message": "Supabase client not initialized"}) == "Supabase client not initialized"
    assert error_message({"detail": "timeout"}) == "timeout"
    assert error_message({}) == "Unknown error"
    assert error_message(None) == "Unknown error"
    assert error_message("boom") == "boom"
    assert error_message(KeyError()) == "KeyError"


def test_normalize_passes_through_known_errors():
    failure = ExportFailure("disk full")
    invalid = InvalidArgument("bad view")

    assert normalize_error(failure) is failure
    assert normalize_error(invalid, export=True) is invalid


def test_normalize_during_export_is_export_failure():
    error = normalize_error({"message": "PDF engine unavailable"}, export=True)

    assert isinstance(error, ExportFailure)
    assert error.retryable
    assert error.message == "PDF engine unavailable"


def test_normalize_outside_export_is_data_access_error():
    error = normalize_error({"message": "User not authenticated"})

    assert isinstance(error, DataAccessError)
    assert error.retryable
    assert error.message == "User not authenticated"
    assert isinstance(normalize_error(ConnectionError("connection reset")), DataAccessError)


def test_invalid_argument_is_a_value_error():
    assert issubclass(InvalidArgument, ValueError)
    assert not InvalidArgument("x").retryable
