import pytest

from pico_debug.exceptions import DebugError, InvalidFormatterError


class TestDebugError:
    def test_is_exception(self):
        assert issubclass(DebugError, Exception)

    def test_message(self):
        assert str(DebugError("Something went wrong")) == "Something went wrong"


class TestInvalidFormatterError:
    def test_message_names_letter_and_reason(self):
        error = InvalidFormatterError("x", "handler is not callable")
        assert str(error) == "Cannot register formatter '%x': handler is not callable"
        assert error.letter == "x"

    def test_can_catch_as_debug_error(self):
        with pytest.raises(DebugError):
            raise InvalidFormatterError("1", "key must be a single ASCII letter")
