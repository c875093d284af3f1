"""Tests for unknown_to_error and NormalizedError."""

from __future__ import annotations

import pickle

from hypothesis import given
from strategies import exceptions, json_values

from okerr import NormalizedError, OkErrError, configure, unknown_to_error


class TestExceptionsPassThrough:
    """Exceptions are returned unchanged."""

    def test_same_instance(self) -> None:
        """An exception is returned as the same object."""
        exc = KeyError('missing')
        assert unknown_to_error(exc) is exc

    def test_base_exception(self) -> None:
        """BaseException subclasses are kept too."""
        exc = KeyboardInterrupt()
        assert unknown_to_error(exc) is exc

    @given(exceptions)
    def test_any_exception(self, exc: Exception) -> None:
        """Every exception passes through."""
        assert unknown_to_error(exc) is exc


class TestPayloadConversion:
    """Non-exception payloads become NormalizedError."""

    def test_string_is_message(self) -> None:
        """A string becomes the message."""
        error = unknown_to_error('boom')
        assert isinstance(error, NormalizedError)
        assert str(error) == 'boom'
        assert error.cause is None

    def test_mapping_with_message(self) -> None:
        """A mapping's string message is used and the mapping kept as cause."""
        payload = {'message': 'm', 'x': 1}
        error = unknown_to_error(payload)
        assert error.message == 'm'
        assert error.cause is payload

    def test_mapping_with_empty_message(self) -> None:
        """An empty message falls back to the JSON rendering."""
        error = unknown_to_error({'message': ''})
        assert error.message == '{"message":""}'

    def test_mapping_with_non_string_message(self) -> None:
        """A non-string message falls back to the JSON rendering."""
        error = unknown_to_error({'message': 5})
        assert error.message == '{"message":5}'

    def test_mapping_without_message(self) -> None:
        """A mapping without message is rendered as JSON."""
        assert unknown_to_error({'id': 'x'}).message == '{"id":"x"}'

    def test_number(self) -> None:
        """Numbers are rendered as JSON."""
        error = unknown_to_error(42)
        assert error.message == '42'
        assert error.cause == 42

    def test_true(self) -> None:
        """True renders as 'true'."""
        assert unknown_to_error(True).message == 'true'

    def test_none(self) -> None:
        """None renders as 'null'."""
        assert unknown_to_error(None).message == 'null'

    def test_list(self) -> None:
        """Lists are rendered as JSON."""
        assert unknown_to_error(['a', 1]).message == '["a",1]'

    def test_unrenderable_value(self) -> None:
        """Values JSON cannot encode fall back to 'unknown'."""
        sentinel = object()
        error = unknown_to_error(sentinel)
        assert error.message == 'unknown'
        assert error.cause is sentinel

    def test_circular_value(self) -> None:
        """Circular structures fall back to 'unknown'."""
        payload: list[object] = []
        payload.append(payload)
        assert unknown_to_error(payload).message == 'unknown'

    def test_configured_unknown_message(self) -> None:
        """The fallback message comes from settings."""
        configure(unknown_message='unrenderable')
        assert unknown_to_error(object()).message == 'unrenderable'

    @given(json_values)
    def test_never_raises(self, payload: object) -> None:
        """Every JSON-like payload produces an exception."""
        assert isinstance(unknown_to_error(payload), BaseException)


class TestNormalizedError:
    """Tests for the NormalizedError type."""

    def test_is_okerr_error(self) -> None:
        """NormalizedError belongs to the okerr hierarchy."""
        assert issubclass(NormalizedError, OkErrError)
        assert issubclass(NormalizedError, Exception)

    def test_repr(self) -> None:
        """The repr shows the message."""
        assert repr(NormalizedError('boom')) == "NormalizedError('boom')"

    def test_pickle_round_trip(self) -> None:
        """Message and cause survive pickling."""
        restored = pickle.loads(pickle.dumps(NormalizedError('m', cause={'id': 'x'})))  # noqa: S301
        assert restored.message == 'm'
        assert restored.cause == {'id': 'x'}
