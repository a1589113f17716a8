"""Tests for the Result model: Ok, Err, success, failure."""

import pytest
from hypothesis import given
from strategies import exceptions, values

from safetry import Err, Ok, failure, success


class TestSuccess:
    """Tests for success() and the Ok variant."""

    def test_success_wraps_value(self):
        """success() returns Ok holding the value."""
        result = success('test value')
        assert isinstance(result, Ok)
        assert result.ok is True
        assert result.value == 'test value'

    def test_success_keeps_identity(self):
        """The wrapped value is the same object."""
        data = {'key': [1, 2, 3]}
        assert success(data).value is data

    def test_success_with_none(self):
        """success() can wrap None."""
        assert success(None).value is None

    def test_success_allocates_new_record(self):
        """Each call builds a new, equal record."""
        first = success(1)
        second = success(1)
        assert first == second
        assert first is not second

    def test_ok_is_frozen(self):
        """Ok instances are immutable."""
        ok = success(42)
        with pytest.raises(AttributeError):
            ok.value = 100  # type: ignore[misc]

    def test_ok_has_no_error_field(self):
        """Ok carries only the value payload."""
        assert not hasattr(success(1), 'error')

    @given(values)
    def test_success_property(self, value):
        """For all v, success(v) is tagged ok and holds v."""
        result = success(value)
        assert result.ok is True
        assert result.value is value


class TestFailure:
    """Tests for failure() and the Err variant."""

    def test_failure_wraps_error(self):
        """failure() returns Err holding the error."""
        error = ValueError('test error')
        result = failure(error)
        assert isinstance(result, Err)
        assert result.ok is False
        assert result.error is error

    def test_failure_is_generic_over_error(self):
        """The union itself accepts any error payload."""
        assert failure('string error').error == 'string error'
        assert isinstance(failure(TypeError('type error')).error, TypeError)

    def test_err_is_frozen(self):
        """Err instances are immutable."""
        err = failure(ValueError('x'))
        with pytest.raises(AttributeError):
            err.error = ValueError('y')  # type: ignore[misc]

    def test_err_has_no_value_field(self):
        """Err carries only the error payload."""
        assert not hasattr(failure(ValueError('x')), 'value')

    @given(exceptions)
    def test_failure_property(self, error):
        """For all e, failure(e) is tagged not-ok and holds e by identity."""
        result = failure(error)
        assert result.ok is False
        assert result.error is error


class TestResultBehaviour:
    """Tests for equality, hashing, repr and pattern matching."""

    def test_ok_not_equal_to_err(self):
        """Ok is never equal to Err."""
        assert Ok(42) != Err(42)

    def test_equal_errs_share_error_object(self):
        """Err equality follows the error object's equality."""
        error = ValueError('boom')
        assert Err(error) == Err(error)
        assert Err(ValueError('boom')) != Err(ValueError('boom'))

    def test_hashable(self):
        """Results with hashable payloads are hashable."""
        assert hash(Ok(42)) == hash(Ok(42))
        assert {Ok('a'): 1}[Ok('a')] == 1

    def test_repr(self):
        """repr shows the variant and its payload."""
        assert repr(Ok(42)) == 'Ok(value=42)'
        assert repr(Err('nope')) == "Err(error='nope')"

    def test_pattern_matching(self):
        """Variants destructure positionally in match statements."""

        def describe(result):
            match result:
                case Ok(value):
                    return f'ok:{value}'
                case Err(error):
                    return f'err:{error}'

        assert describe(success(1)) == 'ok:1'
        assert describe(failure(ValueError('bad'))) == 'err:bad'
