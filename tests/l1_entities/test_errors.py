"""Tests for domain error types."""

from doubt_solver.l1_entities.errors import (
    ConversationValidationError,
    InputShapeError,
    InvalidRoleError,
    MessageFieldError,
    ProviderError,
)


class TestConversationValidationErrors:
    def test_input_shape(self):
        err = InputShapeError()
        assert isinstance(err, ConversationValidationError)
        assert err.code == 'missing-field'
        assert err.index is None
        assert str(err) == 'Messages array is required'

    def test_message_field_carries_index(self):
        err = MessageFieldError(3)
        assert err.code == 'missing-field'
        assert err.index == 3
        assert 'index 3' in str(err)

    def test_invalid_role_carries_raw(self):
        err = InvalidRoleError(1, 'bird')
        assert err.code == 'invalid-role'
        assert err.index == 1
        assert err.raw == 'bird'
        assert '"bird"' in str(err)


class TestProviderError:
    def test_status(self):
        err = ProviderError('slow down', status=429)
        assert err.status == 429
        assert str(err) == 'slow down'
