"""Tests for error classification."""

import pytest

from doubt_solver.l1_entities.errors import (
    EmptyCompletionError,
    ErrorKind,
    InvalidRoleError,
    MessageFieldError,
    ProviderError,
)
from doubt_solver.l2_use_cases.utils.error_mapper import classify_error, error_status
from tests.conftest import StatusError


class TestErrorStatus:
    def test_provider_error(self):
        assert error_status(ProviderError('x', status=401)) == 401

    def test_status_attribute(self):
        assert error_status(StatusError('x', 429)) == 429

    def test_status_code_attribute(self):
        exc = RuntimeError('x')
        exc.status_code = 400  # type: ignore[attr-defined]
        assert error_status(exc) == 400

    def test_no_status(self):
        assert error_status(RuntimeError('x')) is None


class TestClassifyError:
    @pytest.mark.parametrize(
        ('status', 'kind'),
        [
            (429, ErrorKind.RATE_LIMITED),
            (401, ErrorKind.AUTH_FAILURE),
            (400, ErrorKind.BAD_REQUEST),
            (500, ErrorKind.UNKNOWN),
            (404, ErrorKind.UNKNOWN),
        ],
    )
    def test_provider_status(self, status, kind):
        assert classify_error(ProviderError('boom', status=status)) is kind

    def test_foreign_exception_with_status(self):
        assert classify_error(StatusError('slow', 429)) is ErrorKind.RATE_LIMITED

    def test_validation_errors_are_bad_requests(self):
        assert classify_error(MessageFieldError(0)) is ErrorKind.BAD_REQUEST
        assert classify_error(InvalidRoleError(0, 'bird')) is ErrorKind.BAD_REQUEST

    def test_empty_completion_is_unknown(self):
        assert classify_error(EmptyCompletionError('none')) is ErrorKind.UNKNOWN

    def test_plain_exception_is_unknown(self):
        assert classify_error(ConnectionError('down')) is ErrorKind.UNKNOWN

    def test_provider_error_without_status_is_unknown(self):
        assert classify_error(ProviderError('??')) is ErrorKind.UNKNOWN
