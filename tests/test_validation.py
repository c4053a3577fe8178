"""Tests for the input checks shared by the services."""

import pytest

from autoservice_api.app.core.errors import ValidationFailedError
from autoservice_api.app.services.validation import MAX_INTEGER, require_non_negative


class TestRequireNonNegative:
    @pytest.mark.parametrize("value", [0, 1, MAX_INTEGER])
    def test_accepts_storable_values(self, value):
        assert require_non_negative("complexity", value) == value

    @pytest.mark.parametrize("value", [-1, MAX_INTEGER + 1, 10 ** 30])
    def test_rejects_unstorable_values(self, value):
        with pytest.raises(ValidationFailedError) as excinfo:
            require_non_negative("complexity", value)
        assert excinfo.value.field == "complexity"

    def test_rejects_bool(self):
        with pytest.raises(ValidationFailedError):
            require_non_negative("complexity", True)
