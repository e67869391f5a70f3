"""Tests for logging context variables."""

import pytest

from zoho_oauth2.logging.context import clear_log_context, get_log_context, set_log_context
from zoho_oauth2.regions import Region


@pytest.fixture(autouse=True)
def clear_context():
    clear_log_context()
    yield
    clear_log_context()


class TestLogContext:
    def test_defaults_empty(self):
        assert get_log_context() == {"provider": "", "region": "", "trace_id": ""}

    def test_set_values(self):
        set_log_context(provider="zoho", region="AU", trace_id="t-1")
        assert get_log_context() == {"provider": "zoho", "region": "AU", "trace_id": "t-1"}

    def test_region_enum_stored_as_code(self):
        set_log_context(region=Region.CN)
        assert get_log_context()["region"] == "CN"

    def test_none_leaves_value_unchanged(self):
        set_log_context(provider="zoho")
        set_log_context(region="EU")
        assert get_log_context()["provider"] == "zoho"

    def test_clear(self):
        set_log_context(provider="zoho", region="EU", trace_id="t-1")
        clear_log_context()
        assert get_log_context() == {"provider": "", "region": "", "trace_id": ""}
