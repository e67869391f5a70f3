"""
pytest configuration for zoho_oauth2 tests.

Adds src directory to Python path for imports and isolates tests from
ZOHO_* variables in the developer's environment.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

ZOHO_ENV_VARS = (
    "ZOHO_CLIENT_ID",
    "ZOHO_CLIENT_SECRET",
    "ZOHO_REDIRECT_URI",
    "ZOHO_DC",
    "ZOHO_SCOPES",
)


@pytest.fixture(autouse=True)
def _clean_zoho_env(monkeypatch):
    for name in ZOHO_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def zoho_config():
    from zoho_oauth2.config import ZohoConfig

    return ZohoConfig(
        client_id="test_client",
        client_secret="test-cs",
        redirect_uri="https://app.example.com/oauth/zoho/callback",
    )
