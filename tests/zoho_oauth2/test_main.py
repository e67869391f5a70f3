"""Tests for the endpoint inspection CLI."""

import json
import logging
from urllib.parse import parse_qs, urlparse

import pytest

from zoho_oauth2.__main__ import describe_endpoints, main, parse_args
from zoho_oauth2.providers.zoho import ZohoProvider
from zoho_oauth2.regions import Region


@pytest.fixture(autouse=True)
def credentials(_clean_zoho_env, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ZOHO_CLIENT_ID", "cli-client")
    monkeypatch.setenv("ZOHO_CLIENT_SECRET", "cli-cs")
    monkeypatch.setenv("ZOHO_REDIRECT_URI", "https://app.example.com/cb")


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.region is None
        assert args.state is None
        assert args.scope is None
        assert not args.json

    def test_rejects_unknown_region(self):
        with pytest.raises(SystemExit):
            parse_args(["--region", "XX"])

    def test_repeated_scope(self):
        args = parse_args(["--scope", "a", "--scope", "b"])
        assert args.scope == ["a", "b"]


class TestDescribeEndpoints:
    def test_unset_region_reports_us(self, zoho_config):
        endpoints = describe_endpoints(ZohoProvider(zoho_config))

        assert endpoints == {
            "region": "US",
            "authorization_url": "https://accounts.zoho.com/oauth/v2/auth",
            "token_url": "https://accounts.zoho.com/oauth/v2/token",
            "resource_owner_url": "https://accounts.zoho.com/oauth/user/info",
        }

    def test_consent_url_with_state(self, zoho_config):
        endpoints = describe_endpoints(ZohoProvider(zoho_config), state="abc", scopes=["x", "y"])
        query = parse_qs(urlparse(endpoints["consent_url"]).query)

        assert query["state"] == ["abc"]
        assert query["scope"] == ["x,y"]


class TestMain:
    def test_json_output_for_region(self, capsys):
        assert main(["--region", "AU", "--json"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["region"] == Region.AU.value
        assert output["authorization_url"] == "https://accounts.zoho.com/oauth/v2/auth"
        assert output["token_url"] == "https://accounts.zoho.com.au/oauth/v2/token"

    def test_text_output(self, capsys):
        assert main(["--region", "CN"]) == 0

        out = capsys.readouterr().out
        assert "https://accounts.zoho.com.cn/oauth/v2/auth" in out
        assert "https://accounts.zoho.com.cn/oauth/v2/token" in out

    def test_missing_credentials_exit_code(self, monkeypatch):
        monkeypatch.delenv("ZOHO_CLIENT_ID")
        assert main([]) == 1
