"""Show the Zoho endpoints for a data center. Use --help for usage."""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from zoho_oauth2.config import load_config
from zoho_oauth2.exceptions import OAuth2Error
from zoho_oauth2.logging import set_log_context, setup_logging
from zoho_oauth2.models import AccessToken
from zoho_oauth2.providers.zoho import ZohoProvider
from zoho_oauth2.regions import Region

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m zoho_oauth2",
        description="Show Zoho OAuth2 endpoints for a data center",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Endpoints for the configured data center (ZOHO_* env vars or config file)
    python -m zoho_oauth2

    # Endpoints for the EU data center
    python -m zoho_oauth2 --region EU

    # Full consent URL
    python -m zoho_oauth2 --state abc123 --scope ZohoCRM.modules.ALL --scope aaaserver.profile.READ

    # JSON output for automation
    python -m zoho_oauth2 --json
        """,
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML config file (default: config/zoho.yaml)",
    )

    parser.add_argument(
        "--region",
        choices=[region.value for region in Region],
        default=None,
        help="Data center to resolve (default: from config, else US)",
    )

    parser.add_argument(
        "--state",
        default=None,
        help="Also print the authorization URL with this state value",
    )

    parser.add_argument(
        "--scope",
        action="append",
        default=None,
        help="Scope to request; repeat for several (default: configured or aaaserver.profile.READ)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of text",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser.parse_args(argv)


def describe_endpoints(
    provider: ZohoProvider,
    state: str | None = None,
    scopes: list[str] | None = None,
) -> dict[str, str]:
    """Resolved endpoint URLs for a provider."""
    endpoints = {
        "region": (provider.region or Region.US).value,
        "authorization_url": provider.authorization_url(),
        "token_url": provider.token_url(),
        "resource_owner_url": provider.resource_owner_url(AccessToken(access_token="")),
    }
    if state:
        endpoints["consent_url"] = provider.get_authorization_url(state=state, scopes=scopes)
    return endpoints


def main(argv: list[str] | None = None) -> int:
    load_dotenv(Path(".env"))
    args = parse_args(argv)

    setup_logging(level=getattr(logging, args.log_level))

    overrides = {"region": args.region} if args.region else None
    try:
        config = load_config(args.config, overrides=overrides)
    except OAuth2Error as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    set_log_context(provider=config.provider_name, region=config.region)
    provider = ZohoProvider(config)
    endpoints = describe_endpoints(provider, state=args.state, scopes=args.scope)

    if args.json:
        print(json.dumps(endpoints, indent=2))
    else:
        for name, url in endpoints.items():
            print(f"{name:20} {url}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
