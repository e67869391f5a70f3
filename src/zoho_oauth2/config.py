"""Zoho provider configuration from YAML file and environment.

Loads the ``zoho:`` section of a YAML file:

    zoho:
      client_id: ${ZOHO_CLIENT_ID}
      client_secret: ${ZOHO_CLIENT_SECRET}
      redirect_uri: https://app.example.com/oauth/zoho/callback
      region: ${ZOHO_DC:-US}
      scopes:
        - aaaserver.profile.READ
      access_type: offline

Environment variables ARE supported using ${VAR_NAME} and ${VAR_NAME:-default}
syntax in YAML files. ZOHO_* environment variables override file values.
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from zoho_oauth2.exceptions import InvalidConfigurationError
from zoho_oauth2.regions import Region

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("config") / "zoho.yaml"

# Environment variable -> ZohoConfig field
ENV_OVERRIDES = {
    "ZOHO_CLIENT_ID": "client_id",
    "ZOHO_CLIENT_SECRET": "client_secret",
    "ZOHO_REDIRECT_URI": "redirect_uri",
    "ZOHO_DC": "region",
    "ZOHO_SCOPES": "scopes",
}


def load_yaml(path: Path) -> Dict[str, Any]:
    """Load YAML file and return dict."""
    if not path.exists():
        return {}
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def _expand_env_vars(data: Any) -> Any:
    """Recursively expand ${VAR_NAME} and ${VAR_NAME:-default} environment variables in config data."""
    if isinstance(data, dict):
        return {key: _expand_env_vars(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        pattern = r"\$\{([^}:]+)(?::-(([^}]*))?)?\}"

        def replacer(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else match.group(0)
            return os.getenv(var_name, default_value)

        return re.sub(pattern, replacer, data)
    else:
        return data


def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge overlay into base; overlay wins on conflicts."""
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _parse_scopes(value: Any) -> Optional[list[str]]:
    """Accept a list or a comma/space separated string."""
    if not value:
        return None
    if isinstance(value, str):
        value = re.split(r"[,\s]+", value)
    scopes = [str(scope).strip() for scope in value if str(scope).strip()]
    return scopes or None


@dataclass(frozen=True)
class ZohoConfig:
    """
    Zoho OAuth2 client configuration.

    Attributes:
        client_id: OAuth2 client ID from the Zoho API console
        client_secret: OAuth2 client secret
        redirect_uri: Callback URL registered for the client
        region: Data center the account lives in; None means the US default
        scopes: Scopes to request; None means the provider defaults
        access_type: "offline" to receive a refresh token, "online" otherwise
        prompt: "consent" to force the consent screen
        provider_name: Identifier used in logs
    """

    client_id: str
    client_secret: str
    redirect_uri: str
    region: Optional[Region] = None
    scopes: Optional[tuple[str, ...]] = None
    access_type: Optional[str] = None
    prompt: Optional[str] = None
    provider_name: str = "zoho"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ZohoConfig":
        """
        Build config from a plain mapping (the ``zoho:`` section).

        Unknown region codes are kept out of the config and logged; token
        requests then go to the US data center.
        """
        raw_region = data.get("region")
        region = Region.parse(raw_region)
        if raw_region and region is None:
            logger.warning(
                "Unknown Zoho data center, falling back to US",
                extra={"region": str(raw_region)},
            )

        scopes = _parse_scopes(data.get("scopes"))

        return cls(
            client_id=str(data.get("client_id") or ""),
            client_secret=str(data.get("client_secret") or ""),
            redirect_uri=str(data.get("redirect_uri") or ""),
            region=region,
            scopes=tuple(scopes) if scopes else None,
            access_type=data.get("access_type"),
            prompt=data.get("prompt"),
            provider_name=data.get("provider_name") or "zoho",
        )

    def validate(self) -> None:
        """
        Check that required credentials are present.

        Raises:
            InvalidConfigurationError: If client_id, client_secret or redirect_uri is empty
        """
        missing = [
            name
            for name in ("client_id", "client_secret", "redirect_uri")
            if not getattr(self, name)
        ]
        if missing:
            raise InvalidConfigurationError(f"{', '.join(missing)} required")


def _env_overrides() -> Dict[str, Any]:
    overrides = {}
    for env_var, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            overrides[field_name] = value
    return overrides


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
    env_file: Optional[Path] = None,
) -> ZohoConfig:
    """Load Zoho configuration.

    Priority: overrides > ZOHO_* environment variables > YAML file.
    A missing file is allowed when everything comes from the environment.

    Raises:
        InvalidConfigurationError: If the file has no ``zoho:`` section or credentials are missing
    """
    if env_file is not None:
        load_dotenv(env_file)

    if config_path is None:
        config_path = DEFAULT_CONFIG_FILE

    zoho_config: Dict[str, Any] = {}
    if config_path.exists():
        logger.info(f"Loading configuration from file: {config_path}")
        yaml_data = _expand_env_vars(load_yaml(config_path))
        if "zoho" not in yaml_data:
            raise InvalidConfigurationError(
                f"Invalid config file {config_path}: missing 'zoho:' section\n"
                "See config.yaml.example for correct structure"
            )
        zoho_config = yaml_data["zoho"] or {}
    else:
        logger.debug(f"No configuration file at {config_path}, using environment only")

    zoho_config = _deep_merge(zoho_config, _env_overrides())

    if overrides:
        logger.debug(f"Applying overrides: {list(overrides.keys())}")
        zoho_config = _deep_merge(zoho_config, overrides)

    config = ZohoConfig.from_dict(zoho_config)
    config.validate()

    logger.debug(
        "Configuration loaded successfully",
        extra={"provider": config.provider_name, "region": config.region},
    )
    return config


_zoho_config: Optional[ZohoConfig] = None


def get_config() -> ZohoConfig:
    """Get or load the singleton Zoho config instance."""
    global _zoho_config
    if _zoho_config is None:
        _zoho_config = load_config()
    return _zoho_config


def set_config(config: ZohoConfig) -> None:
    """Set the singleton Zoho config instance (useful for testing)."""
    global _zoho_config
    _zoho_config = config


def reset_config() -> None:
    """Reset the singleton config instance (forces reload on next get_config() call)."""
    global _zoho_config
    _zoho_config = None


__all__ = [
    "ZohoConfig",
    "load_config",
    "load_yaml",
    "get_config",
    "set_config",
    "reset_config",
]
