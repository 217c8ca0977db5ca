"""Deployment settings loader with multi-level hierarchy."""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .weights import deep_merge

# Load environment variables from .env file
load_dotenv()

ENV_PREFIX = "TALENTRANK_"
# Variables read directly rather than mapped into the config tree
_RESERVED_ENV_KEYS = {"TALENTRANK_ENV", "TALENTRANK_CONFIG_DIR"}


class ConfigLoader:
    """Load and merge deployment settings from multiple sources.

    Hierarchy (later overrides earlier):
    1. Default settings (config/default.yaml)
    2. Environment settings (config/environments/{env}.yaml)
    3. Tenant settings (config/tenants/{tenant_id}.yaml) [optional]
    4. Programmatic overrides [optional]
    5. Environment variables (TALENTRANK_*, "__" separates nested keys)
    """

    def __init__(self, config_dir: Path | str | None = None):
        """Initialize config loader.

        Args:
            config_dir: Settings directory (defaults to $TALENTRANK_CONFIG_DIR or ./config)
        """
        if config_dir is None:
            config_dir = os.getenv("TALENTRANK_CONFIG_DIR") or (
                Path(__file__).parent.parent.parent.parent / "config"
            )
        self.config_dir = Path(config_dir)

    def load(
        self,
        tenant_id: str | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Load settings with full hierarchy.

        Args:
            tenant_id: Tenant identifier (for tenant settings files)
            overrides: Settings provided programmatically

        Returns:
            Merged settings dictionary
        """
        config = self._load_yaml(self.config_dir / "default.yaml")

        env = os.getenv("TALENTRANK_ENV", "development")
        env_config_path = self.config_dir / f"environments/{env}.yaml"
        if env_config_path.exists():
            config = deep_merge(config, self._load_yaml(env_config_path))

        if tenant_id:
            tenant_config_path = self.config_dir / f"tenants/{tenant_id}.yaml"
            if tenant_config_path.exists():
                config = deep_merge(config, self._load_yaml(tenant_config_path))

        if overrides:
            config = deep_merge(config, overrides)

        return self._apply_env_overrides(config)

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load YAML file.

        Args:
            path: Path to YAML file

        Returns:
            Parsed YAML as dictionary (empty if missing)
        """
        if not path.exists():
            return {}

        with open(path) as f:
            content = yaml.safe_load(f)
            return content if content else {}

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Override settings with environment variables.

        Example: TALENTRANK_SCORING__GUARDRAILS__SHORTLIST_MAX_CANDIDATES=8 overrides
        config["scoring"]["guardrails"]["shortlist_max_candidates"].

        Args:
            config: Settings dictionary

        Returns:
            Settings with environment variable overrides
        """
        for key, value in sorted(os.environ.items()):
            if not key.startswith(ENV_PREFIX) or key in _RESERVED_ENV_KEYS:
                continue
            path = [part for part in key[len(ENV_PREFIX):].lower().split("__") if part]
            if path:
                self._set_nested(config, path, value)

        return config

    def _set_nested(self, config: dict[str, Any], path: list[str], value: str) -> None:
        """Set nested settings value.

        Args:
            config: Settings dictionary
            path: Path to nested key (e.g., ["scoring", "location_partial_score"])
            value: Value to set
        """
        current = config
        for key in path[:-1]:
            if key not in current:
                current[key] = {}
            elif not isinstance(current[key], dict):
                # Can't traverse non-dict
                return
            current = current[key]

        current[path[-1]] = self._convert_value(value)

    def _convert_value(self, value: str) -> Any:
        """Convert string value to bool, int, float, or str."""
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value


# Global config loader instance
_config_loader: ConfigLoader | None = None


def get_config_loader() -> ConfigLoader:
    """Get global configuration loader instance."""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def load_config(
    tenant_id: str | None = None,
    overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Load deployment settings (convenience function).

    Args:
        tenant_id: Tenant identifier
        overrides: Settings provided programmatically

    Returns:
        Merged settings dictionary
    """
    loader = get_config_loader()
    return loader.load(tenant_id=tenant_id, overrides=overrides)
