"""frontgen runtime configuration and settings."""
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from frontgen.core.errors import FrontgenError
from frontgen.core.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TEMPLATE_URL = "https://github.com/foxxyz/front-end-starter.git"
DEFAULT_LICENSE_REGISTRY_URL = "https://spdx.org/licenses/licenses.json"
DEFAULT_CONFIG_FILE = Path.home() / ".config" / "frontgen" / "config.yml"

ENV_VARS = {
    "template_url": "FRONTGEN_TEMPLATE_URL",
    "license_registry_url": "FRONTGEN_LICENSE_REGISTRY_URL",
    "package_manager": "FRONTGEN_PACKAGE_MANAGER",
    "network_timeout": "FRONTGEN_NETWORK_TIMEOUT",
    "default_author": "FRONTGEN_AUTHOR",
    "default_license": "FRONTGEN_LICENSE",
}


@dataclass
class FrontgenConfig:
    """Runtime configuration for a generator run.

    Attributes:
        template_url: Repository cloned as the starting point of every project
        license_registry_url: SPDX license list (JSON)
        package_manager: Executable used to install dependencies (default: npm)
        network_timeout: Seconds to wait on registry requests (default: no timeout)
        default_author: Author offered when prompting (default: empty)
        default_license: License offered when prompting (default: MIT)
    """

    template_url: str = DEFAULT_TEMPLATE_URL
    license_registry_url: str = DEFAULT_LICENSE_REGISTRY_URL
    package_manager: str = "npm"
    network_timeout: Optional[float] = None
    default_author: str = ""
    default_license: str = "MIT"

    @classmethod
    def from_file(cls, path: Path) -> Dict[str, Any]:
        """Read settings from a YAML file, ignoring unknown keys."""
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            logger.warning(f"Ignoring config file {path}: expected a mapping")
            return {}

        known = {field.name for field in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            logger.warning(f"Ignoring unknown settings in {path}: {', '.join(unknown)}")
        return {key: value for key, value in raw.items() if key in known}

    @classmethod
    def load(cls, config_file: Optional[Path] = None) -> "FrontgenConfig":
        """Create config from defaults, a YAML file, then environment variables.

        Environment variables:
            FRONTGEN_CONFIG: Path to the YAML config file
            FRONTGEN_TEMPLATE_URL: Template repository URL
            FRONTGEN_LICENSE_REGISTRY_URL: SPDX license list URL
            FRONTGEN_PACKAGE_MANAGER: Dependency installer executable
            FRONTGEN_NETWORK_TIMEOUT: Registry request timeout in seconds
            FRONTGEN_AUTHOR: Default author
            FRONTGEN_LICENSE: Default license

        Returns:
            FrontgenConfig instance
        """
        if config_file is None:
            env_file = os.environ.get("FRONTGEN_CONFIG")
            config_file = Path(env_file) if env_file else DEFAULT_CONFIG_FILE

        values: Dict[str, Any] = {}
        if config_file.exists():
            logger.debug(f"Loading settings from {config_file}")
            values.update(cls.from_file(config_file))

        for key, var in ENV_VARS.items():
            if var in os.environ:
                values[key] = os.environ[var]

        if values.get("network_timeout") is not None:
            try:
                values["network_timeout"] = float(values["network_timeout"])
            except (TypeError, ValueError):
                raise FrontgenError(
                    f"Invalid network_timeout '{values['network_timeout']}' "
                    f"(set by FRONTGEN_NETWORK_TIMEOUT or {config_file}): expected seconds as a number"
                )

        return cls(**values)


# Global config instance (can be overridden)
_config: Optional[FrontgenConfig] = None


def get_config() -> FrontgenConfig:
    """Get the global frontgen configuration.

    Returns:
        FrontgenConfig instance (loaded from file and environment if not set)
    """
    global _config
    if _config is None:
        _config = FrontgenConfig.load()
    return _config


def set_config(config: Optional[FrontgenConfig]) -> None:
    """Override the global configuration (None forces a reload)."""
    global _config
    _config = config
