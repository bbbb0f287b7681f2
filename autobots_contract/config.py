# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration management for the contract linter."""

import os
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .exceptions import ContractLoadError
from .utils.logging_utils import configure_split_stream_logging

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".autobots.yaml"


_TRUTHY = ("1", "true", "yes", "on")


def _parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def _env_flag(name: str, default: str) -> bool:
    return _parse_flag(os.getenv(name, default))


@dataclass
class LinterConfig:
    """Configuration class for the contract linter."""
    log_level: str = "INFO"
    print_level: str = "ERROR"
    cache_enabled: bool = True

    @classmethod
    def from_env(cls) -> 'LinterConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('AUTOBOTS_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('AUTOBOTS_PRINT_LEVEL', 'ERROR'),
            cache_enabled=_env_flag('AUTOBOTS_CACHE_ENABLED', 'true'),
        )

    @staticmethod
    def default_config_paths() -> List[Path]:
        return [Path.cwd() / CONFIG_FILE_NAME, Path.home() / CONFIG_FILE_NAME]

    @classmethod
    def load(cls, config_file: Optional[Union[str, Path]] = None) -> 'LinterConfig':
        """Build configuration from the environment and an optional YAML file.

        Keys in the file override environment values. An explicit
        ``config_file`` must exist; the default locations are optional.

        Raises:
            ContractLoadError: If the config file is missing or malformed.
        """
        config = cls.from_env()

        if config_file is not None:
            path = Path(config_file)
            if not path.is_file():
                raise ContractLoadError(f"Config file not found: {path}")
        else:
            path = next((p for p in cls.default_config_paths() if p.is_file()), None)
            if path is None:
                return config

        logger.debug(f"Loading linter config: {path}")
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ContractLoadError(f"Failed to read config file {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ContractLoadError(f"Config file {path} must contain a mapping")
        return config.merged(data)

    def merged(self, overrides: Dict[str, Any]) -> 'LinterConfig':
        """Return a copy with known keys replaced; unknown keys are ignored."""
        known = {f.name for f in fields(self)}
        updates = {}
        for key, value in overrides.items():
            if key not in known:
                logger.debug(f"Ignoring unknown config key '{key}'")
                continue
            if key == "cache_enabled":
                value = _parse_flag(value)
            else:
                value = str(value)
            updates[key] = value
        return replace(self, **updates)

    def set_logging(self, verbose: bool = False) -> logging.Logger:
        """Setup logging based on configuration."""
        level = "DEBUG" if verbose else self.log_level
        configure_split_stream_logging(level=level, stderr_level=self.print_level)
        return logging.getLogger('autobots_contract')


# Global configuration instance
linter_config = LinterConfig.from_env()
