"""Parser configuration and its YAML loader.

Bundled defaults live in ``tapyaml/config/tap_yaml.yaml``. A project may
override any key in ``<project>/.tapyaml/tap_yaml.yaml``.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from tapyaml.constants import (
    BLOCK_INDENT,
    CONFIG_DIR,
    CONFIG_NAME,
    DEFAULT_ERROR_NAME,
    STACK_DELIMITER,
    ErrorCode,
)
from tapyaml.primitives.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TapYamlConfig:
    """Knobs for the line parser and error reconstructor."""

    stack_delimiter: str = STACK_DELIMITER
    block_indent: int = BLOCK_INDENT
    assertion_code: str = ErrorCode.ASSERTION
    test_failure_code: str = ErrorCode.TEST_FAILURE
    default_error_name: str = DEFAULT_ERROR_NAME

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TapYamlConfig":
        """Build a config, rejecting unknown keys and mistyped values."""
        known = {f.name: f for f in fields(cls)}
        for key, value in data.items():
            if key not in known:
                raise ConfigurationError(f"Unknown config key: {key}", field=key)
            expected_type = type(known[key].default)
            # bool is an int subclass, but not a valid indent
            if not isinstance(value, expected_type) or isinstance(value, bool):
                raise ConfigurationError(
                    f"Config key '{key}' must be {expected_type.__name__}, "
                    f"got {type(value).__name__}",
                    field=key,
                )
        if data.get("block_indent", BLOCK_INDENT) < 1:
            raise ConfigurationError(
                "Config key 'block_indent' must be positive", field="block_indent"
            )
        return cls(**data)


DEFAULT_CONFIG = TapYamlConfig()


class ConfigLoader:
    """Loads TapYamlConfig from bundled YAML defaults plus project overrides."""

    def __init__(self, config_name: str = CONFIG_NAME):
        self.config_name = config_name
        self._cache: Dict[str, TapYamlConfig] = {}

    def load(self, project_path: Optional[Path] = None) -> TapYamlConfig:
        """Load config with project overrides."""
        cache_key = str(project_path)
        if cache_key in self._cache:
            return self._cache[cache_key]

        system_path = Path(__file__).parent.parent / "config" / self.config_name
        config = self._load_yaml(system_path)

        if project_path is not None:
            project_config_path = Path(project_path) / CONFIG_DIR / self.config_name
            if project_config_path.exists():
                logger.debug(f"Merging project config: {project_config_path}")
                config = self._merge(config, self._load_yaml(project_config_path))

        result = TapYamlConfig.from_dict(config)
        self._cache[cache_key] = result
        return result

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config must be a mapping: {path}")
        return data

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Project keys replace the bundled ones."""
        result = dict(base)
        result.update(override)
        return result

    def clear_cache(self):
        self._cache.clear()


_config_loader: Optional[ConfigLoader] = None


def get_config_loader() -> ConfigLoader:
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def load(project_path: Optional[Path] = None) -> TapYamlConfig:
    return get_config_loader().load(project_path)
