"""Configuration for the registry. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from variant_registry.domain.constants import (
    DEFAULT_ENABLED_KINDS,
    DEFAULT_LOG_LEVEL,
    VALID_LOG_LEVELS,
)


class ConfigurationLoader:
    """
    Immutable registry settings.

    Created by Infrastructure from (config_dict, tool_section). Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict, tool_section) at composition root.
    Wrongly typed values fall back to defaults.
    """

    def __init__(
        self,
        config_dict: dict[str, object],
        tool_section: dict[str, object] | None = None,
    ) -> None:
        self._config = config_dict
        self._tool_section = tool_section or {}
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about settings that will be ignored."""
        raw_kinds = config.get("enabled_kinds", [])
        if isinstance(raw_kinds, list):
            unknown = [k for k in raw_kinds if k not in DEFAULT_ENABLED_KINDS]
            if unknown:
                logging.warning(
                    "Configuration Warning: unknown kinds in 'enabled_kinds' ignored: %s",
                    ", ".join(str(k) for k in unknown),
                )
        level = config.get("log_level")
        if level is not None and str(level).upper() not in VALID_LOG_LEVELS:
            logging.warning(
                "Configuration Warning: invalid 'log_level' %r, using %s.",
                level, DEFAULT_LOG_LEVEL)

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def tool_section(self) -> dict[str, object]:
        return self._tool_section

    @property
    def enabled_kinds(self) -> list[str]:
        """Built-in kinds to register at bootstrap, in configured order."""
        raw = self._config.get("enabled_kinds")
        if not isinstance(raw, list):
            return list(DEFAULT_ENABLED_KINDS)
        return [k for k in raw if isinstance(k, str) and k in DEFAULT_ENABLED_KINDS]

    @property
    def aliases(self) -> dict[str, str]:
        """Extra keys mapped onto an enabled kind, e.g. {"novel": "book"}."""
        raw = self._config.get("aliases", {})
        if not isinstance(raw, dict):
            return {}
        return {
            str(alias): target
            for alias, target in raw.items()
            if isinstance(target, str)
        }

    @property
    def allow_overwrite(self) -> bool:
        raw = self._config.get("allow_overwrite", False)
        return raw if isinstance(raw, bool) else False

    @property
    def default_catalog(self) -> str:
        raw = self._config.get("default_catalog", "")
        return raw if isinstance(raw, str) else ""

    @property
    def log_level(self) -> str:
        raw = str(self._config.get("log_level", DEFAULT_LOG_LEVEL)).upper()
        return raw if raw in VALID_LOG_LEVELS else DEFAULT_LOG_LEVEL
