"""Load [tool.variant-registry] and [tool] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

from variant_registry.domain.constants import CONFIG_SECTION

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml walking up from a start directory."""

    @staticmethod
    def load_config_from_fs(
        start: Path | None = None,
    ) -> tuple[dict[str, object], dict[str, object]]:
        """Returns (config_dict, tool_section). Both empty when no pyproject.toml is found."""
        current_path = (start or Path.cwd()).resolve()
        empty: dict[str, object] = {}
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except OSError:
                continue
            except toml_lib.TOMLDecodeError as exc:
                logging.warning(
                    "Configuration Warning: cannot parse %s (%s). Using defaults.", config_file, exc)
                return (empty, empty)
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(CONFIG_SECTION, {}) or {}
            return (config_dict, tool_section)
        return (empty, empty)
