"""Load [tool.codestyle-linter] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

_SECTION = "codestyle-linter"


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml."""

    @staticmethod
    def find_pyproject(start: Path | None = None) -> Path | None:
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if config_file.is_file():
                return config_file
        return None

    @staticmethod
    def load_config_from_fs(
        start: Path | None = None,
    ) -> tuple[dict[str, object], Path | None]:
        """Return (config_dict, project_root) for the nearest pyproject.toml."""
        config_file = ConfigFileLoader.find_pyproject(start)
        if config_file is None:
            return ({}, None)
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except (OSError, toml_lib.TOMLDecodeError) as exc:
            logging.warning("Could not read %s: %s", config_file, exc)
            return ({}, config_file.parent)
        tool_section = data.get("tool", {}) or {}
        config_dict = tool_section.get(_SECTION, {}) or {}
        return (config_dict, config_file.parent)
