"""Load [tool.view-contract] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_SECTION = "view-contract"


class ConfigFileLoader:
    """
    Loads config from pyproject.toml. No top-level functions.
    """

    @staticmethod
    def find_pyproject(start: Optional[Path] = None) -> Optional[Path]:
        """First pyproject.toml found walking up from start (default: cwd)."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if config_file.is_file():
                return config_file
        return None

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Load [tool.view-contract] from the nearest pyproject.toml; {} when absent."""
        config_file = ConfigFileLoader.find_pyproject(start)
        if config_file is None:
            return {}
        try:
            with config_file.open("rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Ignoring unreadable %s: %s", config_file, exc)
            return {}
        tool_section = data.get("tool", {}) or {}
        config_dict = tool_section.get(CONFIG_SECTION, {}) or {}
        if not isinstance(config_dict, dict):
            logger.warning("[tool.%s] in %s is not a table; ignoring it",
                           CONFIG_SECTION, config_file)
            return {}
        logger.debug("Loaded [tool.%s] from %s", CONFIG_SECTION, config_file)
        return config_dict
