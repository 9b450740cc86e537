"""Configuration loader for linter settings."""

import logging
from typing import ClassVar, Optional

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Typed view over the [tool.view-contract] table.

    The contract identities themselves (IView, MonoBehaviour, ...) are fixed
    and cannot be configured here.
    """

    KNOWN_KEYS: ClassVar[frozenset[str]] = frozenset(
        {"exclude_paths", "create_backups", "log_level"})
    LOG_LEVELS: ClassVar[tuple[str, ...]] = (
        "CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

    def __init__(self, config_dict: Optional[dict[str, object]] = None) -> None:
        self._config: dict[str, object] = dict(config_dict or {})
        self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about keys this linter does not understand."""
        for key in sorted(set(config) - self.KNOWN_KEYS):
            logger.warning("Configuration Warning: unknown key '%s' in [tool.view-contract] is ignored.", key)

    @property
    def config(self) -> dict[str, object]:
        return dict(self._config)

    @property
    def exclude_paths(self) -> list[str]:
        """Path fragments skipped by check and fix."""
        raw = self._config.get("exclude_paths", [])
        if isinstance(raw, str):
            return [raw]
        if not isinstance(raw, list):
            logger.warning("Configuration Warning: 'exclude_paths' must be a list of strings.")
            return []
        return [str(item) for item in raw]

    @property
    def create_backups(self) -> bool:
        return bool(self._config.get("create_backups", False))

    @property
    def log_level(self) -> str:
        level = str(self._config.get("log_level", "WARNING")).upper()
        if level not in self.LOG_LEVELS:
            logger.warning("Configuration Warning: unknown log_level '%s'; using WARNING.", level)
            return "WARNING"
        return level

    def is_excluded(self, path: str) -> bool:
        normalized = path.replace("\\", "/")
        return any(fragment and fragment in normalized for fragment in self.exclude_paths)
