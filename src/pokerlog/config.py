"""Application configuration for pokerlog."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self


@dataclass
class TableConfig:
    """Defaults for the table a hand is recorded at."""

    default_seat_count: int = 9
    hero_name: str = "Hero"


@dataclass
class SessionDefaults:
    """Values used for a session that doesn't set its own."""

    blind_level: str = ""
    points_per_hundred_bb: float = 0.0


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class Config:
    """Application configuration."""

    table: TableConfig = field(default_factory=TableConfig)
    session: SessionDefaults = field(default_factory=SessionDefaults)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls) -> Self:
        """Load config from file, falling back to defaults."""
        config_paths = [
            Path.cwd() / "pokerlog.toml",
            Path.cwd() / ".pokerlog.toml",
            Path.home() / ".config" / "pokerlog" / "config.toml",
            Path.home() / ".pokerlog.toml",
        ]

        for path in config_paths:
            if path.exists():
                return cls.from_file(path)

        return cls()

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load config from a TOML file."""
        with open(path, "rb") as f:
            data = tomllib.load(f)

        table_data = data.get("table", {})
        table = TableConfig(
            default_seat_count=table_data.get("default_seat_count", 9),
            hero_name=table_data.get("hero_name", "Hero"),
        )

        session_data = data.get("session", {})
        session = SessionDefaults(
            blind_level=session_data.get("blind_level", ""),
            points_per_hundred_bb=float(session_data.get("points_per_hundred_bb", 0.0)),
        )

        logging_data = data.get("logging", {})
        logging = LoggingConfig(level=str(logging_data.get("level", "WARNING")).upper())

        return cls(table=table, session=session, logging=logging)


# Global config instance (loaded lazily)
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config
