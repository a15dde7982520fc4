"""Application configuration for showdown."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self


@dataclass
class EvaluationConfig:
    """Configuration for classifying hands at a showdown."""

    max_workers: int = 1  # >1 classifies hands on a thread pool


@dataclass
class DisplayConfig:
    """Configuration for the command-line output."""

    unicode_suits: bool = True


@dataclass
class Config:
    """Application configuration."""

    evaluation: EvaluationConfig = field(default_factory=EvaluationConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def load(cls) -> Self:
        """Load config from file, falling back to defaults."""
        config_paths = [
            Path.cwd() / "showdown.toml",
            Path.cwd() / ".showdown.toml",
            Path.home() / ".config" / "showdown" / "config.toml",
            Path.home() / ".showdown.toml",
        ]

        for path in config_paths:
            if path.exists():
                return cls._from_file(path)

        return cls()

    @classmethod
    def _from_file(cls, path: Path) -> Self:
        """Load config from a TOML file."""
        with open(path, "rb") as f:
            data = tomllib.load(f)

        eval_data = data.get("evaluation", {})
        evaluation = EvaluationConfig(
            max_workers=max(1, int(eval_data.get("max_workers", 1))),
        )

        display_data = data.get("display", {})
        display = DisplayConfig(
            unicode_suits=bool(display_data.get("unicode_suits", True)),
        )

        return cls(evaluation=evaluation, display=display)


# Global config instance (loaded lazily)
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config
