"""Runtime settings.

Values come from the environment, optionally seeded from a ``.env``
file in the working directory.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class ConfigurationError(Exception):
    """Raised when a setting is present but unusable."""


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    public_dir: Path
    log_level: int = logging.WARNING

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def session_file(self) -> Path:
        return self.data_dir / "session.json"

    @property
    def storage_root(self) -> Path:
        """Root of the private asset area."""
        return self.data_dir

    @classmethod
    def from_env(cls) -> Settings:
        load_dotenv()
        data_dir = Path(
            os.environ.get("STOREFRONT_DATA_DIR", _PROJECT_ROOT / "data")
        )
        public_dir = Path(
            os.environ.get("STOREFRONT_PUBLIC_DIR", data_dir / "public")
        )
        return cls(
            data_dir=data_dir,
            public_dir=public_dir,
            log_level=_parse_level(os.environ.get("STOREFRONT_LOG_LEVEL", "WARNING")),
        )


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {name!r}")
    return level
