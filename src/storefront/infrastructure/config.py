"""Process configuration.

Settings are loaded once when the process starts and passed explicitly
to the composition root.  Nothing reads the environment after that.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Default data directory: <repo root>/data when installed in editable mode.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    currency: str = "USD"
    log_level: str = "WARNING"


def load_settings(env_file: Path | None = None) -> Settings:
    """Build Settings from the environment, after loading an optional .env file.

    Recognised variables:
    - STOREFRONT_DATA_DIR: directory holding the JSON stores
    - STOREFRONT_CURRENCY: ISO currency code for new prices (default USD)
    - STOREFRONT_LOG_LEVEL: logging level name (default WARNING)
    """
    load_dotenv(dotenv_path=env_file)

    data_dir = os.getenv("STOREFRONT_DATA_DIR")
    return Settings(
        data_dir=Path(data_dir) if data_dir else _DEFAULT_DATA_DIR,
        currency=os.getenv("STOREFRONT_CURRENCY", "USD").strip().upper(),
        log_level=os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").strip().upper(),
    )
