# utils/config.py
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from data.repository import DEFAULT_CART_FILE

DEFAULT_LOG_DIR = Path("data/logs")


@dataclass(frozen=True)
class Settings:
    cart_file: Path
    log_dir: Path
    log_level: str


def load_settings(env_file: str | Path | None = None) -> Settings:
    # Values already in the environment win over the .env file.
    load_dotenv(env_file)
    return Settings(
        cart_file=Path(os.getenv("SHOPPING_CART_FILE", str(DEFAULT_CART_FILE))),
        log_dir=Path(os.getenv("SHOPPING_CART_LOG_DIR", str(DEFAULT_LOG_DIR))),
        log_level=os.getenv("SHOPPING_CART_LOG_LEVEL", "INFO").upper(),
    )
