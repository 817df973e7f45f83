from dotenv import load_dotenv
import logging
import os

load_dotenv()

# Empty LOG_FILE turns the rotating file log off
LOG_FILE = os.getenv("LOG_FILE", "coffeeshop.log").strip()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    raise ValueError(f"Unknown LOG_LEVEL in .env: {LOG_LEVEL!r}")

_seed_env = os.getenv("SEED_MENU", "").strip().lower()
SEED_MENU = _seed_env in {"1", "true", "yes", "on"}
