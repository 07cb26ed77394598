"""Runtime configuration read from the environment (and a local .env file)."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

CURRENCY = os.getenv("PIZZA_CURRENCY", "Bs")

# unknown level names fall back to INFO
LOG_LEVEL = logging.getLevelName(os.getenv("PIZZA_LOG_LEVEL", "INFO").strip().upper())
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.INFO


def format_amount(amount: float) -> str:
    return f"{CURRENCY}{amount:.2f}"
