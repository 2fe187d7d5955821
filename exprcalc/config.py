# config.py

"""Configuration for the command-line calculator, read from the environment and .env."""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_HISTORY_FILE = "~/.exprcalc_history"
DEFAULT_PROMPT = "> "


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    history_file: str = os.path.expanduser(DEFAULT_HISTORY_FILE)
    prompt: str = DEFAULT_PROMPT


def load_settings() -> Settings:
    """
    Build Settings from EXPRCALC_* environment variables.

    The nearest .env file, searched upward from the working directory, is loaded first.
    Variables already set in the environment take precedence over it.
    """
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        log_level=os.getenv("EXPRCALC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        history_file=os.path.expanduser(os.getenv("EXPRCALC_HISTORY_FILE", DEFAULT_HISTORY_FILE)),
        prompt=os.getenv("EXPRCALC_PROMPT", DEFAULT_PROMPT),
    )
