"""Configuration utilities.

Values come from environment variables; a ``.env`` file in the working
directory is loaded first when present (existing variables win).
"""

import os

from dotenv import load_dotenv

load_dotenv()


def get_log_level() -> str:
    """
    Get the root log level name.

    Returns:
        Upper-cased LOG_LEVEL env var, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_app_version() -> str:
    """
    Get the application version.

    Returns:
        APP_VERSION env var, defaults to "0.0.0-dev"
    """
    return os.getenv("APP_VERSION", "0.0.0-dev")


def get_macro_target_tolerance() -> float:
    """
    Get the tolerance, in percentage points, for macronutrient targets
    that do not add up to 100 before a warning is logged.

    Returns:
        MACRO_TARGET_TOLERANCE env var as float, defaults to 0.5
        (also when the value is not a number)
    """
    raw = os.getenv("MACRO_TARGET_TOLERANCE", "0.5")
    try:
        return float(raw)
    except ValueError:
        return 0.5
