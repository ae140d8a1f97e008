"""
Environment-driven settings for the utilkit command line.

The library functions read no configuration; only the CLI front end
consults these values (log level and default output format).
"""

import os


def env_bool(name: str, default: bool = False) -> bool:
    return str(os.getenv(name, str(default))).strip().lower() in {"1", "true", "yes", "on", "y", "t"}


class Settings:
    # Logging
    LOG_LEVEL = os.getenv("UTILKIT_LOG_LEVEL", "WARNING").upper()
    DEBUG = env_bool("UTILKIT_DEBUG", False)

    # CLI
    OUTPUT_FORMAT = os.getenv("UTILKIT_OUTPUT", "text").lower()
