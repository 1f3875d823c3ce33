"""Runtime configuration read from the environment."""

import os


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


HOST = os.getenv("SNAKE_HOST", "0.0.0.0")
PORT = int(os.getenv("SNAKE_PORT", "8080"))
LOG_LEVEL = os.getenv("SNAKE_LOG_LEVEL", "INFO").upper()

# Reject ticks that are not a single unit step along one axis.
STRICT_TICKS = _env_flag("SNAKE_STRICT_TICKS")

# Snake spawn point and heading for a new game.
START_X = 0
START_Y = 0
START_VEL_X = 1
START_VEL_Y = 0
