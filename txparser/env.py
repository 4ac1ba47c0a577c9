"""Environment variable helpers."""

import os


def get_env_fallback(key: str, fallback: str) -> str:
    """Return the variable's value if it is set, even when empty, else the fallback."""
    return os.environ.get(key, fallback)