"""
Shared helpers for provider configuration objects.
"""
from dataclasses import fields
from typing import Any, Dict, Mapping

TRUTHY_STRINGS = ("1", "true", "yes", "on")


def coerce_bool(value: Any) -> bool:
    """Interpret a configuration flag that may arrive as a string."""
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_STRINGS
    return bool(value)


def known_fields(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only the keys that are fields of the configuration dataclass."""
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in data.items() if key in names}


def require(value: Any, name: str) -> None:
    """Raise ValueError when a required configuration value is empty."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"Configuration field '{name}' is required")
