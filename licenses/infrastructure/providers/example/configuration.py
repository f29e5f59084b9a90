"""
Example provider configuration.
"""
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlparse

from licenses.infrastructure.providers.configuration import (
    coerce_bool,
    known_fields,
    require,
)


@dataclass(frozen=True)
class ExampleConfiguration:
    """API location and token for the example provider."""

    api_url: str
    api_token: str
    debug: bool = False

    def __post_init__(self):
        """Validate API url and token."""
        require(self.api_url, "api_url")
        require(self.api_token, "api_token")
        parsed = urlparse(self.api_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Invalid API url: {self.api_url}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExampleConfiguration":
        """Build configuration from a host framework mapping."""
        values = known_fields(cls, data)
        values.setdefault("api_url", None)
        values.setdefault("api_token", None)
        values["debug"] = coerce_bool(values.get("debug", False))
        return cls(**values)
