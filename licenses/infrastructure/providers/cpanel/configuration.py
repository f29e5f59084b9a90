"""
cPanel provider configuration.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from licenses.infrastructure.providers.configuration import (
    coerce_bool,
    known_fields,
    require,
)


@dataclass(frozen=True)
class CPanelConfiguration:
    """
    Credentials and options for the cPanel Manage2 API.

    Immutable for the lifetime of the provider it is given to.
    """

    username: str
    password: str
    group_id: Optional[str] = None
    debug: bool = False

    def __post_init__(self):
        """Validate required credentials."""
        require(self.username, "username")
        require(self.password, "password")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CPanelConfiguration":
        """
        Build configuration from a host framework mapping.

        Args:
            data: Mapping of configuration values; unknown keys are ignored

        Returns:
            CPanelConfiguration instance

        Raises:
            ValueError: If username or password is missing
        """
        values = known_fields(cls, data)
        values.setdefault("username", None)
        values.setdefault("password", None)
        values["debug"] = coerce_bool(values.get("debug", False))
        if values.get("group_id") is not None:
            values["group_id"] = str(values["group_id"])
        return cls(**values)

    def __repr__(self) -> str:
        return (
            f"CPanelConfiguration(username={self.username!r}, password='********', "
            f"group_id={self.group_id!r}, debug={self.debug!r})"
        )
