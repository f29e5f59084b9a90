"""
Result DTOs for provider lifecycle operations.
"""
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ResultData:
    """Base DTO for operation results."""

    message: str = ""
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return the result as a plain dictionary."""
        return asdict(self)


@dataclass
class EmptyResult(ResultData):
    """DTO for operations that only report success."""


@dataclass
class CreateResult(ResultData):
    """DTO for create license result."""

    license_key: str = ""
    package_identifier: Optional[str] = None


@dataclass
class GetUsageResult(ResultData):
    """DTO for license usage result."""

    usage_data: Optional[Dict[str, Any]] = None
    units_consumed: Optional[int] = None


@dataclass
class ChangePackageResult(ResultData):
    """DTO for change package result."""

    license_key: str = ""
    package_identifier: str = ""


@dataclass
class ReissueResult(ResultData):
    """DTO for reissue license result."""

    license_key: str = ""
