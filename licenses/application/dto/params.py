"""
Parameter DTOs for provider lifecycle operations.

One dataclass per operation; providers read only the fields they need.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class CreateParams:
    """Parameters for creating a license."""

    package_identifier: Optional[str] = None
    ip: Optional[str] = None
    domain: Optional[str] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class GetUsageParams:
    """Parameters for fetching license usage data."""

    license_key: str
    package_identifier: Optional[str] = None


@dataclass
class ChangePackageParams:
    """Parameters for moving a license to another package."""

    license_key: str
    package_identifier: Optional[str] = None


@dataclass
class ReissueParams:
    """Parameters for reissuing a license."""

    license_key: str
    ip: Optional[str] = None
    domain: Optional[str] = None


@dataclass
class SuspendParams:
    """Parameters for suspending a license."""

    license_key: str
    reason: Optional[str] = None


@dataclass
class UnsuspendParams:
    """Parameters for unsuspending a license."""

    license_key: str


@dataclass
class TerminateParams:
    """Parameters for terminating a license."""

    license_key: str
