# -*- coding: utf-8 -*-
"""
Registration draft, organization directory entry and submission receipt.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional
import uuid

DEFAULT_COUNTRY_CODE = "+91"

# Python attribute -> wire name used by the registration backend
_WIRE_NAMES = {
    "full_name": "fullName",
    "email": "email",
    "phone": "phone",
    "class_name": "class",
    "section": "section",
    "country_code": "countryCode",
    "photo": "photo",
    "opt_in_similar_events": "optInSimilarEvents",
    "organization_id": "organizationId",
}


@dataclass
class RegistrationDraft:
    """
    One person's in-progress registration.

    Filled in by the form screen, read by Preview, Reading and Success.
    """

    full_name: str = ""
    email: str = ""
    phone: str = ""
    class_name: str = ""
    section: str = ""
    country_code: str = DEFAULT_COUNTRY_CODE
    photo: str = ""  # path to the uploaded photo
    opt_in_similar_events: bool = True

    # Pre-selected by a deep link (?org=...)
    organization_id: str = ""

    @property
    def full_phone(self) -> str:
        """Phone number with its country code."""
        if not self.phone:
            return ""
        return f"{self.country_code} {self.phone}".strip()

    def is_default(self) -> bool:
        """True when no field differs from a fresh draft."""
        return self == RegistrationDraft()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the backend field names."""
        return {wire: getattr(self, attr) for attr, wire in _WIRE_NAMES.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RegistrationDraft':
        """Create from a dictionary with either wire or attribute names."""
        kwargs = {}
        for attr, wire in _WIRE_NAMES.items():
            if wire in data:
                kwargs[attr] = data[wire]
            elif attr in data:
                kwargs[attr] = data[attr]
        return cls(**kwargs)


@dataclass(frozen=True)
class Organization:
    """School / club from the organization directory."""
    id: str
    name: str
    city: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Organization':
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            city=data.get("city", "") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "city": self.city}


def generate_reference_number(prefix: str = "PLG") -> str:
    """
    Generate a unique pledge reference number.

    Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
    Example: PLG-20260118153045-A3F2
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_id = str(uuid.uuid4())[:4].upper()
    return f"{prefix}-{timestamp}-{short_id}"


def _parse_timestamp(value: Any, fallback: datetime) -> datetime:
    """ISO-8601 timestamp from the backend; ``fallback`` when unreadable."""
    if not isinstance(value, str):
        return fallback
    if value.endswith("Z"):
        # fromisoformat only accepts "Z" from Python 3.11 on
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return fallback


@dataclass
class SubmissionReceipt:
    """Acknowledgement returned by the store for an accepted registration."""
    reference_number: str = field(default_factory=generate_reference_number)
    submitted_at: datetime = field(default_factory=datetime.now)
    organization_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SubmissionReceipt':
        receipt = cls()
        if data.get("referenceNumber"):
            receipt.reference_number = data["referenceNumber"]
        if data.get("submittedAt"):
            receipt.submitted_at = _parse_timestamp(data["submittedAt"], receipt.submitted_at)
        receipt.organization_id = data.get("organizationId") or None
        return receipt

    def to_dict(self) -> Dict[str, Any]:
        return {
            "referenceNumber": self.reference_number,
            "submittedAt": self.submitted_at.isoformat(),
            "organizationId": self.organization_id,
        }
