# -*- coding: utf-8 -*-
"""
Registration Store Abstraction Layer.

The wizard never talks to a backend directly. The organization directory
and the submission endpoint are reached through a RegistrationStore:
- LocalRegistrationStore: in-memory directory, optional JSON persistence
- HttpRegistrationStore: REST backend
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from models.registration import Organization, RegistrationDraft


class StoreType(Enum):
    """Supported registration store types."""
    LOCAL = "local"
    HTTP = "http"


@dataclass
class StoreResponse:
    """Standardized store response wrapper."""
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def ok(cls, data: Any = None) -> 'StoreResponse':
        """Create a successful response."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str, code: str = None) -> 'StoreResponse':
        """Create an error response."""
        return cls(success=False, error=message, error_code=code)


class RegistrationStore(ABC):
    """
    Abstract base class for registration stores.

    Implementations are black boxes to the wizard: the directory is read
    once at startup, and a draft is submitted once per registration.
    """

    @property
    @abstractmethod
    def store_type(self) -> StoreType:
        """Return the type of this store."""
        pass

    @abstractmethod
    def get_schools(self) -> List[Organization]:
        """Return the organization directory."""
        pass

    @abstractmethod
    def submit_form(self, draft: RegistrationDraft) -> StoreResponse:
        """
        Submit a finished registration.

        Returns a StoreResponse whose ``data`` is a SubmissionReceipt on success.
        """
        pass

    def find_school(self, school_id: str) -> Optional[Organization]:
        """Look up a single organization by id."""
        for school in self.get_schools():
            if school.id == school_id:
                return school
        return None
