# -*- coding: utf-8 -*-
"""
Local Registration Store.

Serves the organization directory from memory and keeps submitted
registrations in memory, optionally persisted to a JSON file so that
volunteers registered at an offline desk are not lost on restart.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from models.registration import Organization, RegistrationDraft, SubmissionReceipt
from services.exceptions import StoreException
from services.registration_store import RegistrationStore, StoreResponse, StoreType
from utils.logger import get_logger

logger = get_logger(__name__)


DEFAULT_SCHOOLS = (
    Organization(id="loyola-nature-club", name="Loyola Nature Club", city="Chennai"),
    Organization(id="besant-nagar-school", name="Besant Nagar Public School", city="Chennai"),
    Organization(id="marina-rotaract", name="Marina Rotaract Club", city="Chennai"),
    Organization(id="adyar-eco-collective", name="Adyar Eco Collective", city="Chennai"),
)


class LocalRegistrationStore(RegistrationStore):
    """
    In-memory registration store.

    Features:
    - Static organization directory (overridable)
    - Submissions kept in memory
    - Optional persistence of submissions to a JSON file
    """

    def __init__(
        self,
        schools: Optional[Iterable[Organization]] = None,
        data_file: Optional[Path] = None,
    ):
        self._schools: List[Organization] = list(schools if schools is not None else DEFAULT_SCHOOLS)
        self.data_file = Path(data_file) if data_file else None
        self._submissions: List[Dict[str, Any]] = []

        if self.data_file and self.data_file.exists():
            self._load_from_file()

    @property
    def store_type(self) -> StoreType:
        return StoreType.LOCAL

    @property
    def submissions(self) -> List[Dict[str, Any]]:
        """Submitted registrations (draft fields plus receipt)."""
        return list(self._submissions)

    def get_schools(self) -> List[Organization]:
        return list(self._schools)

    def submit_form(self, draft: RegistrationDraft) -> StoreResponse:
        receipt = SubmissionReceipt(organization_id=draft.organization_id or None)
        record = {**draft.to_dict(), **receipt.to_dict()}
        self._submissions.append(record)

        if self.data_file:
            try:
                self._save_to_file()
            except StoreException as e:
                self._submissions.pop()
                return StoreResponse.fail(e.message, "E_PERSIST")

        logger.info(f"Registration stored locally: {receipt.reference_number}")
        return StoreResponse.ok(receipt)

    def _load_from_file(self):
        """Load previous submissions from the JSON file."""
        try:
            with open(self.data_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            self._submissions = data.get("submissions", [])
            logger.info(f"Loaded {len(self._submissions)} registrations from {self.data_file}")
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading registrations from {self.data_file}: {e}")
            self._submissions = []

    def _save_to_file(self):
        """Write all submissions to the JSON file."""
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.data_file, 'w', encoding='utf-8') as f:
                json.dump({"submissions": self._submissions}, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error(f"Error saving registrations to {self.data_file}: {e}")
            raise StoreException(f"Could not save registration: {e}", context="local_store")
