# -*- coding: utf-8 -*-
"""
Registration Store Factory.

Centralizes creation of the registration store selected by configuration.
"""

from pathlib import Path
from typing import Optional

from app.config import Config
from .registration_store import RegistrationStore, StoreType
from .local_registration_store import LocalRegistrationStore
from .http_registration_store import HttpRegistrationStore
from utils.logger import get_logger

logger = get_logger(__name__)


class StoreConfig:
    """Configuration for the registration store."""

    def __init__(
        self,
        store_type: StoreType = StoreType.LOCAL,
        # Local store settings
        local_data_file: Optional[Path] = None,
        # HTTP store settings
        http_base_url: str = "http://localhost:8080/api",
        http_timeout: int = 15,
    ):
        self.store_type = store_type
        self.local_data_file = local_data_file
        self.http_base_url = http_base_url
        self.http_timeout = http_timeout

    @classmethod
    def from_env(cls) -> 'StoreConfig':
        """
        Load configuration from Config (environment / .env).

        Environment variables:
        - REGISTRATION_STORE: "local" or "http"
        - LOCAL_STORE_FILE: JSON file for locally stored registrations
        - REGISTRATION_API_URL: Base URL for the HTTP store
        - REGISTRATION_API_TIMEOUT: Request timeout in seconds
        """
        store_str = (Config.REGISTRATION_STORE or "local").lower()
        if store_str in ("http", "api"):
            store_type = StoreType.HTTP
        else:
            store_type = StoreType.LOCAL

        return cls(
            store_type=store_type,
            local_data_file=Path(Config.LOCAL_STORE_FILE) if Config.LOCAL_STORE_FILE else None,
            http_base_url=Config.REGISTRATION_API_URL,
            http_timeout=Config.REGISTRATION_API_TIMEOUT,
        )


def create_store(config: Optional[StoreConfig] = None) -> RegistrationStore:
    """
    Create the registration store.

    Args:
        config: Store configuration. If None, loads from environment.
    """
    if config is None:
        config = StoreConfig.from_env()

    if config.store_type == StoreType.HTTP:
        logger.info(f"Using HTTP registration store at {config.http_base_url}")
        return HttpRegistrationStore(config.http_base_url, timeout=config.http_timeout)

    logger.info("Using local registration store")
    return LocalRegistrationStore(data_file=config.local_data_file)
