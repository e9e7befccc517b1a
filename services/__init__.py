# -*- coding: utf-8 -*-
"""
Save a Turtle Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "RegistrationStore",
    "StoreResponse",
    "StoreType",
    "LocalRegistrationStore",
    "HttpRegistrationStore",
    "create_store",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name in ("RegistrationStore", "StoreResponse", "StoreType"):
        from . import registration_store
        return getattr(registration_store, name)
    elif name == "LocalRegistrationStore":
        from .local_registration_store import LocalRegistrationStore
        return LocalRegistrationStore
    elif name == "HttpRegistrationStore":
        from .http_registration_store import HttpRegistrationStore
        return HttpRegistrationStore
    elif name == "create_store":
        from .store_factory import create_store
        return create_store
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
