# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.exceptions import ApiException, NetworkException, StoreException
from utils.logger import get_logger

logger = get_logger(__name__)

MSG_CONNECTION = "We couldn't reach the registration server. Please check your connection and try again."
MSG_TIMEOUT = "The registration server took too long to respond. Please try again."
MSG_REJECTED = "Your registration could not be accepted. Please review your details and try again."
MSG_GENERIC = "Something went wrong while submitting your pledge. Please try again."


def map_api_error(error: ApiException) -> str:
    """Map API exception to a user-friendly message.

    Technical details are logged only - never shown to the user.
    """
    status = error.status_code
    if status and 400 <= status < 500:
        logger.warning(f"Registration rejected ({status}): {error.response_data or error}")
        return MSG_REJECTED
    logger.warning(f"API error ({status}): {error}")
    return MSG_CONNECTION


def map_network_error(error: NetworkException) -> str:
    """Map network exception to a user-friendly message."""
    msg = str(error.original_error) if error.original_error else error.message
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return MSG_TIMEOUT
    return MSG_CONNECTION


def map_error_code(code: str) -> str:
    """Map a StoreResponse error code to a user-friendly message."""
    if not code:
        return MSG_GENERIC
    if code == "E_CONN":
        return MSG_CONNECTION
    if code.startswith("E4"):
        return MSG_REJECTED
    return MSG_GENERIC


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message."""
    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, StoreException):
        logger.warning(f"Store error: {error.message}")
        return MSG_GENERIC

    logger.warning(f"Unexpected error in {context or 'unknown'}: {error}")
    return MSG_GENERIC
