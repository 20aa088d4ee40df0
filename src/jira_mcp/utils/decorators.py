import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

import requests
from requests.exceptions import HTTPError

from jira_mcp.exceptions import JiraAuthenticationError, ProviderError

logger = logging.getLogger("jira-mcp.utils")


def _response_detail(response: requests.Response | None) -> str | None:
    """Extract Jira's errorMessages/errors from a failed response, if any."""
    if response is None:
        return None
    try:
        payload = response.json()
    except ValueError:
        return response.text or None

    if not isinstance(payload, dict):
        return str(payload)

    messages = list(payload.get("errorMessages") or [])
    errors = payload.get("errors") or {}
    if isinstance(errors, dict):
        messages.extend(f"{field}: {message}" for field, message in errors.items())
    return "; ".join(messages) or None


def handle_jira_api_errors(operation: str | None = None) -> Callable:
    """
    Decorator converting Jira API failures into ProviderError.

    401/403 responses become JiraAuthenticationError; any other HTTP or
    network failure becomes ProviderError carrying the response detail.

    Args:
        operation: Human readable operation name used in messages
            (defaults to the function name).
    """

    def decorator(func: Callable) -> Callable:
        operation_name = operation or func.__name__.replace("_", " ")

        @wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            try:
                return func(self, *args, **kwargs)
            except HTTPError as http_err:
                response = http_err.response
                status_code = response.status_code if response is not None else None
                if status_code in (401, 403):
                    error_msg = (
                        f"Authentication failed for Jira API ({status_code}). "
                        "Token may be expired or invalid. Please verify credentials."
                    )
                    logger.error(error_msg)
                    raise JiraAuthenticationError(
                        error_msg, status_code=status_code
                    ) from http_err

                detail = _response_detail(response) or str(http_err)
                error_msg = f"Error during {operation_name}: {detail}"
                if status_code is not None:
                    error_msg = f"Error during {operation_name} ({status_code}): {detail}"
                logger.error(error_msg)
                raise ProviderError(
                    error_msg, status_code=status_code, detail=detail
                ) from http_err
            except requests.RequestException as e:
                error_msg = f"Network error during {operation_name}: {str(e)}"
                logger.error(error_msg)
                raise ProviderError(error_msg, detail=str(e)) from e

        return wrapper

    return decorator
