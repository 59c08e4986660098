"""GraphQL error handling and production error masking.

Application exceptions raised in resolvers keep their message and gain a
structured ``extensions.code``; anything unexpected is logged with its
stack trace and, in production, replaced by a generic message.

Logging happens in strawberry's ``process_errors`` hook, which the schema
overrides with :func:`log_graphql_errors`. The HTTP router formats the
response errors with :func:`process_graphql_errors`.

Usage:
    class RelaySchema(strawberry.Schema):
        def process_errors(self, errors, execution_context=None):
            log_graphql_errors(errors, execution_context)

    payload["errors"] = process_graphql_errors(result.errors, execution_context)
"""

from __future__ import annotations

import logging
import traceback
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from relay_service.core.exceptions import AppException, ValidationException
from relay_service.core.settings import get_app_settings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from graphql import GraphQLError, GraphQLFormattedError
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)

__all__ = [
    "ErrorCategory",
    "error_code",
    "is_user_facing_error",
    "log_graphql_errors",
    "mask_internal_error",
    "process_graphql_errors",
]


# ============================================================================
# Error Categories
# ============================================================================


class ErrorCategory:
    """Error categories for classification."""

    GRAPHQL_VALIDATION = "GRAPHQL_VALIDATION_FAILED"
    VALIDATION = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    DEPTH_LIMIT = "DEPTH_LIMIT_EXCEEDED"
    INTERNAL = "INTERNAL_ERROR"


_USER_FACING_CODES = frozenset(
    {
        ErrorCategory.GRAPHQL_VALIDATION,
        ErrorCategory.VALIDATION,
        ErrorCategory.NOT_FOUND,
        ErrorCategory.BAD_REQUEST,
        ErrorCategory.DEPTH_LIMIT,
    }
)

# Message suffix of strawberry's QueryDepthLimiter errors
_DEPTH_LIMIT_MESSAGE = "exceeds maximum operation depth of"


# ============================================================================
# Main Error Processing
# ============================================================================


def process_graphql_errors(
    errors: Sequence[GraphQLError] | None,
    execution_context: ExecutionContext | None = None,
    *,
    is_production: bool | None = None,
) -> list[GraphQLFormattedError]:
    """Process GraphQL errors before returning them to the client.

    Args:
        errors: Errors collected while parsing, validating, or executing
        execution_context: Execution context the errors belong to
        is_production: Mask internal error details when True. Defaults to
            the application environment.

    Returns:
        List of formatted errors safe to return to the client
    """
    if is_production is None:
        is_production = get_app_settings().is_production

    processed: list[GraphQLFormattedError] = []

    for error in errors or ():
        code = error_code(error)

        if code in _USER_FACING_CODES:
            processed.append(_format_with_code(error, code))
        elif is_production:
            processed.append(mask_internal_error(error))
        else:
            formatted = _format_with_code(error, code)
            if error.original_error is not None:
                formatted["extensions"]["debug"] = {
                    "exception_type": type(error.original_error).__name__,
                    "exception_message": str(error.original_error),
                }
            processed.append(formatted)

    return processed


# ============================================================================
# Error Classification
# ============================================================================


def error_code(error: GraphQLError) -> str:
    """Classify an error into one of the :class:`ErrorCategory` codes.

    Errors without an original exception come from parsing or validating
    the request document. Explicit ``extensions.code`` values win.
    """
    extensions = error.extensions or {}
    if "code" in extensions:
        return str(extensions["code"])

    original = error.original_error
    if original is None:
        if _DEPTH_LIMIT_MESSAGE in error.message:
            return ErrorCategory.DEPTH_LIMIT
        return ErrorCategory.GRAPHQL_VALIDATION
    if isinstance(original, ValidationException):
        return ErrorCategory.VALIDATION
    if isinstance(original, AppException):
        if original.status_code == 404:
            return ErrorCategory.NOT_FOUND
        if 400 <= original.status_code < 500:
            return ErrorCategory.BAD_REQUEST
    return ErrorCategory.INTERNAL


def is_user_facing_error(error: GraphQLError) -> bool:
    """Determine if an error should be shown to the user as-is."""
    return error_code(error) in _USER_FACING_CODES


def _format_with_code(error: GraphQLError, code: str) -> GraphQLFormattedError:
    formatted = error.formatted
    extensions: dict[str, Any] = dict(formatted.get("extensions") or {})
    extensions["code"] = code

    original = error.original_error
    if isinstance(original, AppException):
        extensions.setdefault("type", original.type)
        for key, value in original.extra.items():
            extensions.setdefault(key, value)

    formatted["extensions"] = extensions
    return formatted


# ============================================================================
# Error Masking
# ============================================================================


def mask_internal_error(error: GraphQLError) -> GraphQLFormattedError:
    """Mask internal error details for production.

    Replaces the message while preserving the error location and path.
    """
    masked: GraphQLFormattedError = {
        "message": "An internal error occurred. Please try again later.",
        "extensions": {
            "code": ErrorCategory.INTERNAL,
            "timestamp": datetime.now(UTC).isoformat(),
        },
    }
    formatted = error.formatted
    if "locations" in formatted:
        masked["locations"] = formatted["locations"]
    if "path" in formatted:
        masked["path"] = formatted["path"]
    return masked


# ============================================================================
# Error Logging
# ============================================================================


def log_graphql_errors(
    errors: Sequence[GraphQLError],
    execution_context: ExecutionContext | None = None,
) -> None:
    """Log every error of one operation."""
    for error in errors:
        log_error(error, execution_context)


def log_error(error: GraphQLError, execution_context: ExecutionContext | None = None) -> None:
    """Log an error with full details for server-side debugging."""
    code = error_code(error)
    log_context: dict[str, Any] = {
        "error_message": error.message,
        "error_code": code,
        "error_path": error.path,
    }

    if execution_context is not None:
        if execution_context.operation_name:
            log_context["operation_name"] = execution_context.operation_name
        request_id = getattr(execution_context.context, "request_id", None)
        if request_id:
            log_context["request_id"] = request_id

    if error.original_error is not None:
        log_context["exception_type"] = type(error.original_error).__name__

    if code in _USER_FACING_CODES:
        logger.info("GraphQL user-facing error", extra=log_context)
        return

    if error.original_error is not None:
        log_context["stack_trace"] = "".join(
            traceback.format_exception(
                type(error.original_error),
                error.original_error,
                error.original_error.__traceback__,
            )
        )
    logger.error("GraphQL internal error", extra=log_context)
