"""
HTTP error helpers for the advisory API.

The advisory core never raises for bad input; these are only used at the
HTTP boundary (unknown catalog ids, malformed query parameters, unexpected
failures). Generic messages go out, details go to the log.
"""
from fastapi import HTTPException, status
import logging

logger = logging.getLogger(__name__)


class AdvisorError:
    """Factories for the few HTTP errors the API can return."""

    @staticmethod
    def not_found(resource: str = "Resource", reason: str = "") -> HTTPException:
        """
        404 for catalog lookups.

        Example:
            if not medicine:
                raise AdvisorError.not_found("Medicine", f"id={medicine_id}")
        """
        if reason:
            logger.info(f"Not found: {resource} - {reason}")

        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found",
        )

    @staticmethod
    def bad_request(detail: str) -> HTTPException:
        """400 for input the caller can fix. Detail is safe to echo back."""
        logger.info(f"Bad request: {detail}")
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )

    @staticmethod
    def server_error(original_error: Exception = None) -> HTTPException:
        """Generic 500. Logs the real error, hides it from the caller."""
        if original_error:
            logger.error(
                f"Internal server error: {type(original_error).__name__}: {str(original_error)}",
                exc_info=original_error,
            )
        else:
            logger.error("Internal server error occurred")

        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An internal error occurred. Please try again later.",
        )
