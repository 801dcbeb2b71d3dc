"""
Standard API response helpers.

Provides consistent response formatting for success and error cases.

Example:
    from common.utils import success_response, error_response

    @app.get("/progress")
    async def get_progress(user_id: str):
        progress = await store.load(user_id)
        if progress is None:
            return success_response({"roadmapProgress": None})
        return success_response({"roadmapProgress": progress.model_dump()})
"""

from typing import Any, Optional, Dict


def success_response(
    data: Any = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a standard success response.

    Args:
        data: The response data (can be dict, list, or any serializable type)
        message: Optional success message

    Returns:
        Dictionary with success=True and optional data/message
    """
    response: Dict[str, Any] = {"success": True}

    if data is not None:
        response["data"] = data

    if message:
        response["message"] = message

    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Any] = None,
    errors: Optional[list] = None,
) -> Dict[str, Any]:
    """
    Create a standard error response.

    Args:
        message: Human-readable error message
        code: Machine-readable error code (e.g., "USER_NOT_FOUND")
        details: Additional error details
        errors: List of specific errors (for validation errors)

    Returns:
        Dictionary with success=False and error info
    """
    error: Dict[str, Any] = {"message": message}

    if code:
        error["code"] = code

    if details is not None:
        error["details"] = details

    if errors:
        error["errors"] = errors

    return {"success": False, "error": error}

