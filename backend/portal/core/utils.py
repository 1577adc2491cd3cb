"""
Utility functions for the application.
"""
from typing import Any, Dict, Optional
import math


def format_response(data: Any = None, message: str = "Success") -> Dict[str, Any]:
    """Format API response."""
    return {
        "success": True,
        "data": data,
        "message": message
    }


def format_error(error: str, message: Optional[str] = None, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {
        "success": False,
        "error": error,
        "message": message or error
    }
    if details:
        response["details"] = details
    return response


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` items ``limit`` at a time."""
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


def pagination_meta(page: int, limit: int, total: int) -> Dict[str, int]:
    """Pagination block included in every listing response."""
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "pages": total_pages(total, limit)
    }
