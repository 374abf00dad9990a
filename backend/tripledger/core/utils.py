"""
Utility functions for the application.
"""
from typing import Any, Dict, Iterable, List
import uuid


def generate_id() -> str:
    """Generate an opaque unique identifier for trips, persons and expenses."""
    return str(uuid.uuid4())


def unique_in_order(values: Iterable[Any]) -> List[Any]:
    """Drop repeated values, keeping the first occurrence of each."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message}
    if details:
        response["details"] = details
    return response
