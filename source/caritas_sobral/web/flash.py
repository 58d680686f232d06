"""One-shot notification messages ("toasts") carried across a redirect."""

from typing import Any

from fastapi import Request

FLASH_KEY = "_flashes"


def flash(request: Request, message: str, category: str = "success") -> None:
    """Queues a message for the next rendered page.

    Args:
        request: The current request. Its session must be available.
        message: The text to show.
        category: "success", "error" or "info".
    """
    messages = list(request.session.get(FLASH_KEY, []))
    messages.append({"message": message, "category": category})
    request.session[FLASH_KEY] = messages


def pop_flashed_messages(request: Request) -> list[dict[str, Any]]:
    """Returns and clears the queued messages.

    Args:
        request: The current request.

    Returns:
        The queued messages, oldest first.
    """
    if "session" not in request.scope:
        return []
    return list(request.session.pop(FLASH_KEY, []))
