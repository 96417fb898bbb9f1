"""Centralized error classes and message definitions for cssbuilder.

Every error raised by the selector builder and the JSON helpers carries a
kebab-case ``code`` alongside its human-readable message, so callers can
branch on the code without matching message text.
"""

from __future__ import annotations

SELECTOR_ORDER: tuple[str, ...] = (
    "element",
    "id",
    "class",
    "attribute",
    "pseudo-class",
    "pseudo-element",
)


def generate_error_message(code: str, fragment: str | None = None, existing: str | None = None) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        fragment: Optional fragment kind the caller tried to add
        existing: Optional fragment kind that was already present

    Returns:
        Human-readable error message string
    """
    messages = {
        # Builder errors
        "duplicate-fragment": "Element, id and pseudo-element should not occur more than one time inside the selector",
        "order-violation": (
            "Selector parts should be arranged in the following order: " + ", ".join(SELECTOR_ORDER)
        ),
        # Serialization errors
        "invalid-json": "Invalid JSON document",
    }

    # Fall back to the code itself if not found
    message = messages.get(code, code)
    if fragment and existing:
        if fragment == existing:
            message += f" (got a second {fragment})"
        else:
            message += f" (got {fragment} after {existing})"
    elif fragment:
        message += f" (while adding {fragment})"
    return message


class SelectorError(ValueError):
    """Raised when a selector fragment cannot be added."""

    code: str

    def __init__(self, code: str, fragment: str | None = None, existing: str | None = None) -> None:
        self.code = code
        self.fragment = fragment
        self.existing = existing
        super().__init__(generate_error_message(code, fragment, existing))


class DuplicateFragmentError(SelectorError):
    """A singleton fragment (element, id or pseudo-element) was set twice."""

    def __init__(self, fragment: str) -> None:
        super().__init__("duplicate-fragment", fragment, fragment)


class OrderViolationError(SelectorError):
    """A fragment was added after a fragment that must come later."""

    def __init__(self, fragment: str, existing: str) -> None:
        super().__init__("order-violation", fragment, existing)


class SerializationError(ValueError):
    """Raised when a JSON document cannot be decoded."""

    code: str = "invalid-json"

    def __init__(self, detail: str | None = None) -> None:
        message = generate_error_message(self.code)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
