from typing import Any, Optional

from memforge.core.error_handling import capture_errors
from memforge.core.exceptions.base import ValidationError


@capture_errors
def normalize_text(text: Any, max_length: Optional[int] = None) -> str:
    """Trim study text and reject empty (or, when a limit is set, oversized) input."""
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Please enter some text", "text", {"reason": "empty input"})

    text = text.strip()
    if max_length is not None and len(text) > max_length:
        raise ValidationError(
            f"Text is too long; the limit is {max_length} characters",
            "text",
            {"reason": "input too long", "max_length": max_length, "current_length": len(text)},
        )
    return text
