import json
import re
from typing import Any, List

from memforge.core.error_handling import capture_errors
from memforge.core.exceptions.domain import ParseError

# Whole payload wrapped in a fence, optionally with a language tag
WRAPPED_FENCE = re.compile(r"^\s*```[\w+-]*[ \t]*\r?\n?(.*?)\r?\n?[ \t]*```\s*$", re.DOTALL)
# Fenced block somewhere inside surrounding text
EMBEDDED_FENCE = re.compile(r"```[\w+-]*[ \t]*\r?\n?(.*?)```", re.DOTALL)
# Opening fence without a closing one
OPENING_FENCE = re.compile(r"^\s*```[\w+-]*[ \t]*\r?\n?")
# Closing fence without an opening one
CLOSING_FENCE = re.compile(r"\r?\n?[ \t]*```\s*$")


def strip_code_fences(text: str) -> str:
    """Remove triple-backtick markup bounding the payload."""
    if match := WRAPPED_FENCE.match(text):
        return match.group(1).strip()
    if match := EMBEDDED_FENCE.search(text):
        return match.group(1).strip()
    return CLOSING_FENCE.sub("", OPENING_FENCE.sub("", text)).strip()


def _load_json(raw_text: str) -> Any:
    # Unfenced JSON is parsed as-is, so backticks inside card text survive
    try:
        return json.loads(raw_text)
    except json.JSONDecodeError:
        return json.loads(strip_code_fences(raw_text))


@capture_errors
def sanitize_response(raw_text: str) -> List[Any]:
    """
    Parse provider output into a list of candidate cards.

    Raises:
        ParseError: If the text is not valid JSON or is not a JSON array
    """
    raw_text = (raw_text or "").strip()

    try:
        candidates = _load_json(raw_text)
    except json.JSONDecodeError as e:
        raise ParseError(str(e), {"position": e.pos, "excerpt": e.doc[:200]}) from e

    if not isinstance(candidates, list):
        raise ParseError("Expected a JSON array of flashcards", {"received": type(candidates).__name__})

    return candidates
