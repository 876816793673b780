from .normalizer import normalize_text
from .pipeline import FlashcardPipeline
from .prompts import GenerationRequest, build_prompt
from .sanitizer import sanitize_response
from .validator import validate_candidates

__all__ = [
    'FlashcardPipeline',
    'GenerationRequest',
    'build_prompt',
    'normalize_text',
    'sanitize_response',
    'validate_candidates',
]
