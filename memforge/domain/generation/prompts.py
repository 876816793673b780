from dataclasses import dataclass
from typing import Dict, List

from memforge.core.error_handling import capture_errors

SYSTEM_PROMPT = (
    "You are a helpful assistant that creates educational flashcards. "
    "Always respond with valid JSON only, no markdown or extra text."
)

USER_PROMPT_TEMPLATE = """Generate flashcards from the following text. Create clear, concise question-answer pairs that will help someone study and remember the key concepts. Return the response as a JSON array of objects with exactly two string properties: "front" (the question) and "back" (the answer).

Text: {text}

Return ONLY a valid JSON array in this exact format, with no additional text or explanation:
[
  {{"front": "Question 1", "back": "Answer 1"}},
  {{"front": "Question 2", "back": "Answer 2"}}
]"""


@dataclass(frozen=True)
class GenerationRequest:
    """Prompt payload handed to a generation gateway."""

    system_prompt: str
    user_prompt: str

    def to_messages(self) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": self.user_prompt},
        ]


@capture_errors
def build_prompt(text: str) -> GenerationRequest:
    return GenerationRequest(system_prompt=SYSTEM_PROMPT, user_prompt=USER_PROMPT_TEMPLATE.format(text=text))
