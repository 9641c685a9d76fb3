"""
Prompt construction for example-sentence generation.
"""

from collections.abc import Sequence

from .exceptions import ValidationError

DEFAULT_WORDS = ("nonchalant", "reckon", "appalled")

PROMPT_TEMPLATE = "Please create an English example sentence using following words: {words}"


def build_prompt(words: Sequence[str] = DEFAULT_WORDS) -> str:
    """
    Build the example-sentence prompt for a vocabulary list.

    Args:
        words: Vocabulary words to use in the sentence

    Returns:
        Prompt text

    Raises:
        ValidationError: If no words are given or a word is blank

    Examples:
        >>> build_prompt(["reckon", "appalled"])
        'Please create an English example sentence using following words: reckon, appalled'
    """
    if isinstance(words, str):
        raise ValidationError("words must be a sequence of strings, not a single string")
    if not words:
        raise ValidationError("At least one word is required")

    cleaned = []
    for i, word in enumerate(words):
        if not isinstance(word, str) or not word.strip():
            raise ValidationError(f"Word {i} is empty", {"index": i})
        cleaned.append(word.strip())

    return PROMPT_TEMPLATE.format(words=", ".join(cleaned))
