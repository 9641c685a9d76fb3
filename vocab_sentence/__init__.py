"""
vocab-sentence
~~~~~~~~~~~~~~

Generate English example sentences for vocabulary words with the Llama
chat-completion API.

Basic usage:

    >>> from vocab_sentence import build_prompt, get_generated_response
    >>>
    >>> prompt = build_prompt(["nonchalant", "reckon", "appalled"])
    >>> print(get_generated_response(prompt))  # doctest: +SKIP

:license: MIT
"""

__version__ = "1.0.0"
__license__ = "MIT"

# Client
from .client import ChatClient, get_generated_response

# Configuration
from .config import ApiConfig, Config, ConfigValidationError, LoggingConfig, get_config

# Exceptions
from .exceptions import (
    ConfigurationError,
    EmptyChoicesError,
    RequestBuildError,
    ResponseDecodeError,
    ResponseError,
    ResponseReadError,
    TransportError,
    UnexpectedStatusError,
    ValidationError,
    VocabSentenceError,
)

# Prompt
from .prompt import DEFAULT_WORDS, build_prompt

# Schemas
from .schemas import ChatCompletionRequest, ChatCompletionResponse, create_chat_request

__all__ = [
    "ApiConfig",
    "build_prompt",
    "ChatClient",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "Config",
    "ConfigurationError",
    "ConfigValidationError",
    "create_chat_request",
    "DEFAULT_WORDS",
    "EmptyChoicesError",
    "get_config",
    "get_generated_response",
    "LoggingConfig",
    "RequestBuildError",
    "ResponseDecodeError",
    "ResponseError",
    "ResponseReadError",
    "TransportError",
    "UnexpectedStatusError",
    "ValidationError",
    "VocabSentenceError",
]
