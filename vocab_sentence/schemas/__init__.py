"""Llama API chat-completion schemas."""

from .llama import (
    # Request
    ChatMessage,
    ChatCompletionRequest,
    FunctionDefinition,
    FunctionParameters,
    FunctionProperties,
    WordsProperty,
    create_chat_request,
    # Response
    ChatCompletionResponse,
    ChatCompletionChoice,
    ResponseMessage,
    FunctionCall,
    FunctionCallArguments,
    # Constants
    FUNCTION_NAME,
)

__all__ = [
    "ChatMessage",
    "ChatCompletionRequest",
    "FunctionDefinition",
    "FunctionParameters",
    "FunctionProperties",
    "WordsProperty",
    "create_chat_request",
    "ChatCompletionResponse",
    "ChatCompletionChoice",
    "ResponseMessage",
    "FunctionCall",
    "FunctionCallArguments",
    "FUNCTION_NAME",
]
