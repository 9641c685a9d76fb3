"""Llama API chat-completion request/response schemas.

Request models serialize to exactly the body the endpoint expects. Response
models decode leniently: unknown keys are ignored and missing or null fields
fall back to empty values.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import DEFAULT_MODEL

# Name as registered with the remote function-calling schema
FUNCTION_NAME = "Get_English_Exmple_Sentence"
FUNCTION_DESCRIPTION = "Get the English example sentence generated with given words."
WORDS_DESCRIPTION = "English vocabulary list, e.g. nonchalant, reckon, appalled"


# =============================================================================
# Request
# =============================================================================


class ChatMessage(BaseModel):
    """A message sent to the model."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"role": "user", "content": "Hello, how are you?"}}
    )

    role: str
    content: str


class WordsProperty(BaseModel):
    """JSON schema for the ``words`` function parameter."""

    type: str = "string"
    description: str = WORDS_DESCRIPTION


class FunctionProperties(BaseModel):
    words: WordsProperty = Field(default_factory=WordsProperty)


class FunctionParameters(BaseModel):
    type: str = "object"
    properties: FunctionProperties = Field(default_factory=FunctionProperties)


class FunctionDefinition(BaseModel):
    """Function declaration for function calling."""

    name: str = FUNCTION_NAME
    description: str = FUNCTION_DESCRIPTION
    parameters: FunctionParameters = Field(default_factory=FunctionParameters)
    required: list[str] = Field(default_factory=lambda: ["words"])


class ChatCompletionRequest(BaseModel):
    """Request body for the chat completions endpoint."""

    model: str = Field(..., description="ID of the model to use")
    messages: list[ChatMessage] = Field(..., description="Conversation to complete")
    functions: list[FunctionDefinition] = Field(default_factory=list)
    stream: bool = False
    function_call: str = "none"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "model": DEFAULT_MODEL,
                "messages": [{"role": "user", "content": "Hello!"}],
                "functions": [],
                "stream": False,
                "function_call": "none",
            }
        }
    )


def create_chat_request(prompt: str, model: str = DEFAULT_MODEL) -> ChatCompletionRequest:
    """Build the single-turn request for ``prompt``.

    Function calling is declared but disabled with ``function_call="none"``,
    so the model answers in plain text.
    """
    return ChatCompletionRequest(
        model=model,
        messages=[ChatMessage(role="user", content=prompt)],
        functions=[FunctionDefinition()],
        stream=False,
        function_call="none",
    )


# =============================================================================
# Response
# =============================================================================


def _none_to_empty_str(value: Any) -> Any:
    return "" if value is None else value


class FunctionCallArguments(BaseModel):
    words: list[str] = Field(default_factory=list)

    @field_validator("words", mode="before")
    @classmethod
    def validate_words(cls, v: Any) -> Any:
        return [] if v is None else v


class FunctionCall(BaseModel):
    """Function call requested by the model."""

    name: str = ""
    arguments: FunctionCallArguments = Field(default_factory=FunctionCallArguments)

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> Any:
        return _none_to_empty_str(v)

    @field_validator("arguments", mode="before")
    @classmethod
    def validate_arguments(cls, v: Any) -> Any:
        """Accept arguments as an object or as a JSON-encoded string."""
        if v is None or v == "":
            return {}
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError as e:
                raise ValueError(f"function_call.arguments is not valid JSON: {e}") from None
        return v


class ResponseMessage(BaseModel):
    """Message generated by the model."""

    role: str = ""
    content: str = ""
    function_call: FunctionCall | None = None

    @field_validator("role", "content", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> Any:
        return _none_to_empty_str(v)


class ChatCompletionChoice(BaseModel):
    """A single completion choice."""

    index: int = 0
    message: ResponseMessage = Field(default_factory=ResponseMessage)
    finish_reason: str = ""

    @field_validator("index", mode="before")
    @classmethod
    def validate_index(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("message", mode="before")
    @classmethod
    def validate_message(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("finish_reason", mode="before")
    @classmethod
    def validate_finish_reason(cls, v: Any) -> Any:
        return _none_to_empty_str(v)


class ChatCompletionResponse(BaseModel):
    """Response from the chat completions endpoint."""

    choices: list[ChatCompletionChoice] = Field(default_factory=list)

    @field_validator("choices", mode="before")
    @classmethod
    def validate_choices(cls, v: Any) -> Any:
        return [] if v is None else v
