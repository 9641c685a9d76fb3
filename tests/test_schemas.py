"""
Tests for vocab_sentence/schemas - Llama API schemas.
"""

import json

import pytest
from pydantic import ValidationError as PydanticValidationError

from vocab_sentence.schemas import (
    FUNCTION_NAME,
    ChatCompletionRequest,
    ChatCompletionResponse,
    FunctionCall,
    create_chat_request,
)


class TestChatCompletionRequest:
    """Tests for request construction."""

    def test_fixed_fields(self):
        request = create_chat_request("Hello")
        assert request.model == "llama3-70b"
        assert request.stream is False
        assert request.function_call == "none"
        assert [(m.role, m.content) for m in request.messages] == [("user", "Hello")]

    def test_function_declaration(self):
        data = create_chat_request("Hello").model_dump()
        assert data["functions"] == [
            {
                "name": FUNCTION_NAME,
                "description": "Get the English example sentence generated with given words.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "words": {
                            "type": "string",
                            "description": "English vocabulary list, e.g. nonchalant, reckon, appalled",
                        }
                    },
                },
                "required": ["words"],
            }
        ]

    def test_json_serialization(self):
        body = json.loads(create_chat_request("Hi", model="llama3-8b").model_dump_json())
        assert body["model"] == "llama3-8b"
        assert body["messages"] == [{"role": "user", "content": "Hi"}]
        assert body["stream"] is False

    def test_prompt_not_modified(self):
        prompt = '  quotes " and\nnewlines  '
        body = json.loads(create_chat_request(prompt).model_dump_json())
        assert body["messages"][0]["content"] == prompt

    def test_requires_model_and_messages(self):
        with pytest.raises(PydanticValidationError):
            ChatCompletionRequest()


class TestChatCompletionResponse:
    """Tests for lenient response decoding."""

    def test_full_response(self):
        response = ChatCompletionResponse.model_validate(
            {
                "choices": [
                    {
                        "index": 0,
                        "message": {"role": "assistant", "content": "Sentence."},
                        "finish_reason": "stop",
                    }
                ]
            }
        )
        choice = response.choices[0]
        assert choice.index == 0
        assert choice.message.role == "assistant"
        assert choice.message.content == "Sentence."
        assert choice.message.function_call is None
        assert choice.finish_reason == "stop"

    def test_missing_fields_default(self):
        response = ChatCompletionResponse.model_validate({"choices": [{}]})
        choice = response.choices[0]
        assert choice.index == 0
        assert choice.message.content == ""
        assert choice.finish_reason == ""

    def test_null_fields_default(self):
        response = ChatCompletionResponse.model_validate(
            {"choices": [{"index": None, "message": None, "finish_reason": None}]}
        )
        assert response.choices[0].message.content == ""

    def test_null_choices(self):
        assert ChatCompletionResponse.model_validate({"choices": None}).choices == []
        assert ChatCompletionResponse.model_validate({}).choices == []

    def test_function_call_object_arguments(self):
        call = FunctionCall.model_validate(
            {"name": FUNCTION_NAME, "arguments": {"words": ["reckon", "appalled"]}}
        )
        assert call.name == FUNCTION_NAME
        assert call.arguments.words == ["reckon", "appalled"]

    def test_function_call_string_arguments(self):
        call = FunctionCall.model_validate(
            {"name": FUNCTION_NAME, "arguments": '{"words": ["nonchalant"]}'}
        )
        assert call.arguments.words == ["nonchalant"]

    def test_function_call_empty_arguments(self):
        assert FunctionCall.model_validate({"arguments": ""}).arguments.words == []
        assert FunctionCall.model_validate({"arguments": None}).arguments.words == []

    def test_function_call_invalid_string_arguments(self):
        with pytest.raises(PydanticValidationError):
            FunctionCall.model_validate({"arguments": "{not json"})

    def test_wrong_type_rejected(self):
        with pytest.raises(PydanticValidationError):
            ChatCompletionResponse.model_validate_json('{"choices": [{"index": "first"}]}')
