"""
Synchronous client for the Llama chat-completion API.

One call to ``ChatClient.complete`` performs exactly one POST and returns the
text of the first choice. Every failure is logged and raised as a
``VocabSentenceError`` subclass; nothing is retried.
"""

import logging
from typing import Any

import requests
from pydantic import ValidationError as PydanticValidationError

from .config import ApiConfig, get_config
from .exceptions import (
    ConfigurationError,
    EmptyChoicesError,
    RequestBuildError,
    ResponseDecodeError,
    ResponseReadError,
    TransportError,
    UnexpectedStatusError,
)
from .schemas import ChatCompletionRequest, ChatCompletionResponse, create_chat_request

logger = logging.getLogger(__name__)


class ChatClient:
    """
    Client for a single chat-completion exchange.

    Example:
        >>> with ChatClient() as client:  # doctest: +SKIP
        ...     print(client.complete("Say hello"))
    """

    def __init__(
        self,
        config: ApiConfig | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the client.

        Args:
            config: Endpoint configuration (defaults from get_config())
            session: HTTP session to use; one is created and owned if omitted
        """
        self.config = config or get_config().api
        self._owns_session = session is None
        self.session = session or requests.Session()

    def __enter__(self) -> "ChatClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def build_request(self, prompt: str) -> ChatCompletionRequest:
        """Build the request payload for ``prompt``."""
        try:
            return create_chat_request(prompt, model=self.config.model)
        except PydanticValidationError as e:
            logger.error(f"Failed to build request: {e}")
            raise RequestBuildError(f"Invalid request payload: {e}") from e

    def complete(self, prompt: str) -> str:
        """
        Send ``prompt`` and return the generated text.

        Args:
            prompt: User prompt

        Returns:
            Content of the first choice's message, unchanged

        Raises:
            RequestBuildError: Payload could not be built or serialized
            ConfigurationError: API key is not set (raised before any network call)
            TransportError: The HTTP request failed
            UnexpectedStatusError: Status code was not 200
            ResponseReadError: Body could not be read
            ResponseDecodeError: Body is not a valid chat completion
            EmptyChoicesError: Response contained no choices
        """
        chat_request = self.build_request(prompt)

        try:
            body = chat_request.model_dump_json().encode("utf-8")
        except ValueError as e:
            logger.error(f"Failed to serialize request: {e}")
            raise RequestBuildError(f"Failed to serialize request: {e}") from e

        try:
            api_key = self.config.get_api_key()
        except ConfigurationError as e:
            logger.error(f"Failed to get API KEY: {e}")
            raise

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }

        logger.debug(f"POST {self.config.url} ({len(body)} bytes)")
        try:
            response = self.session.post(
                self.config.url,
                data=body,
                headers=headers,
                timeout=self.config.timeout,
                stream=True,
            )
        except requests.RequestException as e:
            logger.error(f"Failed to get HTTP response: {e}")
            raise TransportError(f"HTTP request failed: {e}", {"url": self.config.url}) from e

        with response:
            if response.status_code != 200:
                logger.error(f"Failed to get expected status code: {response.status_code}")
                raise UnexpectedStatusError(response.status_code, {"url": self.config.url})

            try:
                raw = response.content
            except requests.RequestException as e:
                logger.error(f"Failed to read body: {e}")
                raise ResponseReadError(f"Failed to read response body: {e}") from e

        try:
            chat_response = ChatCompletionResponse.model_validate_json(raw)
        except PydanticValidationError as e:
            logger.error(f"Failed to decode response: {e}")
            raise ResponseDecodeError(f"Invalid chat completion response: {e}") from e

        if not chat_response.choices:
            err = EmptyChoicesError("No choices returned from llama")
            logger.error(f"Failed to get expected length of choices: {err}")
            raise err

        return chat_response.choices[0].message.content


def get_generated_response(prompt: str, config: ApiConfig | None = None) -> str:
    """Send ``prompt`` with a fresh client and return the generated text."""
    with ChatClient(config=config) as client:
        return client.complete(prompt)


__all__ = ["ChatClient", "get_generated_response"]
