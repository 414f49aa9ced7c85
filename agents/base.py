# =============================================================================
# agents/base.py - Base Agent
# =============================================================================
# Shared plumbing for every agent:
# 1. Validate the API key and model at construction
# 2. Build the OpenAI client (or reuse one handed in by a parent agent)
# 3. Issue chat completions and pull out text or a function call
# 4. Turn any exception into the fields of a failed response
#
# Agents hold only immutable configuration, so one instance can serve
# concurrent run() calls.
#
# Usage:
#   class MyAgent(BaseAgent):
#       def run(self, user_message: str) -> JsonResponse:
#           start = start_timer()
#           try:
#               call = self._complete_function_call("my step", messages, [schema])
#               ...
#           except Exception as e:
#               return JsonResponse(success=False, **self._failure(e, start))
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI, OpenAIError
from openai.types.chat import ChatCompletionMessage

from app.config import settings
from agents.errors import (
    AgentError,
    EmptyCompletionError,
    MissingCredentialError,
    MissingModelError,
    NoFunctionCallProducedError,
    UpstreamFailureError,
)
from agents.models.messages import CallableSchema, ChatMessage, FunctionCall
from lib.openai_client import create_openai_client
from lib.utils import elapsed_ms

# Set up logging for this module
logger = logging.getLogger(__name__)


class BaseAgent:
    """
    Base class for OpenAI-backed agents.

    Attributes:
        api_key: OpenAI API key (validated non-empty)
        model: OpenAI model ID (validated non-empty)
        temperature: Sampling temperature for this agent's completions
        client: OpenAI client (shared with sub-agents)
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        client: OpenAI | None = None,
    ):
        """
        Initialize the agent.

        Args:
            api_key: OpenAI API key (default: settings.OPENAI_API_KEY)
            model: OpenAI model ID (default: settings.OPENAI_MODEL)
            temperature: Sampling temperature (default: settings.AGENT_TEMPERATURE)
            client: Existing OpenAI client to reuse instead of building one

        Raises:
            MissingCredentialError: If no API key is available
            MissingModelError: If no model is available
        """
        api_key = settings.OPENAI_API_KEY if api_key is None else api_key
        model = settings.OPENAI_MODEL if model is None else model

        if not api_key:
            raise MissingCredentialError()

        if not model:
            raise MissingModelError()

        self.api_key = api_key
        self.model = model
        self.temperature = settings.AGENT_TEMPERATURE if temperature is None else temperature
        self.client = client or create_openai_client(api_key, settings.OPENAI_BASE_URL)

        logger.debug(f"{self.name} initialized with model={self.model}, temp={self.temperature}")

    @property
    def name(self) -> str:
        return type(self).__name__

    # -------------------------------------------------------------------------
    # Completions
    # -------------------------------------------------------------------------

    def _complete(
        self,
        step: str,
        messages: list[ChatMessage],
        functions: list[CallableSchema] | None = None,
    ) -> ChatCompletionMessage:
        """
        Send one chat completion request and return the first choice's message.

        Raises:
            UpstreamFailureError: If the OpenAI client raises
            EmptyCompletionError: If the response has no choices
        """
        request: dict[str, Any] = {
            "model": self.model,
            "messages": [message.to_openai() for message in messages],
            "temperature": self.temperature,
        }
        if functions:
            request["functions"] = [function.to_openai() for function in functions]

        try:
            response = self.client.chat.completions.create(**request)
        except OpenAIError as e:
            raise UpstreamFailureError(e)

        if not response.choices:
            raise EmptyCompletionError(step, details={"model": self.model})

        return response.choices[0].message

    def _complete_text(self, step: str, messages: list[ChatMessage]) -> str:
        """
        Request a free-text completion.

        Raises:
            EmptyCompletionError: If the model returned no text content
        """
        message = self._complete(step, messages)

        if not message.content:
            raise EmptyCompletionError(step, details={"model": self.model})

        return message.content

    def _complete_function_call(
        self,
        step: str,
        messages: list[ChatMessage],
        functions: list[CallableSchema],
    ) -> FunctionCall:
        """
        Request a completion that must call one of `functions`.

        Raises:
            NoFunctionCallProducedError: If the response lacks a function name or arguments
        """
        message = self._complete(step, messages, functions)
        function_call = message.function_call

        if function_call is None or not function_call.name or not function_call.arguments:
            raise NoFunctionCallProducedError(
                step,
                details={"model": self.model, "content": (message.content or "")[:200]},
            )

        return FunctionCall(name=function_call.name, arguments=function_call.arguments)

    # -------------------------------------------------------------------------
    # Failure Handling
    # -------------------------------------------------------------------------

    def _failure(self, error: Exception, start: float) -> dict[str, Any]:
        """
        Log a failed run and build the failure fields for a response model.

        Returns:
            dict with error, error_code and duration_ms
        """
        duration = elapsed_ms(start)

        if isinstance(error, AgentError):
            logger.error(f"{self.name} failed in {duration}ms: {error}")
            return {"error": str(error), "error_code": error.code, "duration_ms": duration}

        logger.exception(f"{self.name} failed in {duration}ms with unexpected error")
        return {
            "error": f"{type(error).__name__}: {error}",
            "error_code": "UNEXPECTED_ERROR",
            "duration_ms": duration,
        }
