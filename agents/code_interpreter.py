# =============================================================================
# agents/code_interpreter.py - Code Interpreter Agent
# =============================================================================
# Answers a natural-language task by writing, interpreting, running and
# explaining a Python function.
#
# Pipeline (strictly sequential, first failure aborts):
#   A. Prompt engineer   - ask the model for a prompt that would produce a
#                          Python function solving the task
#   B. Code generation   - PythonDeveloperAgent writes the function
#   C. Interpretation    - FunctionInterpreterAgent derives its CallableSchema
#   D. Invocation        - the model fills in the arguments by "calling" the
#                          schema; the function runs in the sandbox
#   E. Explanation       - the result goes back to the model as a function
#                          message and the model answers the user
#
# Sub-agents share this agent's OpenAI client. Each step logs and times its
# own span; run() reports only its own total duration.
#
# Usage:
#   agent = CodeInterpreterAgent()
#   response = agent.run("Calculate the square root of 20.")
#   print(response.message)  # "The square root of 20 is about 4.47."
# =============================================================================

from __future__ import annotations

import json
import logging
from typing import Any

from openai import OpenAI

from agents.base import BaseAgent
from agents.developer import PythonDeveloperAgent
from agents.errors import (
    CodeGenerationFailedError,
    InterpretationFailedError,
    MissingInputError,
)
from agents.interpreter import FunctionInterpreterAgent
from agents.models.messages import CallableSchema, ChatMessage
from agents.models.responses import GENERIC_FAILURE_MESSAGE, MessageResponse
from agents.prompts import (
    CODE_INTERPRETER_EXPLANATION_PROMPT,
    CODE_INTERPRETER_INVOCATION_PROMPT,
    CODE_INTERPRETER_PROMPT_ENGINEER_PROMPT,
)
from agents.sandbox import run_generated_function
from lib.utils import elapsed_ms, start_timer

# Set up logging for this module
logger = logging.getLogger(__name__)


class CodeInterpreterAgent(BaseAgent):
    """
    Generate-interpret-execute-explain pipeline.

    Attributes:
        developer: Agent used for step B
        interpreter: Agent used for step C
        sandbox_timeout: Seconds allowed for step D's evaluation (None = settings)
        sandbox_memory_limit_mb: Memory cap for step D (None = settings)
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        client: OpenAI | None = None,
        sandbox_timeout: float | None = None,
        sandbox_memory_limit_mb: int | None = None,
    ):
        super().__init__(api_key=api_key, model=model, client=client)

        self.developer = PythonDeveloperAgent(self.api_key, self.model, client=self.client)
        self.interpreter = FunctionInterpreterAgent(self.api_key, self.model, client=self.client)
        self.sandbox_timeout = sandbox_timeout
        self.sandbox_memory_limit_mb = sandbox_memory_limit_mb

    # -------------------------------------------------------------------------
    # Main Entry Point
    # -------------------------------------------------------------------------

    def run(self, user_message: str) -> MessageResponse:
        """
        Answer `user_message` by generating and running code.

        Returns:
            MessageResponse with the final answer, or a generic failure
            notice plus the serialized error of the step that failed
        """
        logger.info(f"{self.name} invoked with: '{user_message[:80]}'")
        start = start_timer()

        try:
            if not user_message:
                raise MissingInputError("user message")

            # -----------------------------------------------------------------
            # Step A: Prompt for the function
            # -----------------------------------------------------------------
            function_prompt = self._complete_text(
                "prompt generation",
                [
                    ChatMessage(role="system", content=CODE_INTERPRETER_PROMPT_ENGINEER_PROMPT),
                    ChatMessage(role="user", content=user_message),
                ],
            )

            # -----------------------------------------------------------------
            # Step B: Generate the function
            # -----------------------------------------------------------------
            code_response = self.developer.run(function_prompt)
            if not code_response.success:
                raise CodeGenerationFailedError(code_response.error)

            function_code = code_response.code

            # -----------------------------------------------------------------
            # Step C: Interpret it as a callable schema
            # -----------------------------------------------------------------
            schema = self._interpret(function_code)
            logger.info(f"Generated function schema: {json.dumps(schema.to_openai())}")

            # -----------------------------------------------------------------
            # Step D: Extract arguments and run the function
            # -----------------------------------------------------------------
            result = self._invoke(user_message, function_code, schema)
            logger.info(f"Function result: {result[:200]}")

            # -----------------------------------------------------------------
            # Step E: Explain the result
            # -----------------------------------------------------------------
            answer = self._explain(user_message, schema, result)

            logger.info(f"{self.name} successfully completed in {elapsed_ms(start)}ms")
            return MessageResponse(message=answer, success=True, duration_ms=elapsed_ms(start))

        except Exception as e:
            return MessageResponse(message=GENERIC_FAILURE_MESSAGE, success=False, **self._failure(e, start))

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def _interpret(self, function_code: str) -> CallableSchema:
        """Step C: delegate to the interpreter and rebuild its schema."""
        interpreter_response = self.interpreter.run(function_code)
        if not interpreter_response.success:
            raise InterpretationFailedError(
                f"Error interpreting function: {interpreter_response.error}",
                details={"inner_error_code": interpreter_response.error_code},
            )

        return CallableSchema.model_validate(interpreter_response.data)

    def _invoke(self, user_message: str, function_code: str, schema: CallableSchema) -> str:
        """
        Step D: let the model pick argument values, then run the function.

        Values are ordered by the schema's parameters, not by the order of
        keys in the model's arguments; missing keys become None.
        """
        call = self._complete_function_call(
            "function invocation",
            [
                ChatMessage(role="system", content=CODE_INTERPRETER_INVOCATION_PROMPT),
                ChatMessage(role="user", content=user_message),
            ],
            [schema],
        )

        args = call.parse_arguments()
        values = resolve_argument_values(schema, args)

        return run_generated_function(
            function_code,
            schema.name,
            values,
            timeout=self.sandbox_timeout,
            memory_limit_mb=self.sandbox_memory_limit_mb,
        )

    def _explain(self, user_message: str, schema: CallableSchema, result: str) -> str:
        """Step E: hand the result back as a function message and get the answer."""
        return self._complete_text(
            "explanation",
            [
                ChatMessage(role="system", content=CODE_INTERPRETER_EXPLANATION_PROMPT),
                ChatMessage(role="user", content=user_message),
                ChatMessage(role="function", name=schema.name, content=result),
            ],
        )


def resolve_argument_values(schema: CallableSchema, args: dict[str, Any]) -> list[Any]:
    """
    Positional argument values for a schema, in parameter order.

    Example:
        schema parameters: (a, b); args: {"b": 2, "a": 5}  ->  [5, 2]
    """
    return [args.get(name) for name in schema.parameter_names]
