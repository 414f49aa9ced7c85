# =============================================================================
# agents/interpreter.py - Function Interpreter Agent (Schema Interpretation Step)
# =============================================================================
# Reads Python function source and derives an OpenAI function definition
# (CallableSchema) for it.
#
# The model is constrained to the fixed `interpreterFunction` schema, which
# enumerates the function name, its description and a list of
# (name, type, description) argument triples. The triples are reshaped into
# `properties`, and every property is marked required.
#
# Usage:
#   agent = FunctionInterpreterAgent()
#   response = agent.run("def add(a, b):\n    return a + b")
#   schema = CallableSchema.model_validate(response.data)
# =============================================================================

from __future__ import annotations

import logging

from openai import OpenAI
from pydantic import ValidationError

from agents.base import BaseAgent
from agents.errors import InterpretationFailedError, MissingInputError
from agents.models.messages import (
    CallableSchema,
    ChatMessage,
    InterpretedFunction,
    PropertySpec,
    SchemaParameters,
)
from agents.models.responses import JsonResponse
from agents.prompts import FUNCTION_INTERPRETER_SYSTEM_PROMPT
from lib.utils import elapsed_ms, start_timer

# Set up logging for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Fixed Interpreter Schema
# =============================================================================

INTERPRETER_FUNCTION = CallableSchema(
    name="interpreterFunction",
    description="Interprets a Python function and returns OpenAI Function Calling Schema.",
    parameters=SchemaParameters(
        properties={
            "functionName": PropertySpec(
                type="string",
                description="The Python function name to be called",
            ),
            "functionDescription": PropertySpec(
                type="string",
                description="The description of the Python function",
            ),
            "functionArguments": PropertySpec(
                type="array",
                description="The Python function arguments to be passed to the function, in order",
                items={
                    "type": "object",
                    "properties": {
                        "name": {
                            "type": "string",
                            "description": "The name of the Python function argument",
                        },
                        "type": {
                            "type": "string",
                            "description": "The JSON schema type of the argument (string, number, integer, boolean, array, object)",
                        },
                        "itemsType": {
                            "type": "string",
                            "description": "For array arguments, the JSON schema type of each element",
                        },
                        "description": {
                            "type": "string",
                            "description": "The description of the Python function argument",
                        },
                    },
                },
            ),
        },
        required=["functionName", "functionDescription", "functionArguments"],
    ),
)


class FunctionInterpreterAgent(BaseAgent):
    """Derives a CallableSchema from generated function source."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        system_message: str = FUNCTION_INTERPRETER_SYSTEM_PROMPT,
        client: OpenAI | None = None,
    ):
        super().__init__(api_key=api_key, model=model, client=client)
        self.system_message = system_message

    def interpret(self, function_code: str) -> CallableSchema:
        """
        Derive the schema, raising on failure.

        Raises:
            NoFunctionCallProducedError: If the model did not call interpreterFunction
            ArgumentParseError: If the arguments are not valid JSON
            InterpretationFailedError: If the name or argument list is missing/malformed
        """
        call = self._complete_function_call(
            "function interpretation",
            [
                ChatMessage(role="system", content=self.system_message),
                ChatMessage(role="user", content=function_code),
            ],
            [INTERPRETER_FUNCTION],
        )

        args = call.parse_arguments()

        try:
            interpreted = InterpretedFunction.model_validate(args)
        except ValidationError as e:
            errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            raise InterpretationFailedError(
                f"Invalid interpreterFunction arguments: {'; '.join(errors)}",
                details={"arguments": args},
            )

        return interpreted.to_callable_schema()

    def run(self, function_code: str) -> JsonResponse:
        """
        Derive the schema for `function_code`.

        Returns:
            JsonResponse whose data is the CallableSchema as a dict
        """
        logger.info(f"{self.name} invoked with function code: '{function_code[:80]}'")
        start = start_timer()

        try:
            if not function_code:
                raise MissingInputError("function code")

            schema = self.interpret(function_code)

            logger.info(f"{self.name} successfully completed in {elapsed_ms(start)}ms")
            return JsonResponse(data=schema.to_openai(), success=True, duration_ms=elapsed_ms(start))

        except Exception as e:
            return JsonResponse(data={}, success=False, **self._failure(e, start))
