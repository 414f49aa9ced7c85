# =============================================================================
# agents/data_transformation.py - Data Transformation Agent
# =============================================================================
# Turns unstructured text into JSON matching a caller-supplied function
# schema. The model is offered that schema as its only function and the
# arguments it produces are returned verbatim.
#
# Usage:
#   schema = CallableSchema.model_validate({
#       "name": "convertTemperature",
#       "description": "Converts a temperature value from one unit to another.",
#       "parameters": {
#           "type": "object",
#           "properties": {
#               "temperature_number": {"type": "number", "description": "..."},
#               "temperature_current_type": {"type": "string", "description": "..."},
#               "temperature_desired_type": {"type": "string", "description": "..."},
#           },
#           "required": ["temperature_number", "temperature_current_type", "temperature_desired_type"],
#       },
#   })
#   agent = DataTransformationAgent(schema=schema)
#   response = agent.run("It is 32 degrees Fahrenheit, what is that in Celsius?")
#   response.data  # {"temperature_number": 32, ...}
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI

from agents.base import BaseAgent
from agents.errors import MissingInputError
from agents.models.messages import CallableSchema, ChatMessage
from agents.models.responses import JsonResponse
from agents.prompts import DATA_TRANSFORMATION_SYSTEM_PROMPT
from lib.utils import elapsed_ms, start_timer

# Set up logging for this module
logger = logging.getLogger(__name__)


class DataTransformationAgent(BaseAgent):
    """Extracts structured data described by a CallableSchema."""

    def __init__(
        self,
        schema: CallableSchema | dict[str, Any],
        api_key: str | None = None,
        model: str | None = None,
        system_message: str = DATA_TRANSFORMATION_SYSTEM_PROMPT,
        client: OpenAI | None = None,
    ):
        """
        Args:
            schema: The function definition the model must fill in
            api_key: OpenAI API key (default: settings)
            model: OpenAI model ID (default: settings)
            system_message: System prompt for the extraction
            client: Existing OpenAI client to reuse
        """
        super().__init__(api_key=api_key, model=model, client=client)
        self.schema = schema if isinstance(schema, CallableSchema) else CallableSchema.model_validate(schema)
        self.system_message = system_message

    def transform(self, user_message: str) -> dict[str, Any]:
        """
        Extract the schema's arguments, raising on failure.

        Raises:
            NoFunctionCallProducedError: If the model did not call the function
            ArgumentParseError: If the arguments are not valid JSON
        """
        call = self._complete_function_call(
            "data transformation",
            [
                ChatMessage(role="system", content=self.system_message),
                ChatMessage(role="user", content=user_message),
            ],
            [self.schema],
        )
        return call.parse_arguments()

    def run(self, user_message: str) -> JsonResponse:
        """
        Extract structured data from `user_message`.

        Returns:
            JsonResponse with the parsed arguments as data
        """
        logger.info(f"{self.name} invoked with: '{user_message[:80]}'")
        start = start_timer()

        try:
            if not user_message:
                raise MissingInputError("user message")

            data = self.transform(user_message)

            logger.info(f"{self.name} successfully completed in {elapsed_ms(start)}ms")
            return JsonResponse(data=data, success=True, duration_ms=elapsed_ms(start))

        except Exception as e:
            return JsonResponse(data={}, success=False, **self._failure(e, start))
