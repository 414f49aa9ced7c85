# =============================================================================
# agents/intent_classification.py - Intent Classification Agent
# =============================================================================
# Classifies a user message against a caller-supplied list of intents.
#
# The intents are interpolated into the system prompt and the model must
# answer through the fixed intentClassificationFunction schema. The result
# is normalized into an IntentClassification record: fields the model left
# out default to None/0, and a failed run returns the all-sentinel record.
#
# Usage:
#   agent = IntentClassificationAgent(intents=[
#       Intent(name="book_flight", description="User wants to book a flight"),
#       Intent(name="cancel_booking", description="User wants to cancel"),
#   ])
#   response = agent.run("I need a flight to Denver on Friday")
#   response.intent.name  # "book_flight"
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from openai import OpenAI
from pydantic import BaseModel, Field

from agents.base import BaseAgent
from agents.errors import MissingInputError
from agents.models.messages import CallableSchema, ChatMessage, PropertySpec, SchemaParameters
from agents.models.responses import IntentClassification, IntentClassificationResponse
from agents.prompts import build_intent_classification_prompt
from lib.utils import elapsed_ms, start_timer

# Set up logging for this module
logger = logging.getLogger(__name__)


class Intent(BaseModel):
    """One intent the classifier may choose."""

    name: str = Field(..., min_length=1)
    description: str = ""


INTENT_CLASSIFICATION_FUNCTION = CallableSchema(
    name="intentClassificationFunction",
    description="Classifies the user's intent based on the given user message.",
    parameters=SchemaParameters(
        properties={
            "intentName": PropertySpec(
                type="string",
                description="The name of the intent that best matches the user message",
            ),
            "whyWasThisIntentChosen": PropertySpec(
                type="string",
                description="Explain why this intent was chosen, or why no intent was chosen",
            ),
            "confidentPercentage": PropertySpec(
                type="number",
                description=(
                    "The percent match of the intent that best matches the user message. "
                    "A measure of how confident the agent is in the classification."
                ),
            ),
            "intentSuccessfullyClassified": PropertySpec(
                type="boolean",
                description=(
                    "Whether or not the intent was successfully classified. If you are confident "
                    "that nothing matches, return false. If you are confident of a matching intent, "
                    "return true."
                ),
            ),
        },
        required=["intentSuccessfullyClassified", "whyWasThisIntentChosen"],
    ),
)


class IntentClassificationAgent(BaseAgent):
    """Picks the best-matching intent for a user message."""

    def __init__(
        self,
        intents: Iterable[Intent | Mapping[str, str]],
        api_key: str | None = None,
        model: str | None = None,
        client: OpenAI | None = None,
    ):
        """
        Raises:
            MissingInputError: If intents is empty
        """
        super().__init__(api_key=api_key, model=model, client=client)

        self.intents = [
            intent if isinstance(intent, Intent) else Intent.model_validate(intent)
            for intent in intents or []
        ]
        if not self.intents:
            raise MissingInputError("intents")

        self.system_message = build_intent_classification_prompt(
            intent.model_dump() for intent in self.intents
        )

    def run(self, user_message: str) -> IntentClassificationResponse:
        """Classify `user_message`."""
        logger.info(f"{self.name} invoked with: '{user_message[:80]}'")
        start = start_timer()

        try:
            if not user_message:
                raise MissingInputError("user message")

            call = self._complete_function_call(
                "intent classification",
                [
                    ChatMessage(role="system", content=self.system_message),
                    ChatMessage(role="user", content=user_message),
                ],
                [INTENT_CLASSIFICATION_FUNCTION],
            )
            intent = normalize_intent(call.parse_arguments())

            logger.info(f"Intent classified: {intent.name} ({intent.why_was_this_intent_chosen})")
            logger.info(f"{self.name} successfully completed in {elapsed_ms(start)}ms")
            return IntentClassificationResponse(intent=intent, success=True, duration_ms=elapsed_ms(start))

        except Exception as e:
            return IntentClassificationResponse(
                intent=IntentClassification(),
                success=False,
                **self._failure(e, start),
            )


def normalize_intent(args: dict[str, Any]) -> IntentClassification:
    """Map intentClassificationFunction arguments onto the normalized record."""
    return IntentClassification(
        name=args.get("intentName"),
        why_was_this_intent_chosen=args.get("whyWasThisIntentChosen"),
        confident_percentage=args.get("confidentPercentage") or 0,
        successfully_classified=args.get("intentSuccessfullyClassified"),
    )
