# =============================================================================
# agents/sentiment_classification.py - Sentiment Classification Agent
# =============================================================================
# Classifies a message as Positive, Negative or Neutral through the fixed
# sentimentClassificationFunction schema.
#
# Usage:
#   agent = SentimentClassificationAgent()
#   response = agent.run("I love this product!")
#   response.sentiment.sentiment_type  # "Positive"
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI

from agents.base import BaseAgent
from agents.errors import MissingInputError
from agents.models.messages import CallableSchema, ChatMessage, PropertySpec, SchemaParameters
from agents.models.responses import (
    SentimentClassification,
    SentimentClassificationResponse,
    SentimentType,
)
from agents.prompts import SENTIMENT_CLASSIFICATION_SYSTEM_PROMPT
from lib.utils import elapsed_ms, start_timer

# Set up logging for this module
logger = logging.getLogger(__name__)

_LABELS = ", ".join(label.value for label in SentimentType)

SENTIMENT_CLASSIFICATION_FUNCTION = CallableSchema(
    name="sentimentClassificationFunction",
    description="Classifies the user's sentiment based on the given user message.",
    parameters=SchemaParameters(
        properties={
            "sentimentType": PropertySpec(
                type="string",
                description=f"The type of sentiment that best matches the user message: {_LABELS}",
                enum=[label.value for label in SentimentType],
            ),
            "whyWasThisSentimentChosen": PropertySpec(
                type="string",
                description="Explain why this sentimentType was chosen.",
            ),
            "confidentPercentage": PropertySpec(
                type="number",
                description="The confidence level of the sentiment classification.",
            ),
            "successfullyClassified": PropertySpec(
                type="boolean",
                description="Whether or not the sentiment was successfully classified.",
            ),
        },
        required=[
            "successfullyClassified",
            "confidentPercentage",
            "sentimentType",
            "whyWasThisSentimentChosen",
        ],
    ),
)


class SentimentClassificationAgent(BaseAgent):
    """Three-way sentiment classifier."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        system_message: str = SENTIMENT_CLASSIFICATION_SYSTEM_PROMPT,
        client: OpenAI | None = None,
    ):
        super().__init__(api_key=api_key, model=model, client=client)
        self.system_message = system_message

    def run(self, user_message: str) -> SentimentClassificationResponse:
        """Classify the sentiment of `user_message`."""
        logger.info(f"{self.name} invoked with: '{user_message[:80]}'")
        start = start_timer()

        try:
            if not user_message:
                raise MissingInputError("user message")

            call = self._complete_function_call(
                "sentiment classification",
                [
                    ChatMessage(role="system", content=self.system_message),
                    ChatMessage(role="user", content=user_message),
                ],
                [SENTIMENT_CLASSIFICATION_FUNCTION],
            )
            sentiment = normalize_sentiment(call.parse_arguments())

            logger.info(f"{self.name} successfully completed in {elapsed_ms(start)}ms")
            return SentimentClassificationResponse(sentiment=sentiment, success=True, duration_ms=elapsed_ms(start))

        except Exception as e:
            return SentimentClassificationResponse(
                sentiment=SentimentClassification(),
                success=False,
                **self._failure(e, start),
            )


def normalize_sentiment(args: dict[str, Any]) -> SentimentClassification:
    """Map sentimentClassificationFunction arguments onto the normalized record."""
    return SentimentClassification(
        sentiment_type=args.get("sentimentType"),
        why_was_this_sentiment_chosen=args.get("whyWasThisSentimentChosen"),
        confident_percentage=args.get("confidentPercentage") or 0,
        successfully_classified=args.get("successfullyClassified"),
    )
