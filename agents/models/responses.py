# =============================================================================
# agents/models/responses.py - Agent Response Schemas
# =============================================================================
# Every agent returns one of these models from run(); none of them raise.
#
# All responses share the same status block:
# - success: whether the agent completed
# - duration_ms: wall-clock time of this agent's own run
# - error / error_code: serialized failure when success=False
#
# Example:
#   response = agent.run("add 5 and 2")
#   if response.success:
#       print(response.data["result"])
#   else:
#       print(response.error_code, response.error)
# =============================================================================

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field


GENERIC_FAILURE_MESSAGE = "An error occurred while running the agent."


class AgentResponse(BaseModel):
    """Status fields shared by every agent response."""

    success: bool = Field(
        ...,
        description="Whether the agent completed successfully"
    )

    duration_ms: int = Field(
        default=0,
        ge=0,
        description="Elapsed wall-clock time of this agent's run in milliseconds"
    )

    error: str | None = Field(
        default=None,
        description="Serialized error if success=False"
    )

    error_code: str | None = Field(
        default=None,
        description="Error category (e.g. 'EVALUATION_ERROR', 'DIVISION_BY_ZERO')"
    )


class MessageResponse(AgentResponse):
    """Natural-language answer (code interpreter pipeline)."""

    message: str = Field(
        ...,
        description="The model's answer, or a generic failure notice"
    )


class JsonResponse(AgentResponse):
    """Structured output (data transformation, function interpreter, arithmetic)."""

    data: dict[str, Any] = Field(
        default_factory=dict,
        description="Parsed structured result; empty on failure"
    )


class CodeResponse(AgentResponse):
    """Generated source code (Python developer agent)."""

    code: str = Field(
        default="",
        description="Raw source text of the generated function"
    )

    language: Literal["python"] = "python"


# =============================================================================
# Classification
# =============================================================================

class SentimentType(str, Enum):
    """The fixed label set offered to the sentiment classifier."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class IntentClassification(BaseModel):
    """Normalized intent record; every field has a null/zero sentinel."""

    name: str | None = None
    why_was_this_intent_chosen: str | None = None
    confident_percentage: int | float = 0
    successfully_classified: bool | None = False


class IntentClassificationResponse(AgentResponse):
    """Result of IntentClassificationAgent.run()."""

    intent: IntentClassification = Field(default_factory=IntentClassification)


class SentimentClassification(BaseModel):
    """
    Normalized sentiment record.

    sentiment_type is kept as the model returned it; compare against
    SentimentType values to branch on it.
    """

    sentiment_type: str | None = None
    why_was_this_sentiment_chosen: str | None = None
    confident_percentage: int | float = 0
    successfully_classified: bool | None = False


class SentimentClassificationResponse(AgentResponse):
    """Result of SentimentClassificationAgent.run()."""

    sentiment: SentimentClassification = Field(default_factory=SentimentClassification)


# =============================================================================
# Citation
# =============================================================================

class Citation(BaseModel):
    """Which source in the supplied context backed the answer."""

    filename: str | None = None
    page_number: int | float | None = None
    explanation: str | None = None


class CitationResponse(AgentResponse):
    """Answer plus citation; the original context is always echoed back."""

    message: str = Field(..., description="The answer, or a generic failure notice")
    citation: Citation | None = None
    context: str = ""
