# =============================================================================
# agents/models/ - Agent Communication Schemas
# =============================================================================
# This package contains Pydantic models that define the contracts between
# agents and the OpenAI API:
# - messages.py: ChatMessage, CallableSchema, FunctionCall (wire shapes)
# - responses.py: Response models returned by every agent's run()
#
# These models ensure type-safe communication between agents and provide
# clear documentation of what each agent expects and produces.
# =============================================================================

from agents.models.messages import (
    ChatMessage,
    PropertySpec,
    SchemaParameters,
    CallableSchema,
    InterpretedArgument,
    InterpretedFunction,
    FunctionCall,
    json_schema_type,
)
from agents.models.responses import (
    GENERIC_FAILURE_MESSAGE,
    AgentResponse,
    MessageResponse,
    JsonResponse,
    CodeResponse,
    SentimentType,
    IntentClassification,
    IntentClassificationResponse,
    SentimentClassification,
    SentimentClassificationResponse,
    Citation,
    CitationResponse,
)

__all__ = [
    # Wire shapes
    "ChatMessage",
    "PropertySpec",
    "SchemaParameters",
    "CallableSchema",
    "InterpretedArgument",
    "InterpretedFunction",
    "FunctionCall",
    "json_schema_type",
    # Responses
    "GENERIC_FAILURE_MESSAGE",
    "AgentResponse",
    "MessageResponse",
    "JsonResponse",
    "CodeResponse",
    "SentimentType",
    "IntentClassification",
    "IntentClassificationResponse",
    "SentimentClassification",
    "SentimentClassificationResponse",
    "Citation",
    "CitationResponse",
]
