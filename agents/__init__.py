# =============================================================================
# agents/ - AI Agent Definitions
# =============================================================================
# This package contains thin agents around the OpenAI chat-completion API.
# Each agent packages a system prompt, an optional function schema and one
# (or a short chain of) completion calls, and returns a typed response.
#
# - code_interpreter.py: Generate -> interpret -> execute -> explain pipeline
# - developer.py: Writes a Python function from a requirement
# - interpreter.py: Derives an OpenAI function schema from Python source
# - data_transformation.py: Unstructured text -> JSON for a given schema
# - intent_classification.py / sentiment_classification.py: Classifiers
# - citation.py: Context-grounded answers with source attribution
# - arithmetic.py: Two-operand calculator on top of data transformation
#
# Supporting modules:
# - base.py: BaseAgent (validation, completions, failure handling)
# - sandbox.py: Runs generated code in an isolated child interpreter
# - errors.py: Error taxonomy
# - models/: Wire shapes and response models
# - prompts/: Default system messages
# =============================================================================

from agents.arithmetic import ArithmeticAgent, MathOperation, apply_operation
from agents.base import BaseAgent
from agents.citation import CitationAgent
from agents.code_interpreter import CodeInterpreterAgent
from agents.data_transformation import DataTransformationAgent
from agents.developer import PythonDeveloperAgent
from agents.errors import (
    AgentError,
    ArgumentParseError,
    CodeGenerationFailedError,
    DivisionByZeroError,
    EmptyCompletionError,
    EvaluationError,
    InterpretationFailedError,
    MissingCredentialError,
    MissingInputError,
    MissingModelError,
    MissingOperandError,
    NoFunctionCallProducedError,
    UnknownOperationError,
    UpstreamFailureError,
)
from agents.intent_classification import Intent, IntentClassificationAgent
from agents.interpreter import FunctionInterpreterAgent
from agents.models import (
    CallableSchema,
    ChatMessage,
    CitationResponse,
    CodeResponse,
    FunctionCall,
    IntentClassificationResponse,
    JsonResponse,
    MessageResponse,
    SentimentClassificationResponse,
    SentimentType,
)
from agents.sentiment_classification import SentimentClassificationAgent

__all__ = [
    # Agents
    "BaseAgent",
    "CodeInterpreterAgent",
    "PythonDeveloperAgent",
    "FunctionInterpreterAgent",
    "DataTransformationAgent",
    "IntentClassificationAgent",
    "SentimentClassificationAgent",
    "CitationAgent",
    "ArithmeticAgent",
    "Intent",
    "MathOperation",
    "apply_operation",
    # Models
    "CallableSchema",
    "ChatMessage",
    "FunctionCall",
    "MessageResponse",
    "JsonResponse",
    "CodeResponse",
    "CitationResponse",
    "IntentClassificationResponse",
    "SentimentClassificationResponse",
    "SentimentType",
    # Errors
    "AgentError",
    "MissingCredentialError",
    "MissingModelError",
    "MissingInputError",
    "EmptyCompletionError",
    "NoFunctionCallProducedError",
    "ArgumentParseError",
    "UpstreamFailureError",
    "CodeGenerationFailedError",
    "InterpretationFailedError",
    "EvaluationError",
    "DivisionByZeroError",
    "UnknownOperationError",
    "MissingOperandError",
]
