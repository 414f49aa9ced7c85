# =============================================================================
# agents/errors.py - Agent Error Taxonomy
# =============================================================================
# Every failure an agent can report has its own exception class and code.
#
# Agents raise these internally and convert them into failed response models
# at their own boundary (see BaseAgent._failure). Only construction-time
# validation (MissingCredentialError, MissingModelError, MissingInputError
# for constructor arguments) escapes to the caller.
# =============================================================================

from __future__ import annotations

from typing import Any

from lib.utils import ApplicationError


class AgentError(ApplicationError):
    """Base class for all agent failures."""

    def __init__(
        self,
        message: str,
        code: str = "AGENT_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


# =============================================================================
# Construction / Input Errors
# =============================================================================

class MissingCredentialError(AgentError):
    """Raised when an agent is built without an OpenAI API key."""

    def __init__(self):
        super().__init__(
            message="Missing OpenAI API key",
            code="MISSING_CREDENTIAL",
            suggestion="Pass api_key=... or set OPENAI_API_KEY in the environment or .env file",
        )


class MissingModelError(AgentError):
    """Raised when an agent is built without a model identifier."""

    def __init__(self):
        super().__init__(
            message="Missing model identifier",
            code="MISSING_MODEL",
            suggestion="Pass model=... or set OPENAI_MODEL in the environment or .env file",
        )


class MissingInputError(AgentError):
    """A required input (user message, context, intents) is empty."""

    def __init__(self, field: str):
        super().__init__(
            message=f"Missing {field}",
            code="MISSING_INPUT",
            suggestion=f"Provide a non-empty {field}",
            details={"field": field},
        )


# =============================================================================
# Completion Errors
# =============================================================================

class EmptyCompletionError(AgentError):
    """The model returned no text content where text was expected."""

    def __init__(self, step: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"No content found in {step} response",
            code="EMPTY_COMPLETION",
            suggestion="The model returned an empty message. Try rephrasing the request.",
            details=details,
        )


class NoFunctionCallProducedError(AgentError):
    """The model answered with text instead of calling the offered function."""

    def __init__(self, step: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"No function call found in {step} response",
            code="NO_FUNCTION_CALL_PRODUCED",
            suggestion="Use a model that supports function calling, or make the request more specific.",
            details=details,
        )


class ArgumentParseError(AgentError):
    """Function-call arguments were not valid JSON."""

    def __init__(self, function_name: str, error: str, raw_arguments: str):
        super().__init__(
            message=f"Invalid JSON arguments for '{function_name}': {error}",
            code="ARGUMENT_PARSE_ERROR",
            suggestion="The model produced malformed arguments. Retry the request.",
            details={"function_name": function_name, "raw_arguments": raw_arguments[:500]},
        )


class UpstreamFailureError(AgentError):
    """Any other failure reported by the OpenAI client (network, auth, rate limit)."""

    def __init__(self, error: Exception):
        super().__init__(
            message=f"OpenAI API call failed: {error}",
            code="UPSTREAM_FAILURE",
            suggestion="Check your OPENAI_API_KEY and network connection",
            details={"error_type": type(error).__name__},
        )


# =============================================================================
# Pipeline Errors
# =============================================================================

class CodeGenerationFailedError(AgentError):
    """The Python developer agent did not produce code."""

    def __init__(self, inner_error: str | None):
        super().__init__(
            message=f"Error generating function: {inner_error}",
            code="CODE_GENERATION_FAILED",
            details={"inner_error": inner_error},
        )


class InterpretationFailedError(AgentError):
    """The function interpreter could not derive a callable schema."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="INTERPRETATION_FAILED",
            details=details,
        )


class EvaluationError(AgentError):
    """Generated code failed to run (syntax, runtime, arity, timeout, memory)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="EVALUATION_ERROR",
            details=details,
        )


# =============================================================================
# Arithmetic Errors
# =============================================================================

class DivisionByZeroError(AgentError):
    """Division with a second operand of exactly zero."""

    def __init__(self, input1: float):
        super().__init__(
            message="Cannot divide by zero",
            code="DIVISION_BY_ZERO",
            details={"input1": input1, "input2": 0},
        )


class UnknownOperationError(AgentError):
    """Operation tag is not one of add/subtract/multiply/divide."""

    def __init__(self, operation: str):
        super().__init__(
            message=f'Invalid operation "{operation}"',
            code="UNKNOWN_OPERATION",
            suggestion="Supported operations: add, subtract, multiply, divide",
            details={"operation": operation},
        )


class MissingOperandError(AgentError):
    """An operand or the operation is absent (or not a number)."""

    def __init__(self, field: str, math_input: dict[str, Any]):
        super().__init__(
            message=f"No {field} found in math input: {math_input}",
            code="MISSING_OPERAND",
            details={"field": field, "math_input": math_input},
        )
