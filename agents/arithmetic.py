# =============================================================================
# agents/arithmetic.py - Arithmetic Agent
# =============================================================================
# Solves "two numbers and one operation" word problems.
#
# 1. DataTransformationAgent extracts {input1, input2, operation} using the
#    mathInputFunction schema (or a caller-supplied replacement)
# 2. apply_operation() computes the result locally - the model never does
#    the arithmetic itself
#
# Usage:
#   agent = ArithmeticAgent()
#   response = agent.run("If Johnny has five apples and Susie gives him two more, how many does he have?")
#   response.data  # {"result": 7}
# =============================================================================

from __future__ import annotations

import logging
import operator
from enum import Enum
from typing import Any, Callable

from openai import OpenAI

from agents.base import BaseAgent
from agents.data_transformation import DataTransformationAgent
from agents.errors import (
    AgentError,
    DivisionByZeroError,
    MissingInputError,
    MissingOperandError,
    UnknownOperationError,
)
from agents.models.messages import CallableSchema, PropertySpec, SchemaParameters
from agents.models.responses import JsonResponse
from agents.prompts import ARITHMETIC_SYSTEM_PROMPT
from lib.utils import elapsed_ms, start_timer

# Set up logging for this module
logger = logging.getLogger(__name__)

Number = int | float


class MathOperation(str, Enum):
    """Operations apply_operation() understands."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


_OPERATORS: dict[MathOperation, Callable[[Number, Number], Number]] = {
    MathOperation.ADD: operator.add,
    MathOperation.SUBTRACT: operator.sub,
    MathOperation.MULTIPLY: operator.mul,
    MathOperation.DIVIDE: operator.truediv,
}


MATH_INPUT_FUNCTION = CallableSchema(
    name="mathInputFunction",
    description="This function will take the user's request and return input1, input2, and operation.",
    parameters=SchemaParameters(
        properties={
            "input1": PropertySpec(type="number", description="The first input number."),
            "input2": PropertySpec(type="number", description="The second input number."),
            "operation": PropertySpec(
                type="string",
                description=(
                    'The operation to perform on the two inputs. Can be "add", "subtract", '
                    '"multiply", or "divide".'
                ),
                enum=[op.value for op in MathOperation],
            ),
        },
        required=["input1", "input2", "operation"],
    ),
)


# =============================================================================
# Pure Arithmetic
# =============================================================================

def _to_number(value: Any, field: str, math_input: dict[str, Any]) -> Number:
    """Coerce an extracted operand; bools and non-numeric strings are rejected."""
    if isinstance(value, bool) or value is None:
        raise MissingOperandError(field, math_input)
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        raise MissingOperandError(field, math_input)


def apply_operation(operation: str | MathOperation, input1: Number, input2: Number) -> Number:
    """
    Apply one of the four supported operations.

    Raises:
        UnknownOperationError: If `operation` is not add/subtract/multiply/divide
        DivisionByZeroError: If dividing by exactly zero
    """
    try:
        op = MathOperation(operation)
    except ValueError:
        raise UnknownOperationError(str(operation))

    if op is MathOperation.DIVIDE and input2 == 0:
        raise DivisionByZeroError(input1)

    logger.debug(f"{op.value} invoked with: {input1}, {input2}")
    return _OPERATORS[op](input1, input2)


def compute(math_input: dict[str, Any]) -> Number:
    """
    Validate an extracted {input1, input2, operation} record and compute it.

    Raises:
        MissingOperandError: If an operand or the operation is absent
        UnknownOperationError, DivisionByZeroError: From apply_operation()
    """
    if math_input.get("operation") is None:
        raise MissingOperandError("operation", math_input)

    input1 = _to_number(math_input.get("input1"), "input1", math_input)
    input2 = _to_number(math_input.get("input2"), "input2", math_input)

    return apply_operation(math_input["operation"], input1, input2)


# =============================================================================
# Agent
# =============================================================================

class ArithmeticAgent(BaseAgent):
    """
    Two-operand calculator driven by natural language.

    Attributes:
        extractor: DataTransformationAgent that pulls out operands and operation
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        operand_schema: CallableSchema | dict[str, Any] | None = None,
        system_message: str = ARITHMETIC_SYSTEM_PROMPT,
        client: OpenAI | None = None,
    ):
        super().__init__(api_key=api_key, model=model, client=client)

        self.extractor = DataTransformationAgent(
            schema=operand_schema or MATH_INPUT_FUNCTION,
            api_key=self.api_key,
            model=self.model,
            system_message=system_message,
            client=self.client,
        )

    def run(self, user_message: str) -> JsonResponse:
        """
        Solve the arithmetic in `user_message`.

        Returns:
            JsonResponse with data {"result": number}
        """
        logger.info(f"{self.name} invoked with: '{user_message[:80]}'")
        start = start_timer()

        try:
            if not user_message:
                raise MissingInputError("user message")

            extracted = self.extractor.run(user_message)
            if not extracted.success:
                raise AgentError(
                    f"Error running data transformation agent: {extracted.error}",
                    code=extracted.error_code or "AGENT_ERROR",
                )

            result = compute(extracted.data)

            logger.info(f"{self.name} successfully completed in {elapsed_ms(start)}ms")
            return JsonResponse(data={"result": result}, success=True, duration_ms=elapsed_ms(start))

        except Exception as e:
            return JsonResponse(data={}, success=False, **self._failure(e, start))
