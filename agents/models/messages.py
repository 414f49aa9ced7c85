# =============================================================================
# agents/models/messages.py - Chat Completion Wire Schemas
# =============================================================================
# This module defines the shapes exchanged with the OpenAI chat-completion API:
# - ChatMessage: one role-tagged message in a request
# - CallableSchema: an OpenAI "function" definition offered to the model
# - FunctionCall: the model's decision to call a function
# - InterpretedFunction: arguments returned by the interpreterFunction schema,
#   reshaped into a CallableSchema
#
# Example flow:
#   Interpreter returns:
#   {
#       "functionName": "add",
#       "functionDescription": "Adds two numbers",
#       "functionArguments": [
#           {"name": "a", "type": "number", "description": "First number"},
#           {"name": "b", "type": "number", "description": "Second number"}
#       ]
#   }
#   InterpretedFunction.to_callable_schema() produces:
#   {
#       "name": "add",
#       "description": "Adds two numbers",
#       "parameters": {
#           "type": "object",
#           "properties": {"a": {...}, "b": {...}},
#           "required": ["a", "b"]
#       }
#   }
# =============================================================================

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from agents.errors import ArgumentParseError

# Python type names the interpreter may report, mapped to JSON-schema types
JSON_SCHEMA_TYPES: dict[str, str] = {
    "string": "string",
    "str": "string",
    "number": "number",
    "float": "number",
    "decimal": "number",
    "integer": "integer",
    "int": "integer",
    "boolean": "boolean",
    "bool": "boolean",
    "array": "array",
    "list": "array",
    "tuple": "array",
    "set": "array",
    "object": "object",
    "dict": "object",
    "null": "null",
    "none": "null",
    "nonetype": "null",
}


def json_schema_type(type_name: str | None) -> tuple[str, str | None]:
    """
    Normalize a reported type name to a JSON-schema type.

    Returns (type, item type). The item type is only set for parameterized
    sequences such as "list[int]". Unknown names fall back to "string".
    """
    name = (type_name or "").strip().lower()
    item_type = None

    if name.endswith("]") and "[" in name:
        name, _, inner = name[:-1].partition("[")
        item_type, _ = json_schema_type(inner.split(",")[0])

    return JSON_SCHEMA_TYPES.get(name.strip(), "string"), item_type


# =============================================================================
# Messages
# =============================================================================

class ChatMessage(BaseModel):
    """
    A single message in a chat-completion request.

    The "function" role carries a function result back to the model;
    it must be paired with the function's name.
    """

    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant", "function"]
    content: str
    name: str | None = None

    def to_openai(self) -> dict[str, Any]:
        """Convert to the dict shape accepted by chat.completions.create()."""
        return self.model_dump(exclude_none=True)


# =============================================================================
# Callable Schemas
# =============================================================================

class PropertySpec(BaseModel):
    """
    JSON-schema description of one function parameter.

    Extra keys (enum, items, nested properties) are kept verbatim so that
    caller-supplied schemas pass through untouched.
    """

    model_config = ConfigDict(extra="allow")

    type: str | list[str] = "string"
    description: str = ""


class SchemaParameters(BaseModel):
    """The "parameters" object of a function definition."""

    type: Literal["object"] = "object"
    properties: dict[str, PropertySpec] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class CallableSchema(BaseModel):
    """
    An OpenAI function definition.

    `name` must be unique within one request's list of functions.
    Property insertion order is preserved and is the positional order
    used when a generated function is invoked.
    """

    name: str = Field(..., min_length=1)
    description: str = ""
    parameters: SchemaParameters = Field(default_factory=SchemaParameters)

    @property
    def parameter_names(self) -> list[str]:
        """Parameter names in declaration order."""
        return list(self.parameters.properties)

    def to_openai(self) -> dict[str, Any]:
        """Convert to the dict shape accepted in `functions=[...]`."""
        return self.model_dump(exclude_none=True)


class InterpretedArgument(BaseModel):
    """One entry of interpreterFunction's functionArguments list."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    type: str = "string"
    description: str = ""
    items_type: str | None = Field(default=None, alias="itemsType")


class InterpretedFunction(BaseModel):
    """
    Arguments returned by the fixed interpreterFunction schema.

    Validation fails on a missing name or an empty/malformed argument list.
    """

    model_config = ConfigDict(populate_by_name=True)

    function_name: str = Field(..., min_length=1, alias="functionName")
    function_description: str = Field(default="", alias="functionDescription")
    function_arguments: list[InterpretedArgument] = Field(
        ...,
        min_length=1,
        alias="functionArguments",
    )

    def to_callable_schema(self) -> CallableSchema:
        """
        Reshape into a CallableSchema.

        Every property is required: `required` is exactly the key list of
        `properties`. A repeated argument name keeps its last definition.
        Type names are normalized to JSON-schema types and array parameters
        always carry an `items` schema.
        """
        properties: dict[str, PropertySpec] = {}
        for arg in self.function_arguments:
            schema_type, item_type = json_schema_type(arg.type)
            extra: dict[str, Any] = {}

            if schema_type == "array":
                item_type = item_type or (arg.items_type and json_schema_type(arg.items_type)[0])
                extra["items"] = {"type": item_type} if item_type else {}

            properties[arg.name] = PropertySpec(type=schema_type, description=arg.description, **extra)

        return CallableSchema(
            name=self.function_name,
            description=self.function_description,
            parameters=SchemaParameters(
                properties=properties,
                required=list(properties),
            ),
        )


# =============================================================================
# Function Calls
# =============================================================================

class FunctionCall(BaseModel):
    """A function call chosen by the model: a name plus JSON-encoded arguments."""

    name: str
    arguments: str

    def parse_arguments(self) -> dict[str, Any]:
        """
        Decode the JSON arguments.

        Raises:
            ArgumentParseError: If arguments is not a JSON object
        """
        try:
            data = json.loads(self.arguments)
        except json.JSONDecodeError as e:
            raise ArgumentParseError(self.name, str(e), self.arguments)

        if not isinstance(data, dict):
            raise ArgumentParseError(self.name, "arguments must be a JSON object", self.arguments)

        return data
