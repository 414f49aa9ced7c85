# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Builds real openai ChatCompletion objects for stubbed responses
# - Provides a MagicMock OpenAI client
# =============================================================================

import json
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("OPENAI_MODEL", "gpt-4o-mini")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from unittest.mock import MagicMock

import pytest
from openai.types.chat import ChatCompletion


def make_completion(content=None, function_call=None, no_choices=False):
    """
    Build a ChatCompletion like the ones returned by chat.completions.create().

    Args:
        content: Assistant text content
        function_call: (name, arguments) tuple; dict arguments are JSON-encoded
        no_choices: Return a completion with an empty choices list
    """
    message = {"role": "assistant", "content": content}

    if function_call is not None:
        name, arguments = function_call
        if not isinstance(arguments, str):
            arguments = json.dumps(arguments)
        message["function_call"] = {"name": name, "arguments": arguments}

    choices = [] if no_choices else [
        {
            "index": 0,
            "finish_reason": "function_call" if function_call is not None else "stop",
            "message": message,
        }
    ]

    return ChatCompletion.model_validate({
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o-mini",
        "choices": choices,
    })


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def completion():
    """Factory fixture for stubbed ChatCompletion objects."""
    return make_completion


@pytest.fixture
def mock_client():
    """
    OpenAI client double.

    Set `mock_client.chat.completions.create.side_effect` to a list of
    completions (or exceptions) returned in order.
    """
    return MagicMock()


@pytest.fixture
def sent_messages(mock_client):
    """Messages sent in each create() call, in call order."""
    def _sent(call_index=-1):
        return mock_client.chat.completions.create.call_args_list[call_index].kwargs["messages"]
    return _sent


@pytest.fixture
def temperature_function():
    """A caller-supplied function definition for data transformation."""
    return {
        "name": "convertTemperature",
        "description": "Converts a temperature value from one unit to another.",
        "parameters": {
            "type": "object",
            "properties": {
                "temperature_number": {
                    "type": "number",
                    "description": "The temperature value to be converted",
                },
                "temperature_current_type": {
                    "type": "string",
                    "description": "The current unit of the temperature value",
                },
                "temperature_desired_type": {
                    "type": "string",
                    "description": "The desired unit for the converted temperature",
                },
            },
            "required": ["temperature_number", "temperature_current_type", "temperature_desired_type"],
        },
    }
