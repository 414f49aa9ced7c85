# =============================================================================
# tests/test_data_transformation.py - Data Transformation Agent Tests
# =============================================================================

import pytest
from pydantic import ValidationError

from agents.data_transformation import DataTransformationAgent
from agents.errors import MissingCredentialError
from agents.models import CallableSchema
from agents.prompts import DATA_TRANSFORMATION_SYSTEM_PROMPT


TEMPERATURE_ARGUMENTS = {
    "temperature_number": 32,
    "temperature_current_type": "Fahrenheit",
    "temperature_desired_type": "Celsius",
}


class TestDataTransformationAgent:
    """Test unstructured text -> JSON extraction."""

    def test_extracts_schema_arguments(self, mock_client, completion, temperature_function):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("convertTemperature", TEMPERATURE_ARGUMENTS)
        )
        agent = DataTransformationAgent(temperature_function, client=mock_client)

        response = agent.run("It is 32 degrees Fahrenheit. What is that in Celsius?")

        assert response.success is True
        assert response.data == TEMPERATURE_ARGUMENTS

    def test_offers_caller_schema(self, mock_client, completion, temperature_function, sent_messages):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("convertTemperature", TEMPERATURE_ARGUMENTS)
        )
        agent = DataTransformationAgent(temperature_function, client=mock_client)

        agent.run("32F to C")

        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["functions"] == [temperature_function]
        assert kwargs["temperature"] == 0.0
        assert sent_messages()[0] == {"role": "system", "content": DATA_TRANSFORMATION_SYSTEM_PROMPT}

    def test_accepts_callable_schema(self, mock_client, temperature_function):
        schema = CallableSchema.model_validate(temperature_function)
        agent = DataTransformationAgent(schema, client=mock_client)
        assert agent.schema is schema

    def test_invalid_schema_rejected(self, mock_client):
        with pytest.raises(ValidationError):
            DataTransformationAgent({"description": "no name"}, client=mock_client)

    def test_identical_responses_give_identical_data(self, mock_client, completion, temperature_function):
        mock_client.chat.completions.create.side_effect = [
            completion(function_call=("convertTemperature", TEMPERATURE_ARGUMENTS)),
            completion(function_call=("convertTemperature", TEMPERATURE_ARGUMENTS)),
        ]
        agent = DataTransformationAgent(temperature_function, client=mock_client)

        first = agent.run("32F to C")
        second = agent.run("32F to C")

        assert first.data == second.data

    def test_text_reply_fails(self, mock_client, completion, temperature_function):
        mock_client.chat.completions.create.return_value = completion(content="That is 0 degrees Celsius.")
        agent = DataTransformationAgent(temperature_function, client=mock_client)

        response = agent.run("32F to C")

        assert response.success is False
        assert response.error_code == "NO_FUNCTION_CALL_PRODUCED"
        assert response.data == {}

    def test_malformed_arguments_fail(self, mock_client, completion, temperature_function):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("convertTemperature", "{not json")
        )
        agent = DataTransformationAgent(temperature_function, client=mock_client)

        assert agent.run("32F to C").error_code == "ARGUMENT_PARSE_ERROR"

    def test_empty_message_fails(self, mock_client, temperature_function):
        agent = DataTransformationAgent(temperature_function, client=mock_client)

        assert agent.run("").error_code == "MISSING_INPUT"
        mock_client.chat.completions.create.assert_not_called()

    def test_missing_credential_raises(self, mock_client, temperature_function):
        with pytest.raises(MissingCredentialError):
            DataTransformationAgent(temperature_function, api_key="", client=mock_client)
