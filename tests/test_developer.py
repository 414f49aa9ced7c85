# =============================================================================
# tests/test_developer.py - Python Developer Agent Tests
# =============================================================================

from agents.developer import PythonDeveloperAgent
from agents.prompts import PYTHON_DEVELOPER_SYSTEM_PROMPT


REVERSE_SOURCE = "def reverse_string(s):\n    return s[::-1]\n"


class TestPythonDeveloperAgent:
    """Test code generation with a mocked client."""

    def test_returns_code_verbatim(self, mock_client, completion):
        mock_client.chat.completions.create.return_value = completion(content=REVERSE_SOURCE)
        agent = PythonDeveloperAgent(client=mock_client)

        response = agent.run("Write a function to reverse a string.")

        assert response.success is True
        assert response.code == REVERSE_SOURCE
        assert response.language == "python"

    def test_request_uses_system_prompt_and_developer_temperature(self, mock_client, completion, sent_messages):
        mock_client.chat.completions.create.return_value = completion(content=REVERSE_SOURCE)
        agent = PythonDeveloperAgent(client=mock_client, temperature=0.2)

        agent.run("Write a function to reverse a string.")

        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["temperature"] == 0.2
        assert "functions" not in kwargs
        assert sent_messages() == [
            {"role": "system", "content": PYTHON_DEVELOPER_SYSTEM_PROMPT},
            {"role": "user", "content": "Write a function to reverse a string."},
        ]

    def test_custom_system_message(self, mock_client, completion, sent_messages):
        mock_client.chat.completions.create.return_value = completion(content=REVERSE_SOURCE)
        agent = PythonDeveloperAgent(client=mock_client, system_message="Only write one-liners.")

        agent.run("Reverse a string")

        assert sent_messages()[0]["content"] == "Only write one-liners."

    def test_empty_completion_fails(self, mock_client, completion):
        mock_client.chat.completions.create.return_value = completion(content=None)
        agent = PythonDeveloperAgent(client=mock_client)

        response = agent.run("Write a function to reverse a string.")

        assert response.success is False
        assert response.code == ""
        assert response.error_code == "EMPTY_COMPLETION"

    def test_empty_message_fails_without_calling_model(self, mock_client):
        agent = PythonDeveloperAgent(client=mock_client)

        response = agent.run("")

        assert response.error_code == "MISSING_INPUT"
        mock_client.chat.completions.create.assert_not_called()
