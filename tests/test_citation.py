# =============================================================================
# tests/test_citation.py - Citation Agent Tests
# =============================================================================

from agents.citation import CITATION_FUNCTION, CitationAgent
from agents.models import GENERIC_FAILURE_MESSAGE


CONTEXT = (
    '"""\nSource: algorithms.pdf Page Number: 42\n'
    'Content: Bubble sort repeatedly swaps adjacent elements.\n"""\n\n'
    '"""\nSource: network_security.pdf Page Number: 113\n'
    'Content: Cryptography is essential for secure communications.\n"""\n'
)

CITATION_ARGUMENTS = {
    "responseToUsersMessage": "Cryptography is essential for secure communications.",
    "filename": "network_security.pdf",
    "pageNumber": 113,
    "explanationOfWhyThisSourceWasChosen": "It defines cryptography.",
}


class TestCitationAgent:
    """Test context-grounded answers."""

    def test_answers_with_citation(self, mock_client, completion):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("citation", CITATION_ARGUMENTS)
        )
        agent = CitationAgent(client=mock_client)

        response = agent.run("What is Cryptography?", CONTEXT)

        assert response.success is True
        assert response.message == "Cryptography is essential for secure communications."
        assert response.citation.filename == "network_security.pdf"
        assert response.citation.page_number == 113
        assert response.citation.explanation == "It defines cryptography."
        assert response.context == CONTEXT

    def test_context_sent_as_function_message(self, mock_client, completion, sent_messages):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("citation", CITATION_ARGUMENTS)
        )
        agent = CitationAgent(client=mock_client)

        agent.run("What is Cryptography?", CONTEXT)

        messages = sent_messages()
        assert messages[1] == {"role": "user", "content": "What is Cryptography?"}
        assert messages[2] == {"role": "function", "name": "context", "content": CONTEXT}
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["functions"] == [CITATION_FUNCTION.to_openai()]

    def test_failure_echoes_context(self, mock_client, completion):
        mock_client.chat.completions.create.return_value = completion(content="Cryptography is...")
        agent = CitationAgent(client=mock_client)

        response = agent.run("What is Cryptography?", CONTEXT)

        assert response.success is False
        assert response.error_code == "NO_FUNCTION_CALL_PRODUCED"
        assert response.message == GENERIC_FAILURE_MESSAGE
        assert response.citation is None
        assert response.context == CONTEXT

    def test_no_source_chosen(self, mock_client, completion):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("citation", {
                "responseToUsersMessage": "The context does not cover that.",
                "explanationOfWhyThisSourceWasChosen": "No source matched.",
            })
        )
        agent = CitationAgent(client=mock_client)

        response = agent.run("What is a monad?", CONTEXT)

        assert response.success is True
        assert response.citation.filename is None
        assert response.citation.page_number is None

    def test_empty_context_fails(self, mock_client):
        agent = CitationAgent(client=mock_client)

        response = agent.run("What is Cryptography?", "")

        assert response.error_code == "MISSING_INPUT"
        assert response.context == ""
        mock_client.chat.completions.create.assert_not_called()
