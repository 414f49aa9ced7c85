# =============================================================================
# tests/test_classification.py - Intent and Sentiment Classification Tests
# =============================================================================

import httpx
import openai
import pytest

from agents.errors import MissingInputError
from agents.intent_classification import (
    INTENT_CLASSIFICATION_FUNCTION,
    Intent,
    IntentClassificationAgent,
    normalize_intent,
)
from agents.models import SentimentType
from agents.sentiment_classification import (
    SENTIMENT_CLASSIFICATION_FUNCTION,
    SentimentClassificationAgent,
    normalize_sentiment,
)


INTENTS = [
    {"name": "refund", "description": "Customer wants their money back"},
    {"name": "shipping", "description": "Questions about delivery status"},
]


# =============================================================================
# Intent Classification
# =============================================================================

class TestIntentClassificationAgent:
    """Test intent selection with a mocked client."""

    def test_classifies_intent(self, mock_client, completion):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("intentClassificationFunction", {
                "intentName": "refund",
                "whyWasThisIntentChosen": "The user asks for their money back",
                "confidentPercentage": 92,
                "intentSuccessfullyClassified": True,
            })
        )
        agent = IntentClassificationAgent(INTENTS, client=mock_client)

        response = agent.run("I want my money back for this broken toaster")

        assert response.success is True
        assert response.intent.name == "refund"
        assert response.intent.why_was_this_intent_chosen == "The user asks for their money back"
        assert response.intent.confident_percentage == 92
        assert response.intent.successfully_classified is True

    def test_system_prompt_lists_intents(self, mock_client, completion, sent_messages):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("intentClassificationFunction", {"intentSuccessfullyClassified": False})
        )
        agent = IntentClassificationAgent(INTENTS, client=mock_client)

        agent.run("hello")

        system = sent_messages()[0]["content"]
        assert "refund: Customer wants their money back" in system
        assert "shipping: Questions about delivery status" in system
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["functions"] == [INTENT_CLASSIFICATION_FUNCTION.to_openai()]

    def test_accepts_intent_models(self, mock_client):
        agent = IntentClassificationAgent([Intent(name="greet", description="Says hi")], client=mock_client)
        assert agent.intents[0].name == "greet"

    def test_empty_intents_raise(self, mock_client):
        with pytest.raises(MissingInputError):
            IntentClassificationAgent([], client=mock_client)

    def test_text_reply_fails_with_default_intent(self, mock_client, completion):
        mock_client.chat.completions.create.return_value = completion(content="refund")
        agent = IntentClassificationAgent(INTENTS, client=mock_client)

        response = agent.run("money back please")

        assert response.success is False
        assert response.error_code == "NO_FUNCTION_CALL_PRODUCED"
        assert response.intent.name is None

    def test_normalize_missing_fields(self):
        intent = normalize_intent({"intentSuccessfullyClassified": False, "whyWasThisIntentChosen": "none fit"})

        assert intent.name is None
        assert intent.confident_percentage == 0
        assert intent.successfully_classified is False


# =============================================================================
# Sentiment Classification
# =============================================================================

class TestSentimentClassificationAgent:
    """Test sentiment labelling with a mocked client."""

    def test_classifies_sentiment(self, mock_client, completion):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("sentimentClassificationFunction", {
                "sentimentType": "Positive",
                "whyWasThisSentimentChosen": "The user is delighted",
                "confidentPercentage": 97.5,
                "successfullyClassified": True,
            })
        )
        agent = SentimentClassificationAgent(client=mock_client)

        response = agent.run("I absolutely love this product!")

        assert response.success is True
        assert response.sentiment.sentiment_type == SentimentType.POSITIVE.value
        assert response.sentiment.confident_percentage == 97.5
        assert response.sentiment.successfully_classified is True

    def test_schema_offers_fixed_labels(self):
        properties = SENTIMENT_CLASSIFICATION_FUNCTION.to_openai()["parameters"]["properties"]
        assert properties["sentimentType"]["enum"] == ["Positive", "Negative", "Neutral"]

    def test_upstream_error_fails(self, mock_client):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        mock_client.chat.completions.create.side_effect = openai.APITimeoutError(request=request)
        agent = SentimentClassificationAgent(client=mock_client)

        response = agent.run("meh")

        assert response.success is False
        assert response.error_code == "UPSTREAM_FAILURE"
        assert response.sentiment.sentiment_type is None

    def test_normalize_missing_confidence(self):
        sentiment = normalize_sentiment({"sentimentType": "Neutral", "successfullyClassified": True})

        assert sentiment.sentiment_type == "Neutral"
        assert sentiment.confident_percentage == 0
        assert sentiment.why_was_this_sentiment_chosen is None
