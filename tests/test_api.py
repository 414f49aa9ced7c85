# =============================================================================
# tests/test_api.py - API Endpoint Tests
# =============================================================================
# Agents are replaced through app.dependency_overrides with instances that
# use a mocked OpenAI client.
# =============================================================================

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.dependencies import (
    get_arithmetic_agent,
    get_citation_agent,
    get_code_interpreter_agent,
    get_openai_client,
    get_sentiment_agent,
)
from app.main import app
from agents.arithmetic import ArithmeticAgent
from agents.citation import CitationAgent
from agents.errors import MissingCredentialError
from agents.sentiment_classification import SentimentClassificationAgent


@pytest.fixture
def client(mock_client):
    app.dependency_overrides[get_openai_client] = lambda: mock_client
    app.dependency_overrides[get_arithmetic_agent] = lambda: ArithmeticAgent(client=mock_client)
    app.dependency_overrides[get_citation_agent] = lambda: CitationAgent(client=mock_client)
    app.dependency_overrides[get_sentiment_agent] = lambda: SentimentClassificationAgent(client=mock_client)

    yield TestClient(app)

    app.dependency_overrides.clear()


# =============================================================================
# Health
# =============================================================================

class TestHealth:
    """Test health endpoints."""

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_liveness(self, client):
        assert client.get("/api/v1/health/live").json()["status"] == "alive"

    def test_readiness_reports_missing_key(self, client, monkeypatch):
        monkeypatch.setattr(settings, "OPENAI_API_KEY", "")

        data = client.get("/api/v1/health/ready").json()

        assert data["status"] == "degraded"
        assert data["checks"]["openai_credentials"] == "missing"

    def test_root(self, client):
        assert client.get("/").json()["health"] == "/api/v1/health"


# =============================================================================
# Agents
# =============================================================================

class TestAgentEndpoints:
    """Test agent endpoints with mocked completions."""

    def test_arithmetic(self, client, mock_client, completion):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("mathInputFunction", {"input1": 12, "input2": 4, "operation": "divide"})
        )

        response = client.post("/api/v1/agents/arithmetic", json={"message": "What is 12 divided by 4?"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"] == {"result": 3.0}

    def test_agent_failure_is_still_200(self, client, mock_client, completion):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("mathInputFunction", {"input1": 1, "input2": 0, "operation": "divide"})
        )

        response = client.post("/api/v1/agents/arithmetic", json={"message": "1 / 0"})

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert response.json()["error_code"] == "DIVISION_BY_ZERO"

    def test_citation(self, client, mock_client, completion):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("citation", {
                "responseToUsersMessage": "Thirty days.",
                "filename": "policy.pdf",
                "pageNumber": 4,
                "explanationOfWhyThisSourceWasChosen": "It states the refund window.",
            })
        )

        response = client.post(
            "/api/v1/agents/citation",
            json={"message": "What is the refund window?", "context": "policy.pdf p.4: 30 days"},
        )

        body = response.json()
        assert body["message"] == "Thirty days."
        assert body["citation"]["filename"] == "policy.pdf"
        assert body["context"] == "policy.pdf p.4: 30 days"

    def test_sentiment(self, client, mock_client, completion):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("sentimentClassificationFunction", {
                "sentimentType": "Negative",
                "whyWasThisSentimentChosen": "Complaint",
                "confidentPercentage": 88,
                "successfullyClassified": True,
            })
        )

        response = client.post("/api/v1/agents/sentiment-classification", json={"message": "This is awful"})

        assert response.json()["sentiment"]["sentiment_type"] == "Negative"

    def test_data_transformation(self, client, mock_client, completion, temperature_function):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("convertTemperature", {
                "temperature_number": 32,
                "temperature_current_type": "Fahrenheit",
                "temperature_desired_type": "Celsius",
            })
        )

        response = client.post(
            "/api/v1/agents/data-transformation",
            json={"message": "32F in Celsius", "function_schema": temperature_function},
        )

        assert response.status_code == 200
        assert response.json()["data"]["temperature_number"] == 32
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["functions"][0]["name"] == "convertTemperature"

    def test_intent_classification(self, client, mock_client, completion):
        mock_client.chat.completions.create.return_value = completion(
            function_call=("intentClassificationFunction", {
                "intentName": "shipping",
                "whyWasThisIntentChosen": "Asks where the parcel is",
                "intentSuccessfullyClassified": True,
            })
        )

        response = client.post(
            "/api/v1/agents/intent-classification",
            json={
                "message": "Where is my parcel?",
                "intents": [
                    {"name": "refund", "description": "Money back"},
                    {"name": "shipping", "description": "Delivery status"},
                ],
            },
        )

        intent = response.json()["intent"]
        assert intent["name"] == "shipping"
        assert intent["confident_percentage"] == 0


# =============================================================================
# Errors
# =============================================================================

class TestErrors:
    """Test HTTP error mapping."""

    def test_empty_message_is_422(self, client):
        response = client.post("/api/v1/agents/arithmetic", json={"message": ""})

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_empty_intents_is_422(self, client):
        response = client.post(
            "/api/v1/agents/intent-classification",
            json={"message": "hi", "intents": []},
        )
        assert response.status_code == 422

    def test_missing_credentials_is_503(self, client):
        def no_credentials():
            raise MissingCredentialError()

        app.dependency_overrides[get_code_interpreter_agent] = no_credentials

        response = client.post("/api/v1/agents/code-interpreter", json={"message": "sqrt of 20"})

        assert response.status_code == 503
        body = response.json()
        assert body["code"] == "MISSING_CREDENTIAL"
        assert "OPENAI_API_KEY" in body["suggestion"]

    def test_per_request_agent_without_credentials_is_503(self, client, monkeypatch, temperature_function):
        monkeypatch.setattr(settings, "OPENAI_API_KEY", "")
        app.dependency_overrides[get_openai_client] = lambda: None

        response = client.post(
            "/api/v1/agents/data-transformation",
            json={"message": "32F in Celsius", "function_schema": temperature_function},
        )

        assert response.status_code == 503
        assert response.json()["code"] == "MISSING_CREDENTIAL"
