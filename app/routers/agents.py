# =============================================================================
# app/routers/agents.py - Agent Endpoints
# =============================================================================
# One POST endpoint per agent. Each returns the agent's response model as-is,
# so a failed run is still HTTP 200 with success=false and an error_code.
#
# Handlers are plain `def` so FastAPI runs the blocking OpenAI calls and the
# sandbox subprocess in its threadpool.
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.dependencies import (
    ArithmeticDep,
    CitationDep,
    CodeInterpreterDep,
    FunctionInterpreterDep,
    OpenAIClientDep,
    PythonDeveloperDep,
    SentimentDep,
)
from agents.data_transformation import DataTransformationAgent
from agents.intent_classification import Intent, IntentClassificationAgent
from agents.models import (
    CallableSchema,
    CitationResponse,
    CodeResponse,
    IntentClassificationResponse,
    JsonResponse,
    MessageResponse,
    SentimentClassificationResponse,
)
from agents.prompts import DATA_TRANSFORMATION_SYSTEM_PROMPT

router = APIRouter()


# =============================================================================
# Request Models
# =============================================================================

class MessageRequest(BaseModel):
    """A single user message."""
    message: str = Field(
        ...,
        min_length=1,
        examples=["If Johnny has five apples and Susie gives him two more, how many does he have?"],
        description="The user message passed to the agent"
    )


class FunctionInterpreterRequest(BaseModel):
    """Python source to describe."""
    function_code: str = Field(
        ...,
        min_length=1,
        examples=["def add(a, b):\n    return a + b"],
        description="Source of a single Python function"
    )


class CitationRequest(MessageRequest):
    """User question plus the retrieved context to answer from."""
    context: str = Field(
        ...,
        min_length=1,
        description="Retrieved source material the answer must come from"
    )


class DataTransformationRequest(MessageRequest):
    """User message plus the function schema to fill in."""
    function_schema: CallableSchema = Field(
        ...,
        description="OpenAI function definition describing the output JSON"
    )
    system_message: str | None = Field(
        default=None,
        description="Override for the default extraction system prompt"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "message": "My name is Ada and I am 36.",
                "function_schema": {
                    "name": "extractPerson",
                    "description": "Extract a person's details",
                    "parameters": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string", "description": "First name"},
                            "age": {"type": "number", "description": "Age in years"},
                        },
                        "required": ["name", "age"],
                    },
                },
            }
        }
    }


class IntentClassificationRequest(MessageRequest):
    """User message plus the intents to choose from."""
    intents: list[Intent] = Field(
        ...,
        min_length=1,
        description="Candidate intents (name and description)"
    )


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/code-interpreter", response_model=MessageResponse)
def run_code_interpreter(request: MessageRequest, agent: CodeInterpreterDep):
    """
    Answer a question by generating, running and explaining a Python function.
    """
    return agent.run(request.message)


@router.post("/python-developer", response_model=CodeResponse)
def run_python_developer(request: MessageRequest, agent: PythonDeveloperDep):
    """Generate a Python function for the requirement."""
    return agent.run(request.message)


@router.post("/function-interpreter", response_model=JsonResponse)
def run_function_interpreter(request: FunctionInterpreterRequest, agent: FunctionInterpreterDep):
    """Derive an OpenAI function schema from Python source."""
    return agent.run(request.function_code)


@router.post("/data-transformation", response_model=JsonResponse)
def run_data_transformation(request: DataTransformationRequest, client: OpenAIClientDep):
    """
    Convert the message into JSON matching the supplied function schema.

    The agent is built per request because the schema comes from the caller.
    """
    agent = DataTransformationAgent(
        schema=request.function_schema,
        system_message=request.system_message or DATA_TRANSFORMATION_SYSTEM_PROMPT,
        client=client,
    )
    return agent.run(request.message)


@router.post("/intent-classification", response_model=IntentClassificationResponse)
def run_intent_classification(request: IntentClassificationRequest, client: OpenAIClientDep):
    """Pick the best-matching intent from the supplied list."""
    agent = IntentClassificationAgent(intents=request.intents, client=client)
    return agent.run(request.message)


@router.post("/sentiment-classification", response_model=SentimentClassificationResponse)
def run_sentiment_classification(request: MessageRequest, agent: SentimentDep):
    """Classify the message as Positive, Negative or Neutral."""
    return agent.run(request.message)


@router.post("/citation", response_model=CitationResponse)
def run_citation(request: CitationRequest, agent: CitationDep):
    """Answer from the supplied context and cite the source used."""
    return agent.run(request.message, request.context)


@router.post("/arithmetic", response_model=JsonResponse)
def run_arithmetic(request: MessageRequest, agent: ArithmeticDep):
    """Solve a two-operand arithmetic word problem."""
    return agent.run(request.message)
