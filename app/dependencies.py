# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for the agents with fixed configuration.
# These are injected into route handlers using Depends().
#
# Agents hold only immutable configuration, so one cached instance serves
# every request. Agents configured per request (data transformation, intent
# classification) are built inside their route handlers.
#
# Tests replace these with app.dependency_overrides.
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from openai import OpenAI

from app.config import settings
from agents.arithmetic import ArithmeticAgent
from agents.citation import CitationAgent
from agents.code_interpreter import CodeInterpreterAgent
from agents.developer import PythonDeveloperAgent
from agents.interpreter import FunctionInterpreterAgent
from agents.sentiment_classification import SentimentClassificationAgent
from lib.openai_client import create_openai_client


@lru_cache
def get_openai_client() -> OpenAI | None:
    """
    Get the OpenAI client shared by per-request agents.

    Returns None without a configured key so that constructing the agent
    raises MissingCredentialError.
    """
    if not settings.has_openai_credentials:
        return None
    return create_openai_client(settings.OPENAI_API_KEY, settings.OPENAI_BASE_URL)


@lru_cache
def get_code_interpreter_agent() -> CodeInterpreterAgent:
    """Get the shared CodeInterpreterAgent (settings credentials)."""
    return CodeInterpreterAgent()


@lru_cache
def get_python_developer_agent() -> PythonDeveloperAgent:
    """Get the shared PythonDeveloperAgent."""
    return PythonDeveloperAgent()


@lru_cache
def get_function_interpreter_agent() -> FunctionInterpreterAgent:
    """Get the shared FunctionInterpreterAgent."""
    return FunctionInterpreterAgent()


@lru_cache
def get_sentiment_agent() -> SentimentClassificationAgent:
    """Get the shared SentimentClassificationAgent."""
    return SentimentClassificationAgent()


@lru_cache
def get_citation_agent() -> CitationAgent:
    """Get the shared CitationAgent."""
    return CitationAgent()


@lru_cache
def get_arithmetic_agent() -> ArithmeticAgent:
    """Get the shared ArithmeticAgent."""
    return ArithmeticAgent()


# Type aliases for dependency injection
OpenAIClientDep = Annotated[OpenAI | None, Depends(get_openai_client)]
CodeInterpreterDep = Annotated[CodeInterpreterAgent, Depends(get_code_interpreter_agent)]
PythonDeveloperDep = Annotated[PythonDeveloperAgent, Depends(get_python_developer_agent)]
FunctionInterpreterDep = Annotated[FunctionInterpreterAgent, Depends(get_function_interpreter_agent)]
SentimentDep = Annotated[SentimentClassificationAgent, Depends(get_sentiment_agent)]
CitationDep = Annotated[CitationAgent, Depends(get_citation_agent)]
ArithmeticDep = Annotated[ArithmeticAgent, Depends(get_arithmetic_agent)]
