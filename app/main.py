# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Function Agents API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import agent_exception_handler, validation_exception_handler
from app.routers import agents, health
from agents.errors import AgentError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs configuration on startup; agents are built lazily on first request.
    """
    logger.info(f"Starting Function Agents API in {settings.ENVIRONMENT} mode")
    logger.info(f"Default model: {settings.OPENAI_MODEL}")
    if not settings.has_openai_credentials:
        logger.warning("OPENAI_API_KEY is not set - agent endpoints will return 503")

    yield

    logger.info("Shutting down Function Agents API")


# Create FastAPI application
app = FastAPI(
    title="Function Agents API",
    description="""
## LLM Agents Built on OpenAI Function Calling

Each endpoint wraps one agent: a system prompt, an optional function schema
and one or a short chain of chat completions, returning typed JSON.

### Agents

| Endpoint | Role |
|----------|------|
| **code-interpreter** | Generates a Python function, runs it in a sandbox, explains the result |
| **python-developer** | Writes a Python function for a requirement |
| **function-interpreter** | Derives an OpenAI function schema from Python source |
| **data-transformation** | Turns unstructured text into JSON for a given schema |
| **intent-classification** | Picks the best-matching intent from a supplied list |
| **sentiment-classification** | Positive / Negative / Neutral with an explanation |
| **citation** | Answers from supplied context and cites the source |
| **arithmetic** | Two-operand calculator driven by natural language |

Agent failures are reported in the body (`success: false`, `error_code`),
not as HTTP errors.

### Quick Start

```bash
curl -X POST http://localhost:8000/api/v1/agents/arithmetic \\
  -H "Content-Type: application/json" \\
  -d '{"message": "What is 12 divided by 4?"}'
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Agents",
            "description": "Run an agent on a single request",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development else settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(AgentError)
async def handle_agent_exception(request: Request, exc: AgentError):
    """Handle agent construction errors (credentials, model, intents)."""
    return await agent_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Agent endpoints
app.include_router(
    agents.router,
    prefix="/api/v1/agents",
    tags=["Agents"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Function Agents API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
