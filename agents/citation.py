# =============================================================================
# agents/citation.py - Citation Agent
# =============================================================================
# Answers a question from supplied context and cites the source it used.
#
# Retrieval happens outside this agent: the caller passes the retrieved
# context as a string, which is injected as a "function" message named
# `context`. The model answers through the fixed `citation` schema.
#
# Usage:
#   agent = CitationAgent()
#   response = agent.run(
#       "What is the refund window?",
#       context="[policy.pdf p.4] Refunds are accepted within 30 days...",
#   )
#   response.message            # "Refunds are accepted within 30 days."
#   response.citation.filename  # "policy.pdf"
# =============================================================================

from __future__ import annotations

import logging

from openai import OpenAI

from agents.base import BaseAgent
from agents.errors import MissingInputError
from agents.models.messages import CallableSchema, ChatMessage, PropertySpec, SchemaParameters
from agents.models.responses import GENERIC_FAILURE_MESSAGE, Citation, CitationResponse
from agents.prompts import CITATION_SYSTEM_PROMPT
from lib.utils import elapsed_ms, start_timer

# Set up logging for this module
logger = logging.getLogger(__name__)


CITATION_FUNCTION = CallableSchema(
    name="citation",
    description=(
        "Returns the citation of source used from the context provided as well the response "
        "to the user message"
    ),
    parameters=SchemaParameters(
        properties={
            "responseToUsersMessage": PropertySpec(
                type="string",
                description="The response to the user message",
            ),
            "filename": PropertySpec(
                type="string",
                description="The filename of the source used from the context provided.",
            ),
            "pageNumber": PropertySpec(
                type="number",
                description="The page number of the source used from the context provided.",
            ),
            "explanationOfWhyThisSourceWasChosen": PropertySpec(
                type="string",
                description="Explain why this source was chosen, or why no source was chosen",
            ),
        },
        required=[
            "filename",
            "pageNumber",
            "explanationOfWhyThisSourceWasChosen",
            "responseToUsersMessage",
        ],
    ),
)


class CitationAgent(BaseAgent):
    """Context-grounded question answering with source attribution."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        system_message: str = CITATION_SYSTEM_PROMPT,
        client: OpenAI | None = None,
    ):
        super().__init__(api_key=api_key, model=model, client=client)
        self.system_message = system_message

    def run(self, user_message: str, context: str) -> CitationResponse:
        """
        Answer `user_message` from `context`.

        Returns:
            CitationResponse; `context` is echoed back on success and failure
        """
        logger.info(f"{self.name} invoked with: '{user_message[:80]}'")
        start = start_timer()

        try:
            if not user_message:
                raise MissingInputError("user message")
            if not context:
                raise MissingInputError("context")

            call = self._complete_function_call(
                "citation",
                [
                    ChatMessage(role="system", content=self.system_message),
                    ChatMessage(role="user", content=user_message),
                    ChatMessage(role="function", name="context", content=context),
                ],
                [CITATION_FUNCTION],
            )
            args = call.parse_arguments()

            citation = Citation(
                filename=args.get("filename"),
                page_number=args.get("pageNumber"),
                explanation=args.get("explanationOfWhyThisSourceWasChosen"),
            )

            logger.info(f"{self.name} successfully completed in {elapsed_ms(start)}ms")
            return CitationResponse(
                message=args.get("responseToUsersMessage") or "",
                citation=citation,
                context=context,
                success=True,
                duration_ms=elapsed_ms(start),
            )

        except Exception as e:
            return CitationResponse(
                message=GENERIC_FAILURE_MESSAGE,
                context=context or "",
                success=False,
                **self._failure(e, start),
            )
