# =============================================================================
# agents/developer.py - Python Developer Agent (Code Generation Step)
# =============================================================================
# Turns a natural-language requirement into the source of a single Python
# function.
#
# The returned code is passed on verbatim: it is never parsed or checked
# here beyond being non-empty. Running it is the sandbox's job.
#
# Usage:
#   agent = PythonDeveloperAgent()
#   response = agent.run("Write a function that reverses a string.")
#   if response.success:
#       print(response.code)
# =============================================================================

from __future__ import annotations

import logging

from openai import OpenAI

from app.config import settings
from agents.base import BaseAgent
from agents.errors import MissingInputError
from agents.models.messages import ChatMessage
from agents.models.responses import CodeResponse
from agents.prompts import PYTHON_DEVELOPER_SYSTEM_PROMPT
from lib.utils import elapsed_ms, start_timer

# Set up logging for this module
logger = logging.getLogger(__name__)


class PythonDeveloperAgent(BaseAgent):
    """
    Generates Python source code from a natural-language request.

    Runs at settings.DEVELOPER_TEMPERATURE (0.2 by default) rather than 0,
    so repeated calls may return different code.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        system_message: str = PYTHON_DEVELOPER_SYSTEM_PROMPT,
        temperature: float | None = None,
        client: OpenAI | None = None,
    ):
        super().__init__(
            api_key=api_key,
            model=model,
            temperature=settings.DEVELOPER_TEMPERATURE if temperature is None else temperature,
            client=client,
        )
        self.system_message = system_message

    def run(self, user_message: str) -> CodeResponse:
        """
        Generate code for `user_message`.

        Returns:
            CodeResponse with the raw source on success, empty code on failure
        """
        logger.info(f"{self.name} invoked with: '{user_message[:80]}'")
        start = start_timer()

        try:
            if not user_message:
                raise MissingInputError("user message")

            code = self._complete_text(
                "code generation",
                [
                    ChatMessage(role="system", content=self.system_message),
                    ChatMessage(role="user", content=user_message),
                ],
            )

            logger.info(f"{self.name} successfully completed in {elapsed_ms(start)}ms")
            return CodeResponse(code=code, success=True, duration_ms=elapsed_ms(start))

        except Exception as e:
            return CodeResponse(code="", success=False, **self._failure(e, start))
