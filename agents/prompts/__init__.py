# =============================================================================
# agents/prompts/ - System Prompts for AI Agents
# =============================================================================
# This package contains system prompts for each agent:
# - system_messages.py: default system messages and the intent prompt builder
#
# Every agent accepts a system_message override; these are only defaults.
# =============================================================================

from agents.prompts.system_messages import (
    PYTHON_DEVELOPER_SYSTEM_PROMPT,
    FUNCTION_INTERPRETER_SYSTEM_PROMPT,
    CODE_INTERPRETER_PROMPT_ENGINEER_PROMPT,
    CODE_INTERPRETER_INVOCATION_PROMPT,
    CODE_INTERPRETER_EXPLANATION_PROMPT,
    DATA_TRANSFORMATION_SYSTEM_PROMPT,
    SENTIMENT_CLASSIFICATION_SYSTEM_PROMPT,
    CITATION_SYSTEM_PROMPT,
    ARITHMETIC_SYSTEM_PROMPT,
    INTENT_CLASSIFICATION_TEMPLATE,
    build_intent_classification_prompt,
)

__all__ = [
    "PYTHON_DEVELOPER_SYSTEM_PROMPT",
    "FUNCTION_INTERPRETER_SYSTEM_PROMPT",
    "CODE_INTERPRETER_PROMPT_ENGINEER_PROMPT",
    "CODE_INTERPRETER_INVOCATION_PROMPT",
    "CODE_INTERPRETER_EXPLANATION_PROMPT",
    "DATA_TRANSFORMATION_SYSTEM_PROMPT",
    "SENTIMENT_CLASSIFICATION_SYSTEM_PROMPT",
    "CITATION_SYSTEM_PROMPT",
    "ARITHMETIC_SYSTEM_PROMPT",
    "INTENT_CLASSIFICATION_TEMPLATE",
    "build_intent_classification_prompt",
]
