# =============================================================================
# lib/openai_client.py - OpenAI Client Factory
# =============================================================================
# Builds the OpenAI client shared by the agents.
#
# Agents never retry: a transient network failure is surfaced to the caller
# as a failed result, so the SDK's built-in retry loop is switched off.
# =============================================================================

from openai import OpenAI


def create_openai_client(api_key: str, base_url: str | None = None) -> OpenAI:
    """
    Create an OpenAI client for chat completions.

    Args:
        api_key: OpenAI API key
        base_url: Optional API base URL (proxies, compatible servers)

    Returns:
        OpenAI client with retries disabled
    """
    return OpenAI(api_key=api_key, base_url=base_url, max_retries=0)
