# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - utils.py: Shared utilities (error handling, timing)
# - openai_client.py: OpenAI client factory used by every agent
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.openai_client import create_openai_client
from lib.utils import ApplicationError, elapsed_ms, start_timer

__all__ = [
    # OpenAI
    "create_openai_client",
    # Utils
    "ApplicationError",
    "elapsed_ms",
    "start_timer",
]
