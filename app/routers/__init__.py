# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - agents.py: One POST endpoint per agent
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import agents
from . import health

__all__ = [
    "agents",
    "health",
]
