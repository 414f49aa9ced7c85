# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the function agents:
# - test_models.py: Pydantic model, error and settings behavior
# - test_base.py: BaseAgent construction and completion handling
# - test_sandbox.py: Generated code execution in the child interpreter
# - test_<agent>.py: One module per agent (mocked OpenAI client)
# - test_api.py: FastAPI endpoints
#
# Run tests with: pytest
# =============================================================================
