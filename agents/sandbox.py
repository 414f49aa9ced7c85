# =============================================================================
# agents/sandbox.py - Generated Code Sandbox
# =============================================================================
# Evaluates model-generated Python in a separate, isolated interpreter.
#
# The generated source never runs in this process:
# - A child `python -I` runs agents/_sandbox_runner.py
# - The payload (source, function name, positional arguments) goes in on stdin
# - The result comes back as JSON on stdout, already converted to text
# - The child is killed after SANDBOX_TIMEOUT_SECONDS and its address space
#   is capped at SANDBOX_MEMORY_LIMIT_MB (POSIX)
# - The child gets a minimal environment (no credentials) and an empty
#   temporary working directory, so it cannot read the server's config
#
# Every failure (syntax error, exception, wrong arity, timeout, memory cap,
# crash) surfaces as EvaluationError.
#
# Usage:
#   result = run_generated_function(
#       source="def add(a, b):\n    return a + b",
#       function_name="add",
#       arguments=[5, 2],
#   )
#   # result == "7"
# =============================================================================

from __future__ import annotations

import json
import logging
import os
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import Any

from app.config import settings
from agents.errors import EvaluationError

# Set up logging for this module
logger = logging.getLogger(__name__)

RUNNER_PATH = Path(__file__).with_name("_sandbox_runner.py")


def sandbox_environment() -> dict[str, str]:
    """Environment for the child interpreter: a search path and a UTF-8 locale only."""
    return {
        "PATH": os.defpath,
        "LANG": "C.UTF-8",
        "LC_ALL": "C.UTF-8",
        "PYTHONIOENCODING": "utf-8",
    }


def run_generated_function(
    source: str,
    function_name: str,
    arguments: list[Any],
    timeout: float | None = None,
    memory_limit_mb: int | None = None,
) -> str:
    """
    Run a generated function in a child interpreter and return str(result).

    Args:
        source: Generated Python source defining the function
        function_name: Preferred top-level function to call
        arguments: Positional argument values, in parameter order
        timeout: Seconds before the child is killed (default: settings)
        memory_limit_mb: Address-space cap for the child (default: settings)

    Returns:
        Text representation of the function's return value

    Raises:
        EvaluationError: If the code cannot be run or raises
    """
    timeout = settings.SANDBOX_TIMEOUT_SECONDS if timeout is None else timeout
    memory_limit_mb = settings.SANDBOX_MEMORY_LIMIT_MB if memory_limit_mb is None else memory_limit_mb

    payload = json.dumps({
        "source": source,
        "function_name": function_name,
        "arguments": arguments,
        "memory_limit_mb": memory_limit_mb,
    })

    logger.debug(f"Evaluating '{function_name}' in sandbox with {len(arguments)} argument(s)")

    try:
        with tempfile.TemporaryDirectory(prefix="agent-sandbox-") as workdir:
            completed = subprocess.run(
                [sys.executable, "-I", str(RUNNER_PATH)],
                input=payload,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=timeout,
                check=False,
                env=sandbox_environment(),
                cwd=workdir,
            )
    except subprocess.TimeoutExpired:
        raise EvaluationError(
            f"Generated function '{function_name}' timed out after {timeout}s",
            details={"timeout": timeout},
        )
    except OSError as e:
        raise EvaluationError(f"Could not start sandbox interpreter: {e}")

    if completed.returncode != 0 or not completed.stdout:
        raise EvaluationError(
            f"Sandbox exited with code {completed.returncode}",
            details={"stderr": completed.stderr[-1000:]},
        )

    try:
        outcome = json.loads(completed.stdout)
    except json.JSONDecodeError:
        raise EvaluationError(
            "Sandbox returned malformed output",
            details={"stdout": completed.stdout[-1000:]},
        )

    if not outcome.get("ok"):
        error_type = outcome.get("error_type", "Error")
        raise EvaluationError(
            f"Generated function '{function_name}' raised {error_type}: {outcome.get('error', '')}",
            details={"error_type": error_type, "stderr": completed.stderr[-1000:]},
        )

    return outcome["result"]
