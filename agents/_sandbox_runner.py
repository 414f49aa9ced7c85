# =============================================================================
# agents/_sandbox_runner.py - Sandbox Child Process
# =============================================================================
# Executed as a script by agents/sandbox.py in an isolated interpreter
# (python -I). Standard library only: nothing from this project is importable
# in the child.
#
# Protocol:
#   stdin:  {"source": str, "function_name": str, "arguments": [...],
#            "memory_limit_mb": int}
#   stdout: {"ok": true, "result": str}
#        or {"ok": false, "error_type": str, "error": str}
#
# Output written by the generated code goes to stderr so stdout only ever
# carries the JSON outcome.
# =============================================================================

import ast
import asyncio
import contextlib
import inspect
import json
import sys

try:
    import resource
except ImportError:  # not available on Windows
    resource = None


def limit_memory(limit_mb):
    """Cap the address space of this process."""
    if resource is None or not limit_mb:
        return

    limit = int(limit_mb) * 1024 * 1024
    _, hard = resource.getrlimit(resource.RLIMIT_AS)
    if hard != resource.RLIM_INFINITY:
        limit = min(limit, hard)
    resource.setrlimit(resource.RLIMIT_AS, (limit, hard))


def select_function(source, namespace, function_name):
    """
    Pick the function to call from the executed source.

    Prefers the top-level def named `function_name`; otherwise the last
    top-level def (helpers usually come first). `async def` functions count
    too; main() drives them to completion.
    """
    tree = ast.parse(source)
    definitions = (ast.FunctionDef, ast.AsyncFunctionDef)
    names = [node.name for node in tree.body if isinstance(node, definitions)]

    if not names:
        raise LookupError("No top-level function definition found in generated code")

    name = function_name if function_name in names else names[-1]
    return namespace[name]


def main():
    payload = json.load(sys.stdin)
    limit_memory(payload.get("memory_limit_mb"))

    try:
        source = payload["source"]
        namespace = {"__name__": "generated"}

        with contextlib.redirect_stdout(sys.stderr):
            exec(compile(source, "<generated>", "exec"), namespace)
            function = select_function(source, namespace, payload.get("function_name"))
            result = function(*payload.get("arguments", []))
            if inspect.iscoroutine(result):
                result = asyncio.run(result)
            outcome = {"ok": True, "result": str(result)}

    except (Exception, SystemExit) as e:
        outcome = {"ok": False, "error_type": type(e).__name__, "error": str(e)}

    sys.stdout.write(json.dumps(outcome))
    sys.stdout.flush()


if __name__ == "__main__":
    main()
