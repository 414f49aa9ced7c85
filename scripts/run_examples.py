#!/usr/bin/env python3
# =============================================================================
# scripts/run_examples.py - Live Agent Examples
# =============================================================================
# Runs the agents against the real OpenAI API and prints their responses.
#
# Usage:
#   python scripts/run_examples.py                     # Run every example
#   python scripts/run_examples.py math citation       # Run selected examples
#   python scripts/run_examples.py --model gpt-4o      # Override the model
#   python scripts/run_examples.py --list
#
# Make sure OPENAI_API_KEY is set in your environment or .env file.
# =============================================================================

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from agents import (
    ArithmeticAgent,
    CitationAgent,
    CodeInterpreterAgent,
    DataTransformationAgent,
    FunctionInterpreterAgent,
    PythonDeveloperAgent,
)
from agents.errors import AgentError


TEMPERATURE_FUNCTION = {
    "name": "convertTemperature",
    "description": "Converts a temperature value from one unit to another.",
    "parameters": {
        "type": "object",
        "properties": {
            "temperature_number": {
                "type": "number",
                "description": "The temperature value to be converted",
            },
            "temperature_current_type": {
                "type": "string",
                "description": 'The current unit of the temperature value. Options are "Celsius", "Fahrenheit", or "Kelvin"',
            },
            "temperature_desired_type": {
                "type": "string",
                "description": 'The desired unit for the converted temperature. Options are "Celsius", "Fahrenheit", or "Kelvin"',
            },
        },
        "required": ["temperature_number", "temperature_current_type", "temperature_desired_type"],
    },
}

CITATION_CONTEXT = '''
"""
Source: algorithms.pdf Page Number: 42
Content: The bubble sort algorithm works by repeatedly swapping adjacent elements if they are in the wrong order.
"""

"""
Source: machine_learning_intro.pdf Page Number: 15
Content: Supervised learning is an approach where the model is trained on a labeled dataset.
"""

"""
Source: operating_systems.pdf Page Number: 68
Content: A kernel is the central part of an operating system. It manages memory and CPU time.
"""

"""
Source: network_security.pdf Page Number: 113
Content: Cryptography is essential for secure communications over any network where you cannot completely trust the other end.
"""
'''


# =============================================================================
# Examples
# =============================================================================

def temperature_example(model):
    agent = DataTransformationAgent(schema=TEMPERATURE_FUNCTION, model=model)
    return agent.run("I want to convert a temperature in Fahrenheit to Celsius. It is 32 degrees Fahrenheit.")


def math_example(model):
    agent = ArithmeticAgent(model=model)
    return agent.run(
        "If Johnny has five apples, and Susie gives him two additional apples, how many apples does Johnny have?"
    )


def code_interpreter_example(model):
    agent = CodeInterpreterAgent(model=model)
    return agent.run("What is the square root of 20?")


def developer_example(model):
    agent = PythonDeveloperAgent(model=model)
    return agent.run("Write a function to reverse a string.")


def function_interpreter_example(model):
    agent = FunctionInterpreterAgent(model=model)
    return agent.run("def reverse_string(s):\n    return s[::-1]\n")


def citation_example(model):
    agent = CitationAgent(model=model)
    return agent.run("What is Cryptography?", CITATION_CONTEXT)


EXAMPLES = {
    "temperature": temperature_example,
    "math": math_example,
    "code-interpreter": code_interpreter_example,
    "developer": developer_example,
    "function-interpreter": function_interpreter_example,
    "citation": citation_example,
}


# =============================================================================
# Main
# =============================================================================

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the agents against the OpenAI API.")
    parser.add_argument(
        "examples",
        nargs="*",
        metavar="EXAMPLE",
        help=f"Examples to run (default: all). One of: {', '.join(EXAMPLES)}",
    )
    parser.add_argument("--model", default=None, help="Override OPENAI_MODEL")
    parser.add_argument("--list", action="store_true", help="List available examples and exit")
    args = parser.parse_args(argv)

    unknown = [name for name in args.examples if name not in EXAMPLES]
    if unknown:
        parser.error(f"unknown example(s): {', '.join(unknown)}")

    return args


def main(argv=None):
    args = parse_args(argv)

    if args.list:
        for name in EXAMPLES:
            print(name)
        return 0

    # Check for API key
    if not os.getenv("OPENAI_API_KEY"):
        print("ERROR: OPENAI_API_KEY not found in environment")
        print("Please set it in your .env file or environment")
        return 1

    failures = 0
    for name in args.examples or list(EXAMPLES):
        print("=" * 60)
        print(f"Example: {name}")
        print("=" * 60)

        try:
            response = EXAMPLES[name](args.model)
        except AgentError as e:
            print(f"ERROR: {e}")
            failures += 1
            continue

        print(response.model_dump_json(indent=2))
        if not response.success:
            failures += 1
        print()

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
