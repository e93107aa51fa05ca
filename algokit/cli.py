"""Interactive menu for pushing, popping and inspecting a bounded stack."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from algokit.structures import BoundedStack, StackOverflow, StackUnderflow

RULE = "-" * 36

MENU = "\n".join(
    [
        RULE,
        "    STACK IMPLEMENTATION PROGRAM    ",
        RULE,
        "1. Push",
        "2. Pop",
        "3. Size",
        "4. Exit",
        "5. Display",
        RULE,
        "",
    ]
)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _parse_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def _describe(stack: BoundedStack) -> str:
    if not len(stack):
        return "Stack is empty\n"
    return "Stack elements are: " + " ".join(str(value) for value in stack) + "\n"


def run_stack_menu(lines: Iterable[str], out: TextIO) -> BoundedStack:
    """Drive the stack menu from whitespace-separated input tokens.

    Stops on the exit choice or when the input runs out, and returns the
    stack in the state the session left it.
    """
    stack = BoundedStack()
    tokens = _tokens(lines)

    while True:
        out.write(MENU)
        out.write("Enter your choice: ")
        token = next(tokens, None)
        if token is None:
            out.write("\n")
            return stack

        match _parse_int(token):
            case 1:
                out.write("Enter data to push into stack: ")
                data_token = next(tokens, None)
                if data_token is None:
                    out.write("\n")
                    return stack
                data = _parse_int(data_token)
                if data is None:
                    out.write("Invalid data, please try again.\n")
                else:
                    try:
                        stack.push(data)
                    except StackOverflow:
                        out.write("Stack Overflow, can't add more element to stack.\n")
                    else:
                        out.write("Data pushed to stack.\n")
            case 2:
                try:
                    data = stack.pop()
                except StackUnderflow:
                    out.write("Stack is empty.\n")
                else:
                    out.write(f"Data => {data}\n")
            case 3:
                out.write(f"Stack size: {len(stack)}\n")
            case 4:
                out.write("Exiting from app.\n")
                return stack
            case 5:
                out.write(_describe(stack))
            case _:
                out.write("Invalid choice, please try again.\n")

        out.write("\n\n")


def main(argv: list[str] | None = None) -> int:
    """Run the stack menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="algokit-stack",
        description="Push, pop and inspect a stack of up to 100 integers.",
    )
    parser.parse_args(argv)
    run_stack_menu(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())