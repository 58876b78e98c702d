"""A bounded LIFO stack with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

__all__ = ["StackOverflow", "StackUnderflow", "Stack", "main"]

DEFAULT_CAPACITY = 100

MENU = "\nMenu:\n1. Push\n2. Pop\n3. Peek\n4. Display\n5. Exit\n"


class StackOverflow(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when reading from an empty stack."""


class Stack:
    """A stack holding at most ``capacity`` integers."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r}, capacity={self.capacity})"

    def push(self, element: int) -> None:
        """Put ``element`` on top; raise StackOverflow when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflow("stack overflow")
        self._items.append(element)

    def pop(self) -> int:
        """Remove and return the top element; raise StackUnderflow when empty."""
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top element without removing it; raise StackUnderflow when empty."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items[-1]


def _display(stack: Stack) -> str:
    if not stack:
        return "Error: Stack is empty\n"
    return "Stack: " + " ".join(str(value) for value in stack) + "\n"


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive stack menu on standard input and output."""
    parser = argparse.ArgumentParser(prog="dsakit-stack", description="Interactive stack operations.")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY, help="maximum number of elements")
    args = parser.parse_args(argv)
    if args.capacity <= 0:
        parser.error("--capacity must be positive")
    stack = Stack(args.capacity)
    tokens = _tokens(sys.stdin)
    out = sys.stdout
    while True:
        out.write(MENU)
        out.write("Enter your choice: ")
        raw = next(tokens, None)
        if raw is None:
            return 0
        try:
            choice = int(raw)
        except ValueError:
            out.write("Invalid choice\n")
            continue
        if choice == 1:
            out.write("Enter element to push: ")
            raw_element = next(tokens, None)
            if raw_element is None:
                return 0
            try:
                element = int(raw_element)
            except ValueError:
                out.write("Invalid element\n")
                continue
            try:
                stack.push(element)
            except StackOverflow:
                out.write("Error: Stack overflow\n")
            else:
                out.write(f"Pushed {element} to stack\n")
            out.write(_display(stack))
        elif choice == 2:
            try:
                popped = stack.pop()
            except StackUnderflow:
                out.write("Error: Stack underflow\n")
            else:
                out.write(f"Popped {popped} from stack\n")
            out.write(_display(stack))
        elif choice == 3:
            try:
                out.write(f"Top element: {stack.peek()}\n")
            except StackUnderflow:
                out.write("Error: Stack is empty\n")
            out.write(_display(stack))
        elif choice == 4:
            out.write(_display(stack))
        elif choice == 5:
            return 0
        else:
            out.write("Invalid choice\n")