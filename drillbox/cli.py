"""Interactive menu programs for the linked list, stack, tokens and browser history."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Iterable, Iterator, TextIO

from drillbox.browser import History
from drillbox.doubly import DoublyLinkedList
from drillbox.singly import LinkedList
from drillbox.tokens import TokenExistsError, TokenNotFoundError, TokenRegistry, format_token

MAX_TOKEN_NAME = 10


class _EndOfInput(Exception):
    """Raised when the input stream runs out."""


class _Console:
    """Reads whitespace-separated answers and whole lines from a text stream."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._in = stdin
        self._out = stdout
        self._pending: list[str] = []

    def write(self, text: str) -> None:
        self._out.write(text)

    def token(self, prompt: str) -> str:
        self.write(prompt)
        while not self._pending:
            line = self._in.readline()
            if not line:
                raise _EndOfInput
            self._pending = line.split()
        return self._pending.pop(0)

    def integer(self, prompt: str) -> int:
        while True:
            text = self.token(prompt)
            try:
                return int(text)
            except ValueError:
                self.write("please enter a whole number\n")

    def line(self, prompt: str) -> str:
        self.write(prompt)
        if self._pending:
            text = " ".join(self._pending)
            self._pending.clear()
            return text
        line = self._in.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\n")

    def confirm(self, prompt: str) -> bool:
        return self.integer(f"{prompt} [1-yes/0-no]:") == 1


def _collect(console: _Console) -> Iterator[int]:
    while True:
        yield console.integer("Enter the data:")
        if not console.confirm("if you want to enter one more value"):
            return


def _show(console: _Console, values: Iterable[int], empty_message: str) -> None:
    items = list(values)
    if not items:
        console.write(empty_message)
    else:
        console.write(" ".join(map(str, items)) + "\n")


def _insert_loop(console: _Console, items: LinkedList | DoublyLinkedList) -> None:
    while True:
        position = console.integer("insertion place:")
        if not 1 <= position <= len(items) + 1:
            console.write("not possible\n")
            return
        items.insert(position, console.integer("Enter the data:"))
        if not console.confirm("if you want to insert another value"):
            return


LIST_MENU = (
    "MENU:\n1.create a linked list\n2.add node at end\n3.add node at the first\n"
    "4.add node at middle\n5.delete node for a given value\n6.display\n7.reverse\n8.exit\n"
)


def _list_session(console: _Console) -> int:
    items = LinkedList()
    console.write(LIST_MENU)
    while True:
        match console.integer("\nEnter your choice:"):
            case 1:
                if items:
                    console.write("a list is already created\n")
                else:
                    for value in _collect(console):
                        items.append(value)
            case 2:
                for value in _collect(console):
                    items.append(value)
            case 3:
                for value in _collect(console):
                    items.prepend(value)
            case 4:
                _insert_loop(console, items)
            case 5:
                if not items:
                    console.write("list is empty\n")
                    continue
                try:
                    items.remove(console.integer("Enter the data to delete:"))
                except ValueError:
                    console.write("data not found\n")
            case 6:
                _show(console, items, "list is empty\n")
            case 7:
                if items:
                    items.reverse()
                else:
                    console.write("list is empty\n")
            case 8:
                return 0
            case _:
                console.write("out of the menu\n" + LIST_MENU)


STACK_MENU = "\nMENU:\n1.Push.\n2.Pop.\n3.isempty\n4.Display.\n5.exit\n"


def _stack_session(console: _Console) -> int:
    stack = LinkedList()
    while True:
        console.write(STACK_MENU)
        match console.integer("\nEnter your choice:"):
            case 1:
                for value in _collect(console):
                    stack.prepend(value)
            case 2:
                while True:
                    if not stack:
                        console.write("Stack is empty\n")
                        break
                    console.write(f"{stack.pop()} is popped\n")
                    if not console.confirm("Do you want to delete one more value"):
                        break
            case 3:
                console.write("Stack have elements\n" if stack else "Stack is empty\n")
            case 4:
                console.write(f"data count:{len(stack)}\n")
                _show(console, stack, "Stack is empty\n")
            case 5:
                return 0
            case _:
                console.write("Out of choice\n")


DOUBLY_MENU = (
    "1-creating a node\n2-add at beginning\n3-add at end\n4-delete\n"
    "5-insert at middle\n6-display\n7-reverse\n8-exit\n"
)


def _doubly_session(console: _Console) -> int:
    items = DoublyLinkedList()
    console.write(DOUBLY_MENU)
    while True:
        match console.integer("\nEnter your choice:"):
            case 1:
                if items:
                    console.write("head is created\n")
                else:
                    for value in _collect(console):
                        items.append(value)
            case 2:
                for value in _collect(console):
                    items.prepend(value)
            case 3:
                for value in _collect(console):
                    items.append(value)
            case 4:
                if not items:
                    console.write("list is empty\n")
                    continue
                while True:
                    try:
                        items.remove(console.integer("Enter the data:"))
                    except ValueError:
                        console.write("data not found\n")
                        break
                    if not items:
                        console.write("now no data is in the list\n")
                        break
                    if not console.confirm("if you want to delete another value"):
                        break
            case 5:
                _insert_loop(console, items)
            case 6:
                if not items:
                    console.write("list is empty\n")
                    continue
                backwards = console.confirm("if you want to print in reverse order")
                console.write("The list is:\n")
                _show(console, reversed(items) if backwards else items, "")
            case 7:
                items = DoublyLinkedList(reversed(items))
            case 8:
                return 0
            case _:
                console.write("out of the menu\n")


TOKEN_MENU = (
    "\nMENU:\n1.Generate token.\n2.Renew token.\n3.Display active token details\n4.exit.\n"
)


def _token_session(console: _Console, registry: TokenRegistry | None = None) -> int:
    registry = registry if registry is not None else TokenRegistry()
    while True:
        console.write(TOKEN_MENU)
        match console.integer("\nEnter the choice:"):
            case 1:
                name = console.token(f"Enter the token name (MAXIMUM {MAX_TOKEN_NAME} LETTERS):")
                if len(name) > MAX_TOKEN_NAME:
                    console.write(f"token name must be at most {MAX_TOKEN_NAME} letters\n")
                    continue
                try:
                    token = registry.generate(name)
                except TokenExistsError:
                    console.write("Token name is already exist try another\n")
                else:
                    console.write("Token generated:\n\n" + format_token(token))
            case 2:
                name = console.token("Enter the token name:")
                try:
                    token = registry.renew(name)
                except TokenNotFoundError:
                    console.write(f"\n{time.ctime()}\ntoken name does not exist\n")
                else:
                    console.write(f"\nToken is renewed at {time.ctime()}\n\n" + format_token(token))
            case 3:
                console.write("TOKEN DETAILS:\n")
                live = registry.active()
                for token in live:
                    console.write("\n" + format_token(token))
                if live:
                    console.write(f"{len(live)} token(s) are active now\n")
                else:
                    console.write(f"{time.ctime()}\nNo tokens in active now\n")
            case 4:
                return 0
            case _:
                console.write("Out of the choice\n")


BROWSER_MENU = "1-visit\n2-back\n3-forward\n4-exit\n"


def _browser_session(console: _Console) -> int:
    history = History(console.line("search :"))
    console.write(BROWSER_MENU)
    while True:
        match console.integer("\nEnter your choice:"):
            case 1:
                page = console.line("Enter:")
                console.write(f"you are currently in {history.current} and visit {page}\n")
                history.visit(page)
            case 2 | 3 as choice:
                steps = console.integer("Enter the steps:")
                if steps > 0:
                    start = history.current
                    direction = "back" if choice == 2 else "forward"
                    move = history.back if choice == 2 else history.forward
                    try:
                        moved = move(steps)
                    except IndexError:
                        console.write(f"you cannot go {direction}\n")
                    else:
                        console.write(
                            f"from {start} you went {direction} {moved} steps, "
                            f"now you are in {history.current}\n"
                        )
            case 4:
                return 0
            case _:
                console.write("Out of choice\n")
        console.write(BROWSER_MENU)


_SESSIONS: dict[str, Callable[[_Console], int]] = {
    "list": _list_session,
    "stack": _stack_session,
    "doubly": _doubly_session,
    "tokens": _token_session,
    "browser": _browser_session,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="drillbox", description="Interactive data-structure drills.")
    parser.add_argument("program", choices=sorted(_SESSIONS), help="which menu program to run")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the chosen menu program on standard input and output."""
    args = _build_parser().parse_args(argv)
    console = _Console(sys.stdin, sys.stdout)
    try:
        return _SESSIONS[args.program](console)
    except _EndOfInput:
        console.write("\n")
        return 0


if __name__ == "__main__":
    sys.exit(main())