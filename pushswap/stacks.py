"""The two stacks and the operations that move numbers between them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from .formatting import format_template


@dataclass(eq=False)
class Node:
    """One number on a stack, with the bookkeeping the sorter attaches to it."""

    content: int
    index: int = 0
    cost_to_top: int = 0
    nearest: int = 0


class Machine:
    """Stacks ``a`` and ``b``; the top of a stack is its first element.

    Every operation is recorded in :attr:`operations` and, if *echo* is
    given, passed to it as it happens.
    """

    def __init__(
        self,
        numbers: Iterable[int] = (),
        echo: Callable[[str], None] | None = None,
    ) -> None:
        self.a: list[Node] = [Node(int(n)) for n in numbers]
        self.b: list[Node] = []
        self.operations: list[str] = []
        self._echo = echo

    def stack(self, name: str) -> list[Node]:
        """Return stack ``'a'`` or ``'b'``."""
        if name == "a":
            return self.a
        if name == "b":
            return self.b
        raise ValueError(f"unknown stack {name!r}")

    def _record(self, template: str, name: str) -> None:
        op = format_template(template, name)
        self.operations.append(op)
        if self._echo is not None:
            self._echo(op)

    def swap(self, name: str) -> None:
        """Exchange the top two elements; fewer than two leaves it unchanged."""
        lst = self.stack(name)
        if len(lst) >= 2:
            lst[0], lst[1] = lst[1], lst[0]
        self._record("s%c", name)

    def push(self, dest_name: str) -> None:
        """Move the top of the other stack onto *dest_name*, if there is one."""
        dest = self.stack(dest_name)
        src = self.b if dest is self.a else self.a
        if src:
            dest.insert(0, src.pop(0))
        self._record("p%c", dest_name)

    def rotate(self, name: str) -> None:
        """Move the top element to the bottom."""
        lst = self.stack(name)
        if not lst:
            raise IndexError(f"cannot rotate empty stack {name!r}")
        lst.append(lst.pop(0))
        self._record("r%c", name)

    def reverse_rotate(self, name: str) -> None:
        """Move the bottom element to the top."""
        lst = self.stack(name)
        if not lst:
            raise IndexError(f"cannot reverse-rotate empty stack {name!r}")
        lst.insert(0, lst.pop())
        self._record("rr%c", name)