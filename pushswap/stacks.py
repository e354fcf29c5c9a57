"""The two stacks of the puzzle and the eleven operations on them.

Each stack is a deque whose first element is the top.  Every operation
takes a ``record`` flag; when it is set, the operation's name is appended
to :attr:`Stacks.moves`.  As in the puzzle rules, an operation that cannot
change anything (too few elements) is still recorded.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from enum import IntEnum
from itertools import pairwise


class StackId(IntEnum):
    """Which of the two stacks an operation acts on."""

    A = 0
    B = 1

    @property
    def letter(self) -> str:
        return "a" if self is StackId.A else "b"


class DuplicateError(ValueError):
    """Raised when a number already in stack A is added again."""


class Stacks:
    """Stacks A and B, together with the list of recorded moves."""

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self._stacks: tuple[deque[int], deque[int]] = (deque(), deque())
        self.moves: list[str] = []
        for number in numbers:
            self.add(number)

    @property
    def a(self) -> deque[int]:
        """Stack A, top first."""
        return self._stacks[StackId.A]

    @property
    def b(self) -> deque[int]:
        """Stack B, top first."""
        return self._stacks[StackId.B]

    def __getitem__(self, which: StackId | int) -> deque[int]:
        return self._stacks[StackId(which)]

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _record(self, name: str, record: bool) -> None:
        if record:
            self.moves.append(name)

    def add(self, number: int) -> None:
        """Place ``number`` at the bottom of stack A.

        Raises :class:`DuplicateError` if A already holds it.
        """
        if number in self.a:
            raise DuplicateError(f"duplicate number {number}")
        self.a.append(number)

    def _transfer(self, src: StackId, dst: StackId) -> None:
        source = self[src]
        if source:
            self[dst].appendleft(source.popleft())

    def pa(self, record: bool = False) -> None:
        """Move the top of B onto A."""
        self._transfer(StackId.B, StackId.A)
        self._record("pa", record)

    def pb(self, record: bool = False) -> None:
        """Move the top of A onto B."""
        self._transfer(StackId.A, StackId.B)
        self._record("pb", record)

    def swap(self, which: StackId | int, record: bool = False) -> None:
        """Exchange the two top elements of one stack."""
        which = StackId(which)
        stack = self[which]
        if len(stack) > 1:
            stack[0], stack[1] = stack[1], stack[0]
        self._record("s" + which.letter, record)

    def ss(self, record: bool = False) -> None:
        """Swap on both stacks."""
        self.swap(StackId.A)
        self.swap(StackId.B)
        self._record("ss", record)

    def rotate(self, which: StackId | int, record: bool = False) -> None:
        """Move the top element of one stack to its bottom."""
        which = StackId(which)
        self[which].rotate(-1)
        self._record("r" + which.letter, record)

    def rr(self, record: bool = False) -> None:
        """Rotate both stacks."""
        self.rotate(StackId.A)
        self.rotate(StackId.B)
        self._record("rr", record)

    def reverse_rotate(self, which: StackId | int, record: bool = False) -> None:
        """Move the bottom element of one stack to its top."""
        which = StackId(which)
        self[which].rotate(1)
        self._record("rr" + which.letter, record)

    def rrr(self, record: bool = False) -> None:
        """Reverse-rotate both stacks."""
        self.reverse_rotate(StackId.A)
        self.reverse_rotate(StackId.B)
        self._record("rrr", record)

    def apply(self, command: str) -> None:
        """Perform the operation named by ``command`` without recording it.

        Raises ``ValueError`` for an unknown name.
        """
        operations: dict[str, Callable[[], None]] = {
            "sa": lambda: self.swap(StackId.A),
            "sb": lambda: self.swap(StackId.B),
            "ss": self.ss,
            "pa": self.pa,
            "pb": self.pb,
            "ra": lambda: self.rotate(StackId.A),
            "rb": lambda: self.rotate(StackId.B),
            "rr": self.rr,
            "rra": lambda: self.reverse_rotate(StackId.A),
            "rrb": lambda: self.reverse_rotate(StackId.B),
            "rrr": self.rrr,
        }
        try:
            operation = operations[command]
        except KeyError:
            raise ValueError(f"unknown command {command!r}") from None
        operation()

    def is_sorted(self) -> bool:
        """Return True when stack A is in ascending order from the top."""
        return all(upper <= lower for upper, lower in pairwise(self.a))