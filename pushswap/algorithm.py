"""The sorting strategy: price every element of B, move the cheapest into A.

Stack A is first cut down to three elements, which are sorted directly.
Then each element of B is inserted in front of its successor in A, always
choosing the element whose rotations cost the least.  A final rotation
brings the smallest number to the top.  Every operation is recorded on the
:class:`~pushswap.stacks.Stacks` it is applied to.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from .stacks import StackId, Stacks


class Algorithm(IntEnum):
    """How the two stacks are rotated before a ``pa``."""

    SEPARATED = 0
    RR = 1
    RRR = 2


@dataclass(frozen=True)
class Move:
    """A planned transfer of the element at ``src_idx`` of B into A."""

    src_idx: int
    target_idx: int
    price: int
    algorithm: Algorithm


def _shortest_rotation(size: int, idx: int) -> int:
    return idx if idx < size // 2 else size - idx


def calc_price_separate(stacks: Stacks, src_idx: int, target_idx: int) -> int:
    """Cost of rotating each stack on its own, in whichever direction is shorter."""
    return _shortest_rotation(len(stacks.b), src_idx) + _shortest_rotation(
        len(stacks.a), target_idx
    )


def calc_price_rr(src_idx: int, target_idx: int) -> int:
    """Cost of rotating both stacks forward together."""
    return max(src_idx, target_idx)


def calc_price_rrr(stacks: Stacks, src_idx: int, target_idx: int) -> int:
    """Cost of rotating both stacks backward together."""
    return max(len(stacks.b) - src_idx, len(stacks.a) - target_idx)


def calc_price(stacks: Stacks, src_idx: int, nbr: int) -> Move:
    """Plan the cheapest way to bring ``nbr``, at ``src_idx`` of B, into A.

    Ties go to the separate rotations, then to the joint forward rotation.
    """
    target_idx = get_target_idx(stacks, nbr)
    best = Move(
        src_idx,
        target_idx,
        calc_price_separate(stacks, src_idx, target_idx),
        Algorithm.SEPARATED,
    )
    candidates = (
        (Algorithm.RR, calc_price_rr(src_idx, target_idx)),
        (Algorithm.RRR, calc_price_rrr(stacks, src_idx, target_idx)),
    )
    for algorithm, price in candidates:
        if price < best.price:
            best = Move(src_idx, target_idx, price, algorithm)
    return best


def find_min_idx(stacks: Stacks) -> int:
    """Index in A of its smallest number, or -1 when A is empty."""
    if not stacks.a:
        return -1
    smallest = min(stacks.a)
    return max(idx for idx, nbr in enumerate(stacks.a) if nbr == smallest)


def get_target_idx(stacks: Stacks, nbr: int) -> int:
    """Index in A of the smallest number greater than ``nbr``.

    When no number in A is greater, the index of A's minimum is returned.
    """
    greater = [(value, idx) for idx, value in enumerate(stacks.a) if value > nbr]
    if greater:
        return min(greater)[1]
    return find_min_idx(stacks)


def _repeat(operation: Callable[[], None], times: int) -> None:
    for _ in range(times):
        operation()


def sort_three(stacks: Stacks) -> None:
    """Sort a stack A of exactly three numbers with at most two operations."""
    a = stacks.a
    if len(a) != 3:
        raise ValueError(f"stack A must hold three numbers, not {len(a)}")
    if a[0] > a[1] and a[0] > a[2]:
        stacks.rotate(StackId.A, record=True)
    elif a[1] > a[2]:
        stacks.reverse_rotate(StackId.A, record=True)
    if a[0] > a[1]:
        stacks.swap(StackId.A, record=True)


def finalize_pos(stacks: Stacks) -> None:
    """Rotate A, the shorter way round, until its minimum is on top."""
    min_idx = find_min_idx(stacks)
    if min_idx <= 0:
        return
    size = len(stacks.a)
    if min_idx <= size // 2:
        _repeat(lambda: stacks.rotate(StackId.A, record=True), min_idx)
    else:
        _repeat(lambda: stacks.reverse_rotate(StackId.A, record=True), size - min_idx)


def _bring_to_top(stacks: Stacks, which: StackId, idx: int) -> None:
    size = len(stacks[which])
    if idx < size // 2:
        _repeat(lambda: stacks.rotate(which, record=True), idx)
    else:
        _repeat(lambda: stacks.reverse_rotate(which, record=True), size - idx)


def _joint_rotation(
    joint: Callable[[], None],
    single: Callable[[StackId], None],
    src_count: int,
    target_count: int,
) -> None:
    if src_count <= target_count:
        _repeat(joint, src_count)
        _repeat(lambda: single(StackId.A), target_count - src_count)
    else:
        _repeat(joint, target_count)
        _repeat(lambda: single(StackId.B), src_count - target_count)


def apply_move(stacks: Stacks, move: Move) -> None:
    """Carry out a planned move: rotate as planned, then ``pa``."""
    if move.algorithm is Algorithm.SEPARATED:
        _bring_to_top(stacks, StackId.B, move.src_idx)
        _bring_to_top(stacks, StackId.A, move.target_idx)
    elif move.algorithm is Algorithm.RR:
        _joint_rotation(
            lambda: stacks.rr(record=True),
            lambda which: stacks.rotate(which, record=True),
            move.src_idx,
            move.target_idx,
        )
    else:
        _joint_rotation(
            lambda: stacks.rrr(record=True),
            lambda which: stacks.reverse_rotate(which, record=True),
            len(stacks.b) - move.src_idx,
            len(stacks.a) - move.target_idx,
        )
    stacks.pa(record=True)


def transfer_cheapest(stacks: Stacks) -> Move:
    """Move the element of B that is cheapest to place into A and return the plan."""
    if not stacks.b:
        raise IndexError("stack B is empty")
    cheapest: Move | None = None
    for idx, nbr in enumerate(stacks.b):
        move = calc_price(stacks, idx, nbr)
        if cheapest is None or move.price < cheapest.price:
            cheapest = move
    assert cheapest is not None
    apply_move(stacks, cheapest)
    return cheapest


def push_swap(stacks: Stacks) -> list[str]:
    """Sort stack A, recording the operations; return the recorded moves."""
    if stacks.is_sorted():
        return stacks.moves
    if len(stacks.a) == 2:
        stacks.swap(StackId.A, record=True)
        return stacks.moves
    if len(stacks.a) == 3:
        sort_three(stacks)
        return stacks.moves
    while len(stacks.a) > 3:
        stacks.pb(record=True)
    sort_three(stacks)
    while stacks.b:
        transfer_cheapest(stacks)
    finalize_pos(stacks)
    return stacks.moves