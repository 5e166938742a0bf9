"""Bookkeeping that ranks nodes and measures what moving them would cost."""

from __future__ import annotations

from typing import Sequence

from .stacks import Node

_INT_MAX = 2**31 - 1


def set_index(stack: Sequence[Node]) -> None:
    """Rank unranked nodes by content, starting at 1.

    Equal contents keep their stack order, so the one nearer the top ranks lower.
    """
    unranked = sorted((node for node in stack if node.index == 0), key=lambda n: n.content)
    for rank, node in enumerate(unranked, start=1):
        node.index = rank


def set_cost(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Record each node's distance from the top of its stack."""
    for stack in (a, b):
        for position, node in enumerate(stack):
            node.cost_to_top = position


def set_nearest(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Give each node of *b* the index in *a* it should sit on top of.

    That is the smallest index in *a* above the node's own, or the lowest
    index in *a* when none is above it.
    """
    lowest = min((node.index for node in a), default=_INT_MAX)
    for node in b:
        above = [candidate.index for candidate in a if candidate.index > node.index]
        node.nearest = min(above) if above else lowest


def get_cheapest(a: Sequence[Node], b: Sequence[Node]) -> Node | None:
    """Return the node of *b* that needs the fewest rotations to be pushed.

    Costs must already be set; ties go to the node nearer the top of *b*.
    Returns ``None`` when *b* is empty.
    """
    set_nearest(a, b)
    cost_of_index: dict[int, int] = {}
    for node in a:
        cost_of_index.setdefault(node.index, node.cost_to_top)
    cheapest: Node | None = None
    cheapest_cost = _INT_MAX
    for node in b:
        total = node.cost_to_top + cost_of_index.get(node.nearest, 0)
        if total < cheapest_cost:
            cheapest_cost = total
            cheapest = node
    return cheapest


def find_median(stack: Sequence[Node]) -> int:
    """Return the integer mean of the indexes in *stack*."""
    if not stack:
        raise ValueError("cannot take the median of an empty stack")
    return sum(node.index for node in stack) // len(stack)