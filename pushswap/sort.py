"""The sorting strategy: park most numbers on b, then insert them back cheaply."""

from __future__ import annotations

from typing import Iterable, Sequence

from .calculations import find_median, get_cheapest, set_cost, set_index
from .stacks import Machine, Node


def is_sorted(stack: Sequence[Node]) -> bool:
    """Return whether contents strictly increase from top to bottom."""
    return all(upper.content < lower.content for upper, lower in zip(stack, stack[1:]))


def _top_three(machine: Machine) -> tuple[int, int, int]:
    first, second, third = machine.a[:3]
    return first.content, second.content, third.content


def small_sort(machine: Machine) -> None:
    """Order the top three numbers of stack a with at most two operations."""
    if len(machine.a) < 3:
        raise ValueError("small sort needs at least three numbers on stack a")

    x, y, z = _top_three(machine)
    if x < y and y > z:
        machine.swap("a")
        machine.rotate("a")
    x, y, z = _top_three(machine)
    if x > y and y < z:
        machine.swap("a")
    x, y, z = _top_three(machine)
    if x < y and y > z:
        machine.rotate("a")
    x, y, z = _top_three(machine)
    if x > y and y < z and x > z:
        machine.reverse_rotate("a")
    x, y, z = _top_three(machine)
    if x > y and y > z:
        machine.swap("a")
        machine.reverse_rotate("a")


def move_to_b(machine: Machine) -> None:
    """Push the lower half and then all but three numbers to b; sort those three."""
    median = find_median(machine.a)
    pushed = 0
    while pushed < len(machine.a) // 2:
        if machine.a[0].index <= median:
            machine.push("b")
            pushed += 1
        else:
            machine.rotate("a")
    while len(machine.a) > 3:
        machine.push("b")
    small_sort(machine)


def move_to_a(machine: Machine) -> None:
    """Return every number from b to a, cheapest first, keeping a in cyclic order."""
    while machine.b:
        set_cost(machine.a, machine.b)
        cheapest = get_cheapest(machine.a, machine.b)
        if cheapest is None:
            break
        for _ in range(cheapest.cost_to_top):
            machine.rotate("b")
        cheapest.cost_to_top = 0
        target = next((n for n in machine.a if n.index == cheapest.nearest), None)
        if target is not None:
            for _ in range(target.cost_to_top):
                machine.rotate("a")
            target.cost_to_top = 0
        machine.push("a")


def last_rotate(machine: Machine) -> None:
    """Rotate a until the node ranked 1 is on top."""
    if not any(node.index == 1 for node in machine.a):
        raise ValueError("stack a holds no node ranked 1")
    while machine.a[0].index != 1:
        machine.rotate("a")


def solve(numbers: Iterable[int]) -> list[str]:
    """Return the operations that sort *numbers* onto stack a."""
    machine = Machine(numbers)
    if not machine.a:
        return []
    set_index(machine.a)
    if len(machine.a) == 3:
        small_sort(machine)
    else:
        move_to_b(machine)
        move_to_a(machine)
    last_rotate(machine)
    return machine.operations