"""Find the bottom of a tower of programs and the weight that would balance it."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

_LINE = re.compile(r"^(\S+) \((\d+)\)(?: -> (.*))?$")


@dataclass(frozen=True)
class Program:
    """A program with its own weight and the programs it holds up."""

    name: str
    weight: int
    children: tuple[str, ...] = ()


def parse_tower(text: str) -> dict[str, Program]:
    """Map each program name to its description, in input order."""
    tower: dict[str, Program] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = _LINE.match(line)
        if not match:
            raise ValueError(f"malformed program line: {line!r}")
        name, weight, held = match.groups()
        children = tuple(child.strip() for child in held.split(",")) if held else ()
        tower[name] = Program(name, int(weight), children)
    return tower


def bottom_program(tower: Mapping[str, Program]) -> str:
    """Name of the program that no other program holds."""
    held = {child for program in tower.values() for child in program.children}
    for name in tower:
        if name not in held:
            return name
    raise ValueError("every program is held by another")


def corrected_weight(tower: Mapping[str, Program]) -> int:
    """Weight the single wrong program would need for the tower to balance."""
    answer: int | None = None

    def lookup(name: str) -> Program:
        try:
            return tower[name]
        except KeyError:
            raise ValueError(f"program {name!r} is not described") from None

    def total(name: str) -> int:
        nonlocal answer
        program = lookup(name)
        children = program.children
        if not children:
            return program.weight
        first = total(children[0])
        odd: int | None = None
        settled: int | None = None
        for index, child in enumerate(children[1:], start=1):
            current = total(child)
            if odd is not None:
                if current == odd:
                    settled = odd
                    answer = lookup(children[index - 2]).weight - (first - odd)
                else:
                    settled = first
                    answer = lookup(children[index - 1]).weight - (odd - first)
                break
            if current == first:
                settled = first
            else:
                odd = current
                if settled is not None:
                    answer = lookup(child).weight - (current - settled)
                    break
        return (settled if settled is not None else -1) * len(children) + program.weight

    total(bottom_program(tower))
    if answer is None:
        raise ValueError("the tower is already balanced")
    return answer


def part1(text: str) -> str:
    """Name of the bottom program."""
    return bottom_program(parse_tower(text))


def part2(text: str) -> int:
    """Weight that balances the tower."""
    return corrected_weight(parse_tower(text))