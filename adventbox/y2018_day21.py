"""Run an instruction-pointer program and find the values that would make it halt."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

Instruction = tuple[str, int, int, int]

_OPS: dict[str, Callable[[list[int], int, int], int]] = {
    "addr": lambda r, a, b: r[a] + r[b],
    "addi": lambda r, a, b: r[a] + b,
    "mulr": lambda r, a, b: r[a] * r[b],
    "muli": lambda r, a, b: r[a] * b,
    "banr": lambda r, a, b: r[a] & r[b],
    "bani": lambda r, a, b: r[a] & b,
    "borr": lambda r, a, b: r[a] | r[b],
    "bori": lambda r, a, b: r[a] | b,
    "setr": lambda r, a, b: r[a],
    "seti": lambda r, a, b: a,
    "gtir": lambda r, a, b: int(a > r[b]),
    "gtri": lambda r, a, b: int(r[a] > b),
    "gtrr": lambda r, a, b: int(r[a] > r[b]),
    "eqir": lambda r, a, b: int(a == r[b]),
    "eqri": lambda r, a, b: int(r[a] == b),
    "eqrr": lambda r, a, b: int(r[a] == r[b]),
}


@dataclass
class Device:
    """Six registers, one of which is bound to the instruction pointer."""

    ip: int
    registers: list[int] = field(default_factory=lambda: [0] * 6)

    def execute(self, op: str, a: int, b: int, c: int) -> None:
        """Apply one operation, storing its result in register c."""
        try:
            operation = _OPS[op]
        except KeyError:
            raise ValueError(f"unknown operation {op!r}") from None
        self.registers[c] = operation(self.registers, a, b)


def parse_program(text: str) -> tuple[int, list[Instruction]]:
    """Return the instruction pointer register and the instructions."""
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines or not lines[0].startswith("#ip"):
        raise ValueError("missing #ip declaration")
    ip = int(lines[0].split()[1])
    program: list[Instruction] = []
    for line in lines[1:]:
        words = line.split()
        if len(words) != 4 or words[0] not in _OPS:
            raise ValueError(f"malformed instruction: {line!r}")
        program.append((words[0], int(words[1]), int(words[2]), int(words[3])))
    return ip, program


def _check(program: list[Instruction]) -> tuple[int, int]:
    """Index of the comparison against register 0 and the register compared with it."""
    for index, (op, a, b, _) in enumerate(program):
        if op == "eqrr" and b == 0:
            return index, a
        if op == "eqrr" and a == 0:
            return index, b
    raise ValueError("the program never compares against register 0")


def _compared(text: str) -> Iterator[int]:
    ip, program = parse_program(text)
    check, key = _check(program)
    device = Device(ip)
    pointer = 0
    while 0 <= pointer < len(program):
        device.registers[ip] = pointer
        if pointer == check:
            yield device.registers[key]
        device.execute(*program[pointer])
        pointer = device.registers[ip] + 1


def halting_values(text: str) -> Iterator[int]:
    """Yield, in order, each distinct value register 0 is compared with, until one repeats."""
    seen: set[int] = set()
    for value in _compared(text):
        if value in seen:
            return
        seen.add(value)
        yield value


def solve(text: str) -> tuple[int, int]:
    """Register 0 values halting the program soonest and latest before the comparisons repeat."""
    seen: set[int] = set()
    first: int | None = None
    last = 0
    for value in _compared(text):
        if value in seen:
            return (first if first is not None else value), last
        if first is None:
            first = value
        seen.add(value)
        last = value
    raise ValueError("the program halted before its comparisons repeated")