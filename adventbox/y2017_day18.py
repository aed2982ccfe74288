"""Run the duet assembly: recover a sound, then count messages between two programs."""

from __future__ import annotations

from collections import deque
from collections.abc import MutableMapping, Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

_OPS = {"snd", "set", "add", "mul", "mod", "rcv", "jgz"}


class Instruction(NamedTuple):
    """An operation with its operands; `y` is empty when unused."""

    op: str
    x: str
    y: str = ""


def parse_program(text: str) -> list[Instruction]:
    """Read one instruction per non-blank line."""
    instructions: list[Instruction] = []
    for line in text.splitlines():
        words = line.split()
        if not words:
            continue
        if words[0] not in _OPS or len(words) < 2:
            raise ValueError(f"malformed instruction: {line!r}")
        instructions.append(Instruction(words[0], words[1], words[2] if len(words) > 2 else ""))
    return instructions


def _value(registers: MutableMapping[str, int], token: str) -> int:
    if token[:1].isalpha():
        return registers.get(token, 0)
    return int(token)


def _truncated_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return remainder if a >= 0 else -remainder


def _arithmetic(registers: MutableMapping[str, int], instruction: Instruction) -> None:
    op, x, y = instruction
    operand = _value(registers, y)
    current = registers.get(x, 0)
    if op == "set":
        registers[x] = operand
    elif op == "add":
        registers[x] = current + operand
    elif op == "mul":
        registers[x] = current * operand
    elif op == "mod":
        registers[x] = _truncated_mod(current, operand)
    else:
        raise ValueError(f"unknown operation {op!r}")


@dataclass
class Program:
    """One copy of the program, sending to its outbox and receiving from its inbox."""

    instructions: Sequence[Instruction]
    registers: dict[str, int] = field(default_factory=dict)
    pointer: int = 0
    inbox: deque[int] = field(default_factory=deque)
    outbox: deque[int] = field(default_factory=deque)
    sent: int = 0

    @property
    def terminated(self) -> bool:
        """True once the pointer has left the program."""
        return not 0 <= self.pointer < len(self.instructions)

    def run(self) -> bool:
        """Run until a receive blocks or the program ends; True if anything was executed."""
        progressed = False
        while not self.terminated:
            instruction = self.instructions[self.pointer]
            op, x, y = instruction
            if op == "snd":
                self.outbox.append(_value(self.registers, x))
                self.sent += 1
            elif op == "rcv":
                if not self.inbox:
                    return progressed
                self.registers[x] = self.inbox.popleft()
            elif op == "jgz":
                if _value(self.registers, x) > 0:
                    self.pointer += _value(self.registers, y)
                    progressed = True
                    continue
            else:
                _arithmetic(self.registers, instruction)
            self.pointer += 1
            progressed = True
        return progressed


def part1(text: str) -> int:
    """Frequency of the last sound played when the first non-zero recover runs; 0 if none."""
    instructions = parse_program(text)
    registers: dict[str, int] = {}
    pointer = 0
    last_sound = 0
    while 0 <= pointer < len(instructions):
        instruction = instructions[pointer]
        op, x, y = instruction
        if op == "snd":
            last_sound = _value(registers, x)
        elif op == "rcv":
            if _value(registers, x) != 0:
                return last_sound
        elif op == "jgz":
            if _value(registers, x) > 0:
                pointer += _value(registers, y)
                continue
        else:
            _arithmetic(registers, instruction)
        pointer += 1
    return 0


def part2(text: str) -> int:
    """Number of values program 1 sends before both programs stop."""
    instructions = parse_program(text)
    to_first: deque[int] = deque()
    to_second: deque[int] = deque()
    first = Program(instructions, {"p": 0}, inbox=to_first, outbox=to_second)
    second = Program(instructions, {"p": 1}, inbox=to_second, outbox=to_first)
    progressed = True
    while progressed:
        progressed = first.run()
        if first.terminated:
            break
        progressed |= second.run()
        if second.terminated:
            break
    return second.sent