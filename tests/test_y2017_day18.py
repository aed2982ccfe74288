import pytest

from adventbox.y2017_day18 import Instruction, Program, parse_program, part1, part2

SOUND_SAMPLE = """\
set a 1
add a 2
mul a a
mod a 5
snd a
set a 0
rcv a
jgz a -1
set a 1
jgz a -2
"""

DUET_SAMPLE = """\
snd 1
snd 2
snd p
rcv a
rcv b
rcv c
rcv d
"""


def test_part1_sample():
    assert part1(SOUND_SAMPLE) == 4


def test_part1_without_recovery_is_zero():
    assert part1("set a 1\nadd a 2\n") == 0


def test_mod_truncates_toward_zero():
    assert part1("set a -7\nmod a 3\nsnd a\nset b 1\nrcv b\n") == -1


def test_part2_sample():
    assert part2(DUET_SAMPLE) == 3


def test_parse_program():
    assert parse_program("snd a\njgz a -1\n") == [
        Instruction("snd", "a", ""),
        Instruction("jgz", "a", "-1"),
    ]


def test_unknown_operation_raises():
    with pytest.raises(ValueError):
        parse_program("jmp a 1")


def test_program_blocks_then_resumes():
    program = Program(parse_program("rcv a\nsnd a\n"))
    assert program.run() is False
    assert program.pointer == 0
    program.inbox.append(7)
    assert program.run() is True
    assert list(program.outbox) == [7]
    assert program.sent == 1
    assert program.terminated


def test_program_uses_initial_registers():
    program = Program(parse_program("snd p\n"), {"p": 5})
    program.run()
    assert list(program.outbox) == [5]