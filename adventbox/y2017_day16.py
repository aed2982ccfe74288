"""Follow a dance of spins, exchanges and partner swaps among lettered programs."""

from __future__ import annotations

from dataclasses import dataclass

PROGRAMS = "abcdefghijklmnop"
WIDTH = 16
ROUNDS = 1_000_000_000


@dataclass(frozen=True)
class Move:
    """One dance move: a spin, an exchange of positions, or a swap of partners."""

    kind: str
    spin: int = 0
    positions: tuple[int, int] = (0, 0)
    partners: tuple[str, str] = ("", "")

    @classmethod
    def parse(cls, token: str) -> Move:
        """Parse a move such as "s1", "x3/4" or "pe/b"."""
        kind, body = token[:1], token[1:]
        try:
            if kind == "s":
                return cls(kind, spin=int(body))
            if kind == "x":
                first, sep, second = body.partition("/")
                if not sep:
                    raise ValueError
                return cls(kind, positions=(int(first), int(second)))
            if kind == "p":
                first, sep, second = body.partition("/")
                if not sep or not first or not second:
                    raise ValueError
                return cls(kind, partners=(first, second))
        except ValueError:
            raise ValueError(f"malformed move {token!r}") from None
        raise ValueError(f"unknown move {token!r}")

    def apply(self, programs: str) -> str:
        """Return the line of programs after this move."""
        if self.kind == "s":
            if not 0 <= self.spin <= len(programs):
                raise ValueError(f"cannot spin {self.spin} of {len(programs)} programs")
            if self.spin == 0:
                return programs
            return programs[-self.spin :] + programs[: -self.spin]
        if self.kind == "x":
            first, second = self.positions
        else:
            first, second = (programs.find(name) for name in self.partners)
        if not (0 <= first < len(programs) and 0 <= second < len(programs)):
            raise ValueError(f"move {self} does not fit programs {programs!r}")
        line = list(programs)
        line[first], line[second] = line[second], line[first]
        return "".join(line)


def parse_moves(text: str) -> list[Move]:
    """Read the comma-separated moves."""
    return [Move.parse(token.strip()) for token in text.split(",") if token.strip()]


def dance(text: str, width: int = WIDTH, rounds: int = 1) -> str:
    """Order of the first `width` programs after dancing `rounds` times."""
    if not 1 <= width <= len(PROGRAMS):
        raise ValueError(f"width must be between 1 and {len(PROGRAMS)}")
    if rounds < 0:
        raise ValueError("rounds cannot be negative")
    moves = parse_moves(text)
    programs = PROGRAMS[:width]
    seen = {programs: 0}
    cycle: int | None = None
    done = 0
    while done < rounds:
        for move in moves:
            programs = move.apply(programs)
        done += 1
        if cycle is None and programs in seen:
            cycle = done - seen[programs]
            done += (rounds - done) // cycle * cycle
        seen[programs] = done
    return programs