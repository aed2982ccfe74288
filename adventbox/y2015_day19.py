"""Medicine molecule replacements: distinct single-step results and steps back to "e"."""

from __future__ import annotations

from dataclasses import dataclass

_UNREACHABLE = -999


@dataclass(frozen=True)
class Molecule:
    """A molecule split into its elements (an upper-case letter and any lower-case ones after it)."""

    elements: tuple[str, ...] = ()

    @classmethod
    def from_string(cls, text: str) -> Molecule:
        """Split a molecule string into elements."""
        elements: list[str] = []
        for char in text:
            if char < "a":
                elements.append(char)
            elif not elements:
                raise ValueError(f"molecule cannot start with {char!r}")
            else:
                elements[-1] += char
        return cls(tuple(elements))

    def __str__(self) -> str:
        return "".join(self.elements)


def parse_machine(text: str) -> tuple[dict[str, list[str]], Molecule]:
    """Return the replacement rules, keyed by the element replaced, and the medicine molecule."""
    replacements: dict[str, list[str]] = {}
    lines = iter(text.splitlines())
    for line in lines:
        if not line:
            molecule_line = next(lines, None)
            if molecule_line is None:
                raise ValueError("missing molecule after the replacement rules")
            return replacements, Molecule.from_string(molecule_line)
        words = line.split()
        if len(words) < 3:
            raise ValueError(f"malformed replacement rule: {line!r}")
        replacements.setdefault(words[0], []).append(words[2])
    raise ValueError("missing blank line before the molecule")


def distinct_replacements(text: str) -> int:
    """Number of distinct molecules reachable with exactly one replacement."""
    replacements, molecule = parse_machine(text)
    elements = molecule.elements
    reached = {
        "".join((*elements[:index], replacement, *elements[index + 1 :]))
        for index, element in enumerate(elements)
        for replacement in replacements.get(element, ())
    }
    return len(reached)


def _reverse_rules(replacements: dict[str, list[str]]) -> dict[str, list[str]]:
    reverse: dict[str, list[str]] = {}
    for source, products in replacements.items():
        for product in products:
            reverse.setdefault(product, []).append(source)
    return reverse


def _first_match(molecule: str, patterns: list[str]) -> tuple[str, int] | None:
    for pattern in patterns:
        index = molecule.find(pattern)
        if index != -1:
            return pattern, index
    return None


def fewest_steps(text: str) -> int:
    """Steps needed to reduce the molecule to "e", always undoing the longest matching product first."""
    replacements, molecule = parse_machine(text)
    reverse = _reverse_rules(replacements)
    patterns = sorted(reverse, key=lambda product: (len(product), product), reverse=True)

    goal = str(molecule)
    limit = len(goal)
    explored = {goal: 0}
    stack = [goal]
    while stack:
        current = stack.pop()
        depth = explored[current] + 1
        match = _first_match(current, patterns)
        if match is None:
            continue
        product, index = match
        for source in reverse[product]:
            candidate = current[:index] + source + current[index + len(product) :]
            if source == "e" and candidate != "e":
                continue
            if depth > limit:
                continue
            if candidate not in explored or explored[candidate] > depth:
                explored[candidate] = depth
                stack.append(candidate)
    return explored.get("e", _UNREACHABLE)


def part1(text: str) -> int:
    """Distinct molecules after one replacement."""
    return distinct_replacements(text)


def part2(text: str) -> int:
    """Fewest steps from "e" to the medicine molecule."""
    return fewest_steps(text)