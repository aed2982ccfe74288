from adventbox.y2015_day13 import best_arrangement, parse_happiness, part1, part2

SAMPLE = """Alice would gain 54 happiness units by sitting next to Bob.
Alice would lose 79 happiness units by sitting next to Carol.
Alice would lose 2 happiness units by sitting next to David.
Bob would gain 83 happiness units by sitting next to Alice.
Bob would lose 7 happiness units by sitting next to Carol.
Bob would lose 63 happiness units by sitting next to David.
Carol would lose 62 happiness units by sitting next to Alice.
Carol would gain 60 happiness units by sitting next to Bob.
Carol would gain 55 happiness units by sitting next to David.
David would gain 46 happiness units by sitting next to Alice.
David would lose 7 happiness units by sitting next to Bob.
David would gain 41 happiness units by sitting next to Carol.
"""


def test_part1_sample():
    assert part1(SAMPLE) == 330


def test_parse_happiness():
    people, table = parse_happiness(SAMPLE)
    assert people == ["Alice", "Bob", "Carol", "David"]
    assert table["Alice", "Carol"] == -79
    assert table["David", "Carol"] == 41


def test_order_of_guests_does_not_matter():
    people, table = parse_happiness(SAMPLE)
    assert best_arrangement(list(reversed(people)), table) == best_arrangement(people, table)


def test_single_guest_has_no_seating():
    assert best_arrangement(["Alice"], {}) == -999999


def test_part2_adds_a_neutral_guest():
    assert part2(SAMPLE) == best_arrangement(
        parse_happiness(SAMPLE)[0] + ["Me"], parse_happiness(SAMPLE)[1]
    )