from adventbox.y2015_day08 import encoded_overhead, memory_length, part1, part2

SAMPLE = "\n".join([r'""', r'"abc"', r'"aaa\"aaa"', r'"\x27"']) + "\n"


def test_part1_sample():
    assert part1(SAMPLE) == 12


def test_part2_sample():
    assert part2(SAMPLE) == 19


def test_empty_literal_has_no_memory_characters():
    assert memory_length('""') == 0


def test_plain_literal_only_loses_quotes():
    literal = '"hello"'
    assert memory_length(literal) == len(literal) - 2


def test_hex_escape_counts_as_one_character():
    assert memory_length(r'"\x41"') == memory_length(r'"\\"') == memory_length('"A"')


def test_overhead_grows_with_escapes():
    assert encoded_overhead('"ab"') < encoded_overhead(r'"a\"b"')
    assert encoded_overhead('"ab"') == 4