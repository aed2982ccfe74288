from adventbox.y2016_day07 import part1, part2, supports_ssl, supports_tls

TLS_SAMPLE = "abba[mnop]qrst\nabcd[bddb]xyyx\naaaa[qwer]tyui\nioxxoj[asdfgh]zxcvbn\n"
SSL_SAMPLE = "aba[bab]xyz\nxyx[xyx]xyx\naaa[kek]eke\nzazbz[bzb]cdb\n"


def test_part1_sample():
    assert part1(TLS_SAMPLE) == 2


def test_part2_sample():
    assert part2(SSL_SAMPLE) == 3


def test_part1_counts_supporting_lines():
    lines = TLS_SAMPLE.splitlines()
    assert sum(supports_tls(line) for line in lines) == part1(TLS_SAMPLE)


def test_part2_counts_supporting_lines():
    lines = SSL_SAMPLE.splitlines()
    assert sum(supports_ssl(line) for line in lines) == part2(SSL_SAMPLE)


def test_abba_inside_brackets_rejects():
    assert supports_tls("abba[xyyx]qrst") is False


def test_repeated_letters_are_not_abba():
    assert supports_tls("aaaa") is False


def test_ssl_needs_bab_inside():
    assert supports_ssl("aba[xyz]bab") is False


def test_empty_text():
    assert part1("") == 0
    assert part2("") == 0