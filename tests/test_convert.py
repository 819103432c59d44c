import pytest

from ftkit.convert import atoi, itoa


@pytest.mark.parametrize("n", [-2147483648, -1, 0, 1, 9, 10, 12345, 2147483647])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)
    with pytest.raises(OverflowError):
        itoa(-2147483649)


def test_atoi_skips_whitespace_and_trailing_text():
    assert atoi(" \t\n\v\f\r-42abc") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == atoi("17")


def test_atoi_only_one_sign():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_no_digits():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("   ") == 0


def test_atoi_stops_at_inner_space():
    assert atoi("12 34") == atoi("12")


def test_atoi_ignores_non_ascii_digits():
    assert atoi("٣") == 0


def test_atoi_whitespace_after_sign_stops_parse():
    assert atoi("- 5") == 0