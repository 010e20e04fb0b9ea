import pytest

from pixelkit.numbers import atoi, int_sqrt, itoa, number_length, power


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi("   -123abc") == -123
    assert atoi("\t\n\v\f\r +77") == 77


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("+-5") == 0
    assert atoi("- 5") == 0


def test_atoi_stops_at_first_non_digit():
    assert atoi("12 34") == 12


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483647") == 2147483647
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_negative_has_single_leading_minus():
    text = itoa(-450)
    assert text.startswith("-")
    assert text[1:].isdigit()


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")


@pytest.mark.parametrize("n", [0, 7, -7, 10, 99, -100, 2147483647, -2147483648])
def test_number_length_matches_itoa(n):
    assert number_length(n) == len(itoa(n))


def test_power_zero_and_negative_exponent():
    assert power(5, 0) == 1
    assert power(5, -1) == 0
    assert power(5, 1) == 5


@pytest.mark.parametrize("base", [-3, -1, 0, 2, 7])
@pytest.mark.parametrize("exponent", range(0, 8))
def test_power_recurrence(base, exponent):
    assert power(base, exponent + 1) == power(base, exponent) * base


def test_int_sqrt_small_values():
    assert int_sqrt(0) == 0
    assert int_sqrt(-9) == 0
    assert int_sqrt(1) == 1


@pytest.mark.parametrize("n", [2, 3, 4, 15, 16, 17, 99, 100, 101, 2147395600, 2147483647])
def test_int_sqrt_is_floor_root(n):
    r = int_sqrt(n)
    assert r * r <= n < (r + 1) * (r + 1)


@pytest.mark.parametrize("root", [1, 2, 12, 46340])
def test_int_sqrt_of_perfect_square(root):
    assert int_sqrt(root * root) == root