import pytest

from blynkbridge.core.ranges import parse_range


def test_plain_hyphen():
  assert parse_range("12-34") == (12, 34)


@pytest.mark.parametrize("dash", ["–", "—", "‑"])
def test_unicode_dashes(dash):
  assert parse_range(f"12{dash}34") == (12, 34)


@pytest.mark.parametrize("value", ["", None, 42, ["1", "2"], {"a": 1}])
def test_missing_or_non_string(value):
  assert parse_range(value) == (0, 0)


def test_trailing_thousands_group_is_dropped():
  assert parse_range("1,234-2,345") == (1234, 2345)
  assert parse_range("1.500-2.000") == (1500, 2000)


def test_comma_decimal():
  assert parse_range("12,5-34,1") == (12.5, 34.1)


def test_two_digit_group_stays_decimal():
  assert parse_range("1,23-4.56") == (1.23, 4.56)


def test_four_digits_after_separator_is_decimal():
  assert parse_range("1.2345-2") == (1.2345, 2)


def test_every_closing_group_is_a_separator():
  assert parse_range("1,234,567-2") == (1234567, 2)


def test_units_and_spaces_are_ignored():
  assert parse_range("15 cm - 30 cm") == (15, 30)
  assert parse_range("  5 –  10 ") == (5, 10)


def test_wrong_number_of_parts():
  assert parse_range("12") == (0, 0)
  assert parse_range("1-2-3") == (0, 0)
  assert parse_range("1–2-3") == (0, 0)


def test_empty_side_is_zero():
  assert parse_range("-5") == (0, 5)
  assert parse_range("abc-7") == (0, 7)


def test_unparsable_side_is_zero():
  assert parse_range("1.2.3-4") == (0, 4)


def test_overflowing_digits_are_zero():
  assert parse_range("9" * 400 + "-1") == (0, 1)


def test_result_always_has_two_elements():
  for text in ["1-2", "x", "", "1-2-3", "a-b", "--"]:
    assert len(parse_range(text)) == 2
