import unittest
from decimal import Decimal

from lemondrop.amounts import parse_amount, to_base_units
from lemondrop.errors import InvalidAmount


class ToBaseUnitsTests(unittest.TestCase):
    def test_scales_decimal_string_exactly(self) -> None:
        self.assertEqual(to_base_units("1.5", 9), "1500000000")

    def test_truncates_below_smallest_unit_to_zero(self) -> None:
        self.assertEqual(to_base_units("0.0000000001", 6), "0")

    def test_truncates_fraction_toward_zero(self) -> None:
        self.assertEqual(to_base_units("1.2345679", 6), "1234567")

    def test_float_input_has_no_binary_drift(self) -> None:
        self.assertEqual(to_base_units(0.1, 9), "100000000")
        self.assertEqual(to_base_units(1.15, 6), "1150000")

    def test_large_amount_renders_without_exponent(self) -> None:
        self.assertEqual(to_base_units("18446744073.709551615", 9), "18446744073709551615")
        self.assertEqual(to_base_units(Decimal("1E+3"), 6), "1000000000")

    def test_amount_beyond_u64_rejected(self) -> None:
        for bad in ("18446744073.709551616", "1E+11", "1E+5000", "1E+999999", Decimal("9" * 5000)):
            with self.subTest(amount=bad):
                with self.assertRaises(InvalidAmount):
                    to_base_units(bad, 9)

    def test_vanishingly_small_amount_is_zero(self) -> None:
        self.assertEqual(to_base_units("1E-999999", 9), "0")

    def test_integer_and_zero_decimals(self) -> None:
        self.assertEqual(to_base_units(7, 0), "7")
        self.assertEqual(to_base_units("7.9", 0), "7")


class ParseAmountTests(unittest.TestCase):
    def test_rejects_non_positive_and_non_numeric(self) -> None:
        for bad in ("0", 0, "-1", -0.5, "abc", "", "NaN", "Infinity", float("inf"), None, True, [1]):
            with self.subTest(amount=bad):
                with self.assertRaises(InvalidAmount):
                    parse_amount(bad)

    def test_accepts_decimal_string(self) -> None:
        self.assertEqual(parse_amount(" 2.50 "), Decimal("2.50"))


if __name__ == "__main__":
    unittest.main()
