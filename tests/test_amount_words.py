import math
import unittest
from decimal import Decimal

from amount_words import (
    ONES,
    TENS,
    AmountError,
    InvalidAmount,
    UnsupportedMagnitude,
    chunk_words,
    convert_hundreds,
    speak,
    split_amount,
)


def _parse_hundreds(words):
    tokens = words.split()
    value = 0
    if len(tokens) >= 2 and tokens[1] == "hundred":
        value += ONES.index(tokens[0]) * 100
        tokens = tokens[2:]
    for token in tokens:
        if token in TENS:
            value += TENS.index(token) * 10
        else:
            value += ONES.index(token)
    return value


class TestSpeak(unittest.TestCase):
    def test_examples(self):
        cases = {
            0: "zero",
            7: "seven",
            19: "nineteen",
            20: "twenty",
            21: "twenty one",
            99: "ninety nine",
            100: "one hundred",
            110: "one hundred ten",
            115: "one hundred fifteen",
            999: "nine hundred ninety nine",
            1000: "one thousand",
            1001: "one thousand one",
            10123: "ten thousand one hundred twenty three",
            1_000_000: "one million",
            1_000_001: "one million one",
            100_000_000: "one hundred million",
            1_002_003_004: "one billion two million three thousand four",
            999_999_999_999: (
                "nine hundred ninety nine billion "
                "nine hundred ninety nine million "
                "nine hundred ninety nine thousand "
                "nine hundred ninety nine"
            ),
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                self.assertEqual(speak(value), expected)

    def test_cents(self):
        cases = [
            (1234.56, "one thousand two hundred thirty four and fifty six cents"),
            (12.5, "twelve and fifty cents"),
            (100.05, "one hundred and five cents"),
            (Decimal("1234.565"), "one thousand two hundred thirty four and fifty seven cents"),
            (
                1999999999.99,
                "one billion nine hundred ninety nine million "
                "nine hundred ninety nine thousand nine hundred ninety nine "
                "and ninety nine cents",
            ),
        ]
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertEqual(speak(value), expected)

    def test_zero_integer_part_with_cents(self):
        self.assertEqual(speak(0.5), "zero and fifty cents")
        self.assertEqual(speak(0.01), "zero and one cents")
        self.assertEqual(speak(Decimal("0.99")), "zero and ninety nine cents")

    def test_rounds_to_zero(self):
        for value in (0.0, -0.0, 0.004, Decimal("0.00"), Decimal("0.0049")):
            with self.subTest(value=value):
                self.assertEqual(speak(value), "zero")

    def test_cents_round_half_up(self):
        self.assertEqual(speak(0.005), "zero and one cents")
        self.assertEqual(speak(2.675), "two and sixty eight cents")

    def test_cents_carry_into_integer_part(self):
        self.assertEqual(speak(1.995), "two")
        self.assertEqual(speak(0.995), "one")
        self.assertEqual(speak(99.999), "one hundred")
        self.assertEqual(speak(Decimal("999999.999")), "one million")

    def test_output_is_normalized(self):
        for value in (0.5, 1, 20.2, 1000.01, 1_000_000.1, 1_000_000_000, 123_456_789.12):
            with self.subTest(value=value):
                words = speak(value)
                self.assertEqual(words, words.strip())
                self.assertEqual(words, words.lower())
                self.assertNotIn("  ", words)
                self.assertNotIn("zero thousand", words)

    def test_invalid_amounts(self):
        for value in (-5, -0.01, Decimal("-1"), math.nan, math.inf, -math.inf,
                      Decimal("NaN"), Decimal("Infinity"), "12", None, True):
            with self.subTest(value=value):
                with self.assertRaises(InvalidAmount):
                    speak(value)

    def test_unsupported_magnitude(self):
        for value in (10 ** 12, 1e12, 5 * 10 ** 15, Decimal("999999999999.995")):
            with self.subTest(value=value):
                with self.assertRaises(UnsupportedMagnitude):
                    speak(value)

    def test_errors_are_value_errors(self):
        self.assertTrue(issubclass(InvalidAmount, AmountError))
        self.assertTrue(issubclass(UnsupportedMagnitude, AmountError))
        self.assertTrue(issubclass(AmountError, ValueError))


class TestSplitAmount(unittest.TestCase):
    def test_split(self):
        cases = {
            0: (0, 0),
            7: (7, 0),
            1234.56: (1234, 56),
            0.5: (0, 50),
            1.995: (2, 0),
            1999999999.99: (1999999999, 99),
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                self.assertEqual(split_amount(value), expected)

    def test_cents_stay_in_range(self):
        for hundredths in range(0, 100_000, 7):
            value = hundredths / 1000
            with self.subTest(value=value):
                _, cents = split_amount(value)
                self.assertGreaterEqual(cents, 0)
                self.assertLessEqual(cents, 99)


class TestConvertHundreds(unittest.TestCase):
    def test_zero_is_empty(self):
        self.assertEqual(convert_hundreds(0), "")

    def test_injective_over_range(self):
        seen = {}
        for value in range(1, 1000):
            words = convert_hundreds(value)
            self.assertTrue(words)
            self.assertNotIn(words, seen)
            seen[words] = value
            self.assertEqual(_parse_hundreds(words), value)

    def test_out_of_range(self):
        for value in (-1, 1000):
            with self.subTest(value=value):
                with self.assertRaises(UnsupportedMagnitude):
                    convert_hundreds(value)


class TestChunkWords(unittest.TestCase):
    def test_skips_zero_chunks(self):
        self.assertEqual(chunk_words(1_000_000), [("one", "million")])
        self.assertEqual(
            chunk_words(2_000_300),
            [("two", "million"), ("three hundred", "")],
        )

    def test_zero_has_no_chunks(self):
        self.assertEqual(chunk_words(0), [])


if __name__ == "__main__":
    unittest.main()
