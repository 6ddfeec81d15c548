import csv
import logging
import os
import random
from decimal import Decimal

from amount_words import MAX_AMOUNT, speak

logger = logging.getLogger(__name__)

SAMPLES_FILENAME = "amounts.csv"


def boundary_amounts():
    values = {Decimal(value) for value in range(0, 1001)}
    for power in (1_000, 1_000_000, 1_000_000_000):
        values.add(Decimal(power - 1))
        values.add(Decimal(power))
    values.add(Decimal(MAX_AMOUNT - 1) + Decimal("0.99"))
    return values


class AmountSampleGenerator:
    def __init__(
        self,
        output_dir="data",
        sample_size=10_000,
        min_value=0,
        max_value=MAX_AMOUNT - 1,
        seed=42,
    ):
        if min_value < 0 or max_value >= MAX_AMOUNT or min_value > max_value:
            raise ValueError(
                f"Sample range must lie within 0..{MAX_AMOUNT - 1}, "
                f"got {min_value}..{max_value}"
            )
        if sample_size > (max_value - min_value + 1) * 100:
            raise ValueError(
                f"Cannot draw {sample_size} distinct amounts from {min_value}..{max_value}"
            )
        self.output_dir = output_dir
        self.sample_size = sample_size
        self.min_value = min_value
        self.max_value = max_value
        self.rng = random.Random(seed)

    def _write_csv(self, path, rows):
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerows(rows)

    def _random_amount(self):
        whole = self.rng.randint(self.min_value, self.max_value)
        cents = self.rng.randint(0, 99)
        return Decimal(whole) + Decimal(cents) / 100

    def _sample_unique(self, size):
        values = set()
        while len(values) < size:
            values.add(self._random_amount())
        return values

    def _generate_values(self):
        values = boundary_amounts()
        values.update(self._sample_unique(self.sample_size))
        return sorted(values)

    def _label_for_value(self, value):
        return len(speak(value))

    def generate_all(self):
        rows = [
            (f"{value:.2f}", str(self._label_for_value(value)))
            for value in self._generate_values()
        ]
        path = os.path.join(self.output_dir, SAMPLES_FILENAME)
        self._write_csv(path, rows)
        logger.info("Wrote %s with %d rows.", path, len(rows))
        return path


def load_samples(csv_path):
    amounts = []
    lengths = []
    with open(csv_path, newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        for row in reader:
            if not row:
                continue
            amount_str, length_str = row
            amounts.append(Decimal(amount_str))
            lengths.append(int(length_str))
    return amounts, lengths
