import random

from convchain.bitmap import Bitmap
from convchain.patterns import build_weights, check_pattern_size, window_index

MAX_SAMPLE_SIZE = 255


def check_sample(sample):
    if not isinstance(sample, Bitmap):
        raise TypeError(f"sample must be a Bitmap, got {type(sample).__name__}")
    if sample.width > MAX_SAMPLE_SIZE or sample.height > MAX_SAMPLE_SIZE:
        raise ValueError(
            f"sample must be at most {MAX_SAMPLE_SIZE}x{MAX_SAMPLE_SIZE}, "
            f"got {sample.width}x{sample.height}"
        )
    return sample


def generate_base_field(width, height, rng):
    if width <= 0 or height <= 0:
        raise ValueError(f"field size must be positive, got {width}x{height}")

    cells = [rng() > 0.5 for _ in range(width * height)]
    return Bitmap.from_cells(width, height, cells)


def apply_changes(field, weights, n, temperature, changes, rng):
    """
    Make `changes` single cell update attempts on `field`.

    Each attempt picks a cell, multiplies together the likelihood ratios of
    every n x n window covering it with and without the cell flipped, and
    flips it if the product is at least 1. Otherwise the cell is flipped with
    probability q ** (1 / temperature).
    """
    n = check_pattern_size(n)
    if temperature <= 0:
        raise ValueError(f"temperature must be positive, got {temperature}")
    if changes < 0:
        raise ValueError(f"changes must not be negative, got {changes}")

    width = field.width
    height = field.height
    data = field.data

    for _ in range(changes):
        q = 1.0

        r = int(rng() * (width * height))
        x = r % width
        y = r // width

        for sy in range(y - n + 1, y + n):
            for sx in range(x - n + 1, x + n):
                ind, difference = window_index(data, n, sx, sy, x, y)
                q *= weights[ind - difference] / weights[ind]

        if q >= 1.0:
            data[y, x] = not data[y, x]
        else:
            if temperature != 1.0:
                q = q ** (1.0 / temperature)

            if rng() < q:
                data[y, x] = not data[y, x]


class ConvChain:
    def __init__(self, sample, rng=random.random):
        self.sample = None
        self.cache = None
        self.rng = rng
        self.set_sample(sample)

    @classmethod
    def from_cells(cls, width, height, cells, rng=random.random):
        return cls(Bitmap.from_cells(width, height, cells), rng=rng)

    def set_sample(self, sample):
        sample = check_sample(sample).copy()
        sample.data.flags.writeable = False
        self.sample = sample
        self.cache = None

    def set_sample_cells(self, width, height, cells):
        self.set_sample(Bitmap.from_cells(width, height, cells))

    def set_rng(self, rng):
        self.rng = rng

    def get_weights(self, n):
        n = check_pattern_size(n)
        if self.cache is None or self.cache[0] != n:
            weights = build_weights(self.sample, n)
            weights.flags.writeable = False
            self.cache = (n, weights)
        return self.cache[1]

    def initialize_field(self, width, height):
        return generate_base_field(width, height, self.rng)

    def iterate(self, field, n, temperature, changes):
        weights = self.get_weights(n)
        apply_changes(field, weights, n, temperature, changes, self.rng)

    def generate(self, width, height, n, temperature, changes):
        field = self.initialize_field(width, height)
        self.iterate(field, n, temperature, changes)
        return field
