import numpy as np

# A weight table holds 2 ** (n * n) floats, so n = 5 is already 256MiB.
MAX_PATTERN_SIZE = 5

UNSEEN_WEIGHT = 0.1


def check_pattern_size(n):
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"pattern size must be an integer, got {n!r}")
    if not 1 <= n <= MAX_PATTERN_SIZE:
        raise ValueError(
            f"pattern size must be between 1 and {MAX_PATTERN_SIZE}, got {n}"
        )
    return int(n)


def extract_pattern(bitmap, n, x, y):
    rows = np.arange(y, y + n) % bitmap.height
    cols = np.arange(x, x + n) % bitmap.width
    return bitmap.data[np.ix_(rows, cols)]


# rotated[y, x] == pattern[x, n - 1 - y], i.e. a counter-clockwise np.rot90.
def rotate(pattern):
    return np.rot90(pattern)


def reflect(pattern):
    return np.flip(pattern, axis=1)


def symmetries(pattern):
    """
    The 8 images of a pattern under rotation and reflection, in the order
    p0..p3 (successive rotations) followed by their reflections p4..p7.
    Symmetrical patterns yield repeats, which are kept.
    """
    rotations = [pattern]
    for _ in range(3):
        rotations.append(rotate(rotations[-1]))
    return rotations + [reflect(p) for p in rotations]


def place_values(length):
    # First cell is the most significant bit.
    return np.left_shift(1, np.arange(length - 1, -1, -1, dtype=np.int64))


def pattern_index(pattern, powers=None):
    flat = np.asarray(pattern, dtype=bool).ravel()
    if powers is None:
        powers = place_values(len(flat))
    return int(powers[flat].sum())


def build_weights(sample, n):
    n = check_pattern_size(n)
    weights = np.zeros(1 << (n * n), dtype=np.float64)
    powers = place_values(n * n)

    for y in range(sample.height):
        for x in range(sample.width):
            for p in symmetries(extract_pattern(sample, n, x, y)):
                weights[pattern_index(p, powers)] += 1.0

    weights[weights <= 0.0] = UNSEEN_WEIGHT
    return weights


def window_index(data, n, sx, sy, x, y):
    """
    Encoding of the n x n window anchored at (sx, sy) in a [y, x] array,
    together with the signed place value of cell (x, y) within it:
    +power if the cell is set, -power if not, 0 if the window misses it.
    """
    height, width = data.shape
    length = n * n
    ind = 0
    difference = 0

    for dy in range(n):
        ny = (sy + dy) % height
        row = data[ny]
        for dx in range(n):
            nx = (sx + dx) % width
            power = 1 << (length - 1 - (dy * n + dx))
            value = row[nx]

            if value:
                ind += power

            if nx == x and ny == y:
                difference = power if value else -power

    return ind, difference
