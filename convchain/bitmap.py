import numpy as np

FALSE_CHARS = {"0", ".", " ", "_"}


class Bitmap:
    """
    A fixed-size grid of booleans with toroidal addressing.

    Cells are stored as a numpy bool array in [y, x] order, so `cells`
    (the flattened array) is row-major with index = x + y * width.
    """

    def __init__(self, width, height, data=None):
        if width <= 0 or height <= 0:
            raise ValueError(f"bitmap size must be positive, got {width}x{height}")

        if data is None:
            data = np.zeros((height, width), dtype=bool)
        else:
            data = np.asarray(data, dtype=bool)
            if data.shape != (height, width):
                raise ValueError(
                    f"data of shape {data.shape} does not match {width}x{height}"
                )

        self.data = data

    @classmethod
    def from_cells(cls, width, height, cells):
        cells = np.asarray(cells, dtype=bool).ravel()
        if len(cells) != width * height:
            raise ValueError(
                f"expected {width * height} cells for {width}x{height}, got {len(cells)}"
            )
        return cls(width, height, cells.reshape((height, width)))

    @classmethod
    def from_chars(cls, string):
        rows = []
        for line in string.replace(",", "\n").splitlines():
            line = line.strip()
            if line == "":
                continue
            rows.append([char not in FALSE_CHARS for char in line])

        if not rows:
            raise ValueError("empty bitmap")

        width = len(rows[0])
        for row in rows:
            if len(row) != width:
                raise ValueError(f"ragged rows: {len(row)} != {width}")

        return cls(width, len(rows), np.array(rows, dtype=bool))

    @property
    def width(self):
        return self.data.shape[1]

    @property
    def height(self):
        return self.data.shape[0]

    @property
    def cells(self):
        return self.data.ravel()

    def __getitem__(self, pos):
        x, y = pos
        return bool(self.data[y % self.height, x % self.width])

    def __setitem__(self, pos, value):
        x, y = pos
        self.data[y % self.height, x % self.width] = value

    def flip(self, x, y):
        y %= self.height
        x %= self.width
        self.data[y, x] = not self.data[y, x]

    def copy(self):
        return Bitmap(self.width, self.height, self.data.copy())

    def __eq__(self, other):
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self.data.shape == other.data.shape and (self.data == other.data).all()

    def __repr__(self):
        return f"Bitmap({self.width}x{self.height})"
