import numpy as np

from graph import build_graph


TRAVERSED = -1
SHADES = " .-:=+*#%@"
MIN_HEIGHT = 0
MAX_HEIGHT = 99

STATIC_HEIGHTS = [
    [12, 14, 15, 15, 16],
    [16, 18, 18, 19, 17],
    [18, 19, 21, 20, 17],
    [19, 20, 18, 18, 15],
    [20, 17, 14, 14, 13],
]


class DEM:
    def __init__(self, seed=None):
        self.rng = np.random.default_rng(seed)
        self.heights = None

    @property
    def size(self):
        return 0 if self.heights is None else self.heights.shape[0]

    def _require_heights(self):
        if self.heights is None:
            raise RuntimeError("DEM not generated. Call make_dem or load_heights first.")

    def make_dem(self, size, roughness):
        """Generate a midpoint-displacement height field.

        size must be 2**n + 1. Higher roughness gives rougher terrain. Noise
        comes from this instance's generator, so a seeded DEM is repeatable.
        """
        if size < 2 or (size - 1) & (size - 2) != 0:
            raise ValueError(f"DEM size must be 2**n + 1, got {size}")
        if roughness < 1:
            raise ValueError(f"Roughness must be at least 1, got {roughness}")

        dem = np.full((size, size), TRAVERSED, dtype=np.int64)
        r = int(roughness)

        def noise(r):
            return int(self.rng.integers(0, r)) - r // 2

        last = size - 1
        for x, y in ((0, 0), (last, 0), (0, last), (last, last)):
            dem[x, y] = 50 + noise(r)

        step = last
        while step > 1:
            r = max(r // 2, 1)
            half = step // 2
            for cx in range(0, last, step):
                for cy in range(0, last, step):
                    a = dem[cx, cy]
                    b = dem[cx + step, cy]
                    c = dem[cx, cy + step]
                    d = dem[cx + step, cy + step]

                    dem[cx + half, cy + half] = (a + b + c + d) // 4 + noise(r)
                    dem[cx + half, cy] = (a + b) // 2 + noise(r)
                    dem[cx, cy + half] = (a + c) // 2 + noise(r)
                    dem[cx + step, cy + half] = (b + d) // 2 + noise(r)
                    dem[cx + half, cy + step] = (c + d) // 2 + noise(r)
            step = half

        self.heights = dem.clip(MIN_HEIGHT, MAX_HEIGHT)
        return self.heights

    def load_heights(self, heights):
        """Adopt an existing square height field."""
        heights = np.array(heights, dtype=np.int64)
        if heights.ndim != 2 or heights.shape[0] != heights.shape[1] or heights.size == 0:
            raise ValueError(f"Height field must be a non-empty square array, got shape {heights.shape}")
        self.heights = heights
        return self.heights

    def get_elevation(self, x, y):
        self._require_heights()
        if 0 <= x < self.size and 0 <= y < self.size:
            return int(self.heights[x, y])
        return None

    def vertex(self, x, y):
        return x * self.size + y

    def cell(self, vertex):
        return divmod(vertex, self.size)

    def clone(self):
        self._require_heights()
        other = DEM()
        other.rng = self.rng
        other.heights = self.heights.copy()
        return other

    def build_graph(self, cost_fn):
        self._require_heights()
        return build_graph(self.heights, cost_fn)

    def traverse(self, path):
        """Copy of the height field with every cell on path marked as traversed."""
        self._require_heights()
        result = self.heights.copy()
        for vertex in path:
            x, y = self.cell(vertex)
            result[x, y] = TRAVERSED
        return result

    def to_text(self, heights=None):
        """Numeric rendering, one two-digit column per cell."""
        heights = self._rows(heights)
        lines = []
        for row in heights:
            lines.append("".join(f"{h:2d} " if h >= 0 else "() " for h in row))
        return "\n".join(lines)

    def to_ascii(self, heights=None):
        """Shaded rendering, two characters per cell so the map stays square."""
        heights = self._rows(heights)
        lines = []
        for row in heights:
            cells = []
            for h in row:
                if h >= 0:
                    shade = SHADES[min(h, MAX_HEIGHT) * len(SHADES) // (MAX_HEIGHT + 1)]
                    cells.append(shade * 2)
                else:
                    cells.append("()")
            lines.append("".join(cells))
        return "\n".join(lines)

    def _rows(self, heights):
        if heights is None:
            self._require_heights()
            heights = self.heights
        return [[int(h) for h in row] for row in heights]


def static_dem():
    """The fixed 5x5 sample terrain."""
    dem = DEM()
    dem.load_heights(STATIC_HEIGHTS)
    return dem
