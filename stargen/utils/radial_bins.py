"""
Point storage for the rejection samplers: a growable point buffer and the
radial bins used by the large-scale strategy to bound the neighbour scan.
"""
import math
import numpy as np

from .nearest_distance import nearest_distance


class PointBuffer:
    """Append-only (n, 3) float array with amortized growth."""

    def __init__(self, capacity=16):
        self._data = np.empty((max(int(capacity), 1), 3), dtype=np.float64)
        self._n = 0

    def __len__(self):
        return self._n

    def append(self, point):
        if self._n == self._data.shape[0]:
            grown = np.empty((self._data.shape[0] * 2, 3), dtype=np.float64)
            grown[:self._n] = self._data[:self._n]
            self._data = grown
        self._data[self._n] = point
        self._n += 1

    @property
    def points(self):
        """View of the stored points. Invalidated by the next append that grows the buffer."""
        return self._data[:self._n]


def layer_count(size, min_distance, min_center_distance):
    """
    Number of radial bins: the shells of width min_distance between
    min_center_distance and five standard deviations. At least one.
    """
    return max(1, int(math.floor((size * 5 - min_center_distance) / min_distance)))


def bin_index(radius, min_distance, min_center_distance, layers):
    index = int(math.floor((radius - min_center_distance) / min_distance))
    return max(0, min(layers - 1, index))


class RadialBins:
    """
    Points grouped into concentric shells of width min_distance.

    A candidate is only compared with its own shell and the two adjacent
    ones. Points in those shells can still be far apart angularly, and the
    outermost shell also holds everything clamped beyond it, so this bounds
    the work rather than forming an exact neighbour search.

    Shells are created on first use; a galaxy can span far more shells than
    it has stars.
    """

    def __init__(self, size, min_distance, min_center_distance):
        self.min_distance = min_distance
        self.min_center_distance = min_center_distance
        self.layers = layer_count(size, min_distance, min_center_distance)
        self.bins = {}
        self._n = 0

    def __len__(self):
        return self._n

    def index(self, radius):
        return bin_index(radius, self.min_distance, self.min_center_distance, self.layers)

    def neighbours(self, index):
        return range(max(index - 1, 0), min(index + 1, self.layers - 1) + 1)

    def nearest(self, candidate, index, backend="numpy", device="cpu"):
        """Nearest distance from candidate to the points in shell `index` and its neighbours."""
        best = np.inf
        for j in self.neighbours(index):
            shell = self.bins.get(j)
            if shell is not None:
                best = min(best, nearest_distance(shell.points, candidate, backend, device))
        return best

    def add(self, point, index):
        shell = self.bins.get(index)
        if shell is None:
            shell = self.bins[index] = PointBuffer()
        shell.append(point)
        self._n += 1

    def to_array(self):
        """All points as a new (n, 3) array, innermost shell first."""
        if self._n == 0:
            return np.empty((0, 3), dtype=np.float64)
        return np.concatenate([self.bins[j].points for j in sorted(self.bins)], axis=0)
