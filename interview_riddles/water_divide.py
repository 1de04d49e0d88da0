"""Finding the water divide on an elevation map between a top/right and a bottom/left ocean.

Water flows up, down, left or right onto points of the same or lower
elevation. The ocean beyond the top and right edges is the up/right ocean,
the ocean beyond the bottom and left edges the down/left ocean.
"""

from enum import Enum


class PointType(Enum):
    """Where water from a point can flow."""

    UNKNOWN = -1
    VALLEY = 0
    UP_RIGHT = 1
    DOWN_LEFT = 2
    DIVIDE = 3

    @property
    def symbol(self):
        """One-character mark used when printing a divide map."""
        return _SYMBOLS[self]


_SYMBOLS = {
    PointType.UNKNOWN: "?",
    PointType.VALLEY: "v",
    PointType.UP_RIGHT: "u",
    PointType.DOWN_LEFT: "d",
    PointType.DIVIDE: "x",
}


class _Map:
    def __init__(self, heights, result):
        self.heights = heights
        self.result = result
        self.height = len(heights)
        self.width = len(heights[0])

    def is_land(self, point):
        row, col = point
        return 0 <= row < self.height and 0 <= col < self.width

    def ocean_of(self, point):
        """Return the ocean a point lies in, or None for a land point."""
        row, col = point
        if (row < 0 and col < 0) or (row >= self.height and col >= self.width):
            raise ValueError(f"point {point} lies in neither ocean")
        if row < 0:
            return PointType.UP_RIGHT
        if row >= self.height:
            return PointType.DOWN_LEFT
        if col < 0:
            return PointType.DOWN_LEFT
        if col >= self.width:
            return PointType.UP_RIGHT
        return None

    def neighbours(self, point, visited):
        """Return the points water can flow to from ``point``, ocean points first."""
        if not self.is_land(point):
            return []
        row, col = point
        candidates = [(row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)]
        oceans = []
        land = []
        for n_row, n_col in candidates:
            if (n_row < 0 and n_col < 0) or (n_row >= self.height and n_col >= self.width):
                continue
            if not self.is_land((n_row, n_col)):
                oceans.insert(0, (n_row, n_col))
            elif (n_row, n_col) not in visited and self.heights[row][col] >= self.heights[n_row][n_col]:
                land.append((n_row, n_col))
        return oceans + land

    def _enter(self, point, ocean, visited):
        """Handle arriving at a point: True if the ocean is reached, else its neighbours."""
        point_ocean = self.ocean_of(point)
        if point_ocean is ocean:
            return True, None
        if point_ocean is None:
            known = self.result[point[0]][point[1]]
            if known is PointType.DIVIDE or known is ocean:
                return True, None
            visited.add(point)
        return False, iter(self.neighbours(point, visited))

    def reaches(self, start, ocean):
        """Depth-first search from ``start`` for a path into ``ocean``."""
        visited = set()
        found, children = self._enter(start, ocean, visited)
        if found:
            return True
        pending = [children]
        while pending:
            child = next(pending[-1], None)
            if child is None:
                pending.pop()
                continue
            found, children = self._enter(child, ocean, visited)
            if found:
                return True
            pending.append(children)
        return False


def mark_water_divide(heights):
    """Classify every point of the elevation map by the oceans its water reaches.

    Returns a grid of PointType values of the same shape as ``heights``.
    """
    if not heights:
        return []
    width = len(heights[0])
    if width == 0 or any(len(row) != width for row in heights):
        raise ValueError("elevation map must be a non-empty rectangle")
    result = [[PointType.UNKNOWN] * width for _ in heights]
    land = _Map(heights, result)
    for row, result_row in enumerate(result):
        for col in range(width):
            up = land.reaches((row, col), PointType.UP_RIGHT)
            down = land.reaches((row, col), PointType.DOWN_LEFT)
            if up and down:
                result_row[col] = PointType.DIVIDE
            elif up:
                result_row[col] = PointType.UP_RIGHT
            elif down:
                result_row[col] = PointType.DOWN_LEFT
            else:
                result_row[col] = PointType.VALLEY
    return result


def format_divide(grid):
    """Render a divide map, one symbol and a space per point, one row per line."""
    return "".join("".join(f"{point.symbol} " for point in row) + "\n" for row in grid)