import math
from typing import NamedTuple


class Point(NamedTuple):
    """An immutable 2D point, also used as a displacement vector."""
    x: float
    y: float

    @classmethod
    def of(cls, p):
        # accepts tuples, lists, numpy rows or Points
        if isinstance(p, cls):
            return p
        x, y = p
        return cls(x, y)

    def __sub__(self, other):
        return Point(self.x - other[0], self.y - other[1])

    def cross(self, other):
        # |A x B| = A.x B.y - A.y B.x = |A| |B| sin(theta)
        return self.x * other[1] - self.y * other[0]


def orientation(p1, p2, p3):
    # sign of the turn from (p2 - p1) to (p3 - p2)
    # +ve - counterclockwise (left turn)
    # -ve - clockwise (right turn)
    # 0 - collinear
    x1, y1, x2, y2, x3, y3 = *p1, *p2, *p3
    d = (x2-x1)*(y3-y2) - (y2-y1)*(x3-x2)
    if d > 0:
       return 1
    elif d < 0:
       return -1
    else:
       return 0


def euclidean_dist(p1, p2):
    x1, y1, x2, y2 = *p1, *p2
    return math.sqrt((y2-y1)**2 + (x2-x1)**2)
