from functools import cmp_to_key

from convex_hull.vector import Point, euclidean_dist, orientation

# O(n log n): sort once, then every point is pushed once and popped at most once.
# Near-collinear float inputs may be misclassified; no exact arithmetic is attempted.


def lowest_point_index(points):
    # min interms of first y and then x (leftmost wins a tie)
    return min(range(len(points)), key=lambda i: (points[i][1], points[i][0]))


class CompareByAngle:
    """Orders points by the angle they make with the X axis around `origin`.

    lhs comes first when the cross product (lhs - origin) x (rhs - origin) is
    positive. Equal angles are broken by distance, closer point first. Every
    point is assumed to lie on or above the origin, so all angles fall in
    [0, pi) and the cross product sign is enough to order them.
    """

    def __init__(self, origin):
        self.origin = Point.of(origin)

    def __call__(self, lhs, rhs):
        lhs, rhs = Point.of(lhs), Point.of(rhs)
        cross = (lhs - self.origin).cross(rhs - self.origin)
        if cross > 0:
            return -1
        if cross < 0:
            return 1
        d_lhs = euclidean_dist(self.origin, lhs)
        d_rhs = euclidean_dist(self.origin, rhs)
        if d_lhs < d_rhs:
            return -1
        if d_lhs > d_rhs:
            return 1
        return 0


def sort_by_angle(origin, points):
    return sorted(points, key=cmp_to_key(CompareByAngle(origin)))


def _prepare(points):
    """Returns (pivot, sorted points + pivot as sentinel)."""
    idx = lowest_point_index(points)
    p0 = points[idx]
    ordered = sort_by_angle(p0, points[:idx] + points[idx + 1:])
    # the sentinel lets the closing edge back to p0 go through the same loop
    ordered.append(p0)
    return p0, ordered


def _sweep(hull, ordered):
    """
    Feeds `ordered` through the stack `hull` (already holding the pivot and
    the first sorted point). Yields ('pop', point, i) and ('push', point, i)
    after each stack change, i being the index in `ordered` being checked.
    """
    for i in range(1, len(ordered)):
        p = ordered[i]
        # before_last, last point, current_point: undo every right turn.
        # A repeated top point gives a zero-length edge and is dropped too.
        while len(hull) >= 2 and (hull[-1] == hull[-2] or
                                  orientation(hull[-2], hull[-1], p) == -1):
            yield 'pop', hull.pop(), i
        hull.append(p)
        yield 'push', p, i


def graham_scan(points, out=None):
    """Convex hull of `points`, counter-clockwise from the lowest point.

    `points` may be any iterable of (x, y) pairs and is never modified. The
    hull is appended to `out` (anything with `extend`, a new list by default)
    which is then returned as `Point`s. Fewer than three points are their own
    hull and the original items come back in input order. Collinear points on
    a hull edge are kept, repeated points are reported once.
    """
    points = list(points)
    if out is None:
        out = []
    if len(points) < 3:
        out.extend(points)
        return out

    p0, ordered = _prepare([Point.of(p) for p in points])
    hull = [p0, ordered[0]]
    for _ in _sweep(hull, ordered):
        pass

    # drop the sentinel, it duplicates hull[0]
    hull.pop()
    out.extend(hull)
    return out


def graham_scan_trace(points):
    """
    Runs the Graham scan and yields its state after every step, for
    animation or inspection. The last state holds the finished hull.
    """
    points = [Point.of(p) for p in points]
    n = len(points)

    if n < 3:
        yield {
            'all_points': points,
            'pivot': None,
            'sorted_points': [],
            'hull_points': points[:],
            'checking_point': None,
            'status': f"Hull is points themselves (n={n}<3)." if points else "No points.",
            'final_hull_path': points[:] + ([points[0]] if n == 2 else []),
        }
        return

    p0, ordered = _prepare(points)
    yield {
        'all_points': points,
        'pivot': p0,
        'sorted_points': ordered[:-1],
        'hull_points': [p0],
        'checking_point': None,
        'status': f"Lowest point {tuple(p0)} chosen as pivot; {n - 1} points sorted by angle.",
        'final_hull_path': None,
    }

    hull = [p0, ordered[0]]
    yield {
        'all_points': points,
        'pivot': p0,
        'sorted_points': ordered[:-1],
        'hull_points': list(hull),
        'checking_point': None,
        'status': f"Start hull with smallest-angle point {tuple(ordered[0])}.",
        'final_hull_path': None,
    }

    for action, point, i in _sweep(hull, ordered):
        p = ordered[i]
        label = "pivot (closing edge)" if i == len(ordered) - 1 else str(tuple(p))
        if action == 'pop':
            if hull and point == hull[-1]:
                status = f"Repeated point {tuple(point)}: pop it."
            else:
                status = f"Right turn towards {label}: pop {tuple(point)}."
        else:
            status = f"Left turn or straight: push {label}."
        yield {
            'all_points': points,
            'pivot': p0,
            'sorted_points': ordered[:-1],
            'hull_points': list(hull),
            'checking_point': p,
            'status': status,
            'final_hull_path': None,
        }

    hull.pop()
    yield {
        'all_points': points,
        'pivot': p0,
        'sorted_points': ordered[:-1],
        'hull_points': list(hull),
        'checking_point': None,
        'status': f"Hull complete! Found {len(hull)} points.",
        'final_hull_path': list(hull) + [hull[0]],
    }
