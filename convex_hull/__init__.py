from .vector import Point, orientation, euclidean_dist
from .graham_scan import (graham_scan, graham_scan_trace, lowest_point_index,
                          CompareByAngle, sort_by_angle)

__all__ = ['Point', 'orientation', 'euclidean_dist',
           'graham_scan', 'graham_scan_trace', 'lowest_point_index',
           'CompareByAngle', 'sort_by_angle']
