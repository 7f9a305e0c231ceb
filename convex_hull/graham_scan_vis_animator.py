import matplotlib.pyplot as plt
import matplotlib.animation as animation

from convex_hull.graham_scan import graham_scan_trace

# Point representation: (x, y) tuples or convex_hull.vector.Point

DEMO_POINTS = [(2, 2), (4, 1), (3, 4), (5, 3), (1, 5), (6, 5), (4, 6), (2, 7), (5, 0)]


class GrahamScanAnimation:
    """Step-by-step matplotlib view of graham_scan_trace(points)."""

    def __init__(self, points, figsize=(8, 8)):
        self.frames = list(graham_scan_trace(points))
        self.fig, self.ax = plt.subplots(figsize=figsize)
        ax = self.ax

        # Scatter plot for all points (static once drawn)
        self.scatter_all_points = ax.scatter([], [], c='blue', s=50, label="All Points")
        # Candidate hull so far
        self.hull_line_plot, = ax.plot([], [], 'r-', lw=2, label="Convex Hull")
        # Edge from the top of the stack to the point being tested
        self.checking_line_plot, = ax.plot([], [], 'k:', lw=1, label="Top-to-Checking")
        self.pivot_marker, = ax.plot([], [], 'o', ms=12, mec='orange', mfc='None', mew=2, label="Pivot")
        self.checking_marker, = ax.plot([], [], 'x', ms=10, color='gray', mew=2, label="Checking Point")

        self.status_text_ax = ax.text(0.02, 0.98, "", transform=ax.transAxes, ha="left", va="top",
                                      fontsize=9, bbox=dict(boxstyle="round,pad=0.3", fc="wheat", alpha=0.7))

    @property
    def artists(self):
        return (self.scatter_all_points, self.hull_line_plot, self.checking_line_plot,
                self.pivot_marker, self.checking_marker, self.status_text_ax)

    def init_animation(self):
        all_points = self.frames[0]['all_points']
        ax = self.ax
        if all_points:
            ax.set_xlim(min(p[0] for p in all_points) - 1, max(p[0] for p in all_points) + 1)
            ax.set_ylim(min(p[1] for p in all_points) - 1, max(p[1] for p in all_points) + 1)
            self.scatter_all_points.set_offsets([(p[0], p[1]) for p in all_points])
        ax.set_aspect('equal', adjustable='box')
        ax.legend(fontsize='small', loc='lower right')
        ax.set_title("Graham Scan Visualization")

        self.hull_line_plot.set_data([], [])
        self.checking_line_plot.set_data([], [])
        self.pivot_marker.set_data([], [])
        self.checking_marker.set_data([], [])
        self.status_text_ax.set_text("Initializing...")
        return self.artists

    def update_animation(self, frame_data):
        hull_pts = frame_data['hull_points']
        pivot = frame_data['pivot']
        checking_point = frame_data['checking_point']
        final_hull_path = frame_data['final_hull_path']

        if final_hull_path:  # closed and highlighted once done
            path = final_hull_path
            self.hull_line_plot.set_color('purple')
            self.hull_line_plot.set_linewidth(3)
        else:
            path = hull_pts
            self.hull_line_plot.set_color('red')
            self.hull_line_plot.set_linewidth(2)
        self.hull_line_plot.set_data([p[0] for p in path], [p[1] for p in path])

        if pivot is not None:
            self.pivot_marker.set_data([pivot[0]], [pivot[1]])
        else:
            self.pivot_marker.set_data([], [])

        if checking_point is not None and hull_pts:
            top = hull_pts[-1]
            self.checking_line_plot.set_data([top[0], checking_point[0]], [top[1], checking_point[1]])
            self.checking_marker.set_data([checking_point[0]], [checking_point[1]])
        else:
            self.checking_line_plot.set_data([], [])
            self.checking_marker.set_data([], [])

        self.status_text_ax.set_text(frame_data['status'])
        return self.artists

    def animate(self, interval=700):
        return animation.FuncAnimation(self.fig,
                                       self.update_animation,
                                       frames=self.frames,
                                       init_func=self.init_animation,
                                       blit=True,
                                       interval=interval,  # Milliseconds between frames
                                       repeat=False)


if __name__ == '__main__':
    # S = [(0,0), (1,0), (2,0), (0,1), (1,1), (0,2)] # collinear boundary
    # S = [(0,0), (1,1)] # n < 3
    S = DEMO_POINTS

    anim = GrahamScanAnimation(S)
    ani = anim.animate()
    plt.tight_layout()
    plt.show()

    print("\nFinal Convex Hull Points (in order):")
    for pt in anim.frames[-1]['hull_points']:
        print(tuple(pt))
