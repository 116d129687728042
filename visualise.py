import cv2
import numpy as np
import matplotlib.pyplot as plt

from dem import MAX_HEIGHT


CELL_PX = 16


def terrain_image(heights, cell_px=CELL_PX):
    """Colour-mapped BGR image of a height field, cell_px pixels per cell."""
    heights = np.asarray(heights)
    scaled = (np.clip(heights, 0, MAX_HEIGHT) * 255 // MAX_HEIGHT).astype(np.uint8)
    img = cv2.applyColorMap(scaled, cv2.COLORMAP_JET)
    return cv2.resize(img, None, fx=cell_px, fy=cell_px, interpolation=cv2.INTER_NEAREST)


def _cell_centre(vertex, size, cell_px):
    x, y = divmod(vertex, size)
    # Row x is drawn as image row, column y as image column.
    return y * cell_px + cell_px // 2, x * cell_px + cell_px // 2


def draw_path(heights, path, color=(255, 255, 255), thickness=2, cell_px=CELL_PX):
    """Draw a path over the terrain image, with start and end marked."""
    result = terrain_image(heights, cell_px)
    if not path.found:
        return result
    size = np.asarray(heights).shape[0]
    points = [_cell_centre(v, size, cell_px) for v in path.vertices]
    for i in range(1, len(points)):
        cv2.line(result, points[i - 1], points[i], color, thickness)
    cv2.circle(result, points[0], cell_px // 3, (0, 255, 0), -1)
    cv2.circle(result, points[-1], cell_px // 3, (0, 0, 255), -1)
    return result


def show_result(heights, path, title="Route"):
    """Display the route in an OpenCV window until a key is pressed."""
    img = draw_path(heights, path)
    label = f"energy {path.total_cost}" if path.found else "no path"
    cv2.putText(img, label, (10, 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
    cv2.imshow(title, img)
    cv2.waitKey(0)
    cv2.destroyAllWindows()


def plot_terrain_3d(heights, path=None, title="Terrain"):
    """Plot the height field as a 3D surface, with the path on top if given."""
    heights = np.asarray(heights)
    size = heights.shape[0]

    fig = plt.figure(figsize=(10, 8))
    ax = fig.add_subplot(111, projection="3d")

    xs, ys = np.meshgrid(np.arange(size), np.arange(size), indexing="ij")
    ax.plot_surface(xs, ys, heights, cmap="terrain", edgecolor="none", alpha=0.8)

    if path is not None and path.found:
        cells = [divmod(v, size) for v in path.vertices]
        px = [c[0] for c in cells]
        py = [c[1] for c in cells]
        pz = [heights[c] + 1 for c in cells]
        ax.plot(px, py, pz, color="r", linewidth=2)

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("Height")
    ax.set_title(title)
    plt.tight_layout()
    return fig
