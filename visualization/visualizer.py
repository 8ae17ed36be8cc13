"""
Visualization for the path finder.

Displays:
- Tile map as text, with encoded row/column indices
- Tile map as an image (obstacles, start, destination, steps)
"""

import numpy as np
import cv2

from mapping.grid import CellKind, encode


# BGR colours per cell kind
COLORS = {
    CellKind.FREE: (235, 235, 235),
    CellKind.OBSTACLE: (40, 40, 40),
    CellKind.START: (60, 180, 60),
    CellKind.DESTINATION: (50, 50, 220),
    CellKind.STEP: (220, 160, 40),
}
GRID_LINE_COLOR = (180, 180, 180)


class Visualizer:
    def __init__(self, config=None):
        config = config or {}
        self.cell_size = config.get('cell_size', 24)
        self.draw_grid_lines = config.get('grid_lines', True)

    def render_text(self, grid):
        """Render the grid as text with a header row of column indices"""
        lines = ['  ' + ''.join(encode(x) + ' ' for x in range(grid.width))]
        for y, row in enumerate(grid.to_rows()):
            lines.append(encode(y) + ' ' + ''.join(sym + ' ' for sym in row))
        return '\n'.join(lines) + '\n'

    def render_image(self, grid):
        """
        Render the grid as an image.

        Args:
            grid: Grid to draw

        Returns:
            image: (height * cell_size, width * cell_size, 3) uint8 BGR image
        """
        size = self.cell_size
        image = np.zeros((grid.height * size, grid.width * size, 3), dtype=np.uint8)

        for y in range(grid.height):
            for x in range(grid.width):
                top_left = (x * size, y * size)
                bottom_right = ((x + 1) * size - 1, (y + 1) * size - 1)
                cv2.rectangle(image, top_left, bottom_right, COLORS[grid.kind(x, y)], thickness=-1)
                if self.draw_grid_lines:
                    cv2.rectangle(image, top_left, bottom_right, GRID_LINE_COLOR, thickness=1)

        return image

    def save_image(self, grid, filepath):
        image = self.render_image(grid)
        if not cv2.imwrite(filepath, image):
            raise IOError(f"could not write image to {filepath}")
        return image
