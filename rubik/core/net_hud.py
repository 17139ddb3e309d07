import cv2
import numpy as np

from . import config
from .facelets import Face


class NetHUD:
    """Render a 2D unfolded cube net onto a BGR image.

    Layout (faces):
        [  -,  U,  -,  - ]
        [  L,  F,  R,  B ]
        [  -,  D,  -,  - ]
    Each face is 3x3.
    """

    # start column, start row in tile units
    LAYOUT = {
        Face.UP: (3, 0),
        Face.LEFT: (0, 3),
        Face.FRONT: (3, 3),
        Face.RIGHT: (6, 3),
        Face.BACK: (9, 3),
        Face.DOWN: (3, 6),
    }

    def __init__(self, margin: int = config.NET_MARGIN, tile_gap: int = config.NET_TILE_GAP,
                 label: bool = False):
        self.margin = int(margin)
        self.tile_gap = int(tile_gap)
        self.show_label = bool(label)

    def net_size(self, tile: int):
        # 12 tiles wide (4 faces * 3 tiles), 9 tiles tall (3 faces * 3 tiles)
        return 12 * tile + 3 * self.tile_gap, 9 * tile + 2 * self.tile_gap

    def _ensure_tile_size(self, W: int, H: int, scale: float) -> int:
        max_w = int(W * float(scale))
        max_h = int(H * float(scale))
        tw_by_w = max(6, (max_w - 3 * self.tile_gap) // 12)
        tw_by_h = max(6, (max_h - 2 * self.tile_gap) // 9)
        return int(max(6, min(tw_by_w, tw_by_h)))

    def render(self, img: np.ndarray, cube, scale: float = config.NET_SCALE) -> np.ndarray:
        """Draw the net of `cube` in the bottom-right corner of `img`."""
        if img is None or img.size == 0:
            return img
        H, W = img.shape[:2]
        tile = self._ensure_tile_size(W, H, scale)
        net_w, net_h = self.net_size(tile)
        x0 = max(self.margin, W - net_w - self.margin)
        y0 = max(self.margin, H - net_h - self.margin)
        return self._draw(img, cube, x0, y0, tile)

    def render_image(self, cube, tile: int = config.NET_TILE_SIZE) -> np.ndarray:
        """Fresh canvas holding just the net, `margin` pixels on every side."""
        net_w, net_h = self.net_size(tile)
        img = np.zeros((net_h + 2 * self.margin, net_w + 2 * self.margin, 3), dtype=np.uint8)
        return self._draw(img, cube, self.margin, self.margin, tile)

    def _draw(self, img: np.ndarray, cube, x0: int, y0: int, tile: int) -> np.ndarray:
        gap = self.tile_gap
        for face, (fc, fr) in self.LAYOUT.items():
            letters = cube.face_letters(face)
            for i in range(3):
                for j in range(3):
                    letter = letters[i][j]
                    bgr = config.COLOR_TO_BGR.get(letter, config.COLOR_TO_BGR['?'])
                    x1 = x0 + (fc + j) * tile + (fc // 3) * gap
                    y1 = y0 + (fr + i) * tile + (fr // 3) * gap
                    x2, y2 = x1 + tile - 1, y1 + tile - 1
                    cv2.rectangle(img, (x1, y1), (x2, y2), bgr, -1)
                    cv2.rectangle(img, (x1, y1), (x2, y2), (10, 10, 10), 1)
                    if self.show_label:
                        cv2.putText(img, letter, (x1 + 3, y2 - 4), cv2.FONT_HERSHEY_SIMPLEX, 0.4, (0, 0, 0), 2,
                                    cv2.LINE_AA)
                        cv2.putText(img, letter, (x1 + 3, y2 - 4), cv2.FONT_HERSHEY_SIMPLEX, 0.4, (255, 255, 255), 1,
                                    cv2.LINE_AA)
        return img
