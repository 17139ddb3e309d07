"""
Demo: scramble a solved cube, show it, then undo the scramble.
Facelet state → random shuffle → net print / net image → inverse sequence
"""
import os
import sys

import cv2
import yaml

from rubik.core import config
from rubik.core.errors import UnknownMoveError
from rubik.core.net_hud import NetHUD
from rubik.core.shuffle import UniformMoveSampler
from rubik.cube_state import CubeState
from rubik.sequence import describe_move, format_sequence


class App:
    def __init__(self, config_path: str = "config.yaml"):
        # Load config
        self.cfg = {}
        if os.path.exists(config_path):
            with open(config_path, "r") as f:
                self.cfg = yaml.safe_load(f) or {}

        shuffle_cfg = self.cfg.get('shuffle', {}) or {}
        self.shuffle_moves = int(shuffle_cfg.get('moves', config.DEFAULT_SHUFFLE_MOVES))
        seed = shuffle_cfg.get('seed', config.SHUFFLE_SEED)
        self.sampler = UniformMoveSampler(
            seed=None if seed is None else int(seed),
            avoid_inverse=bool(shuffle_cfg.get('avoid_inverse', config.AVOID_INVERSE)),
        )

        render_cfg = self.cfg.get('render', {}) or {}
        self.show_text_net = bool(render_cfg.get('text_net', config.SHOW_TEXT_NET))
        self.image_path = render_cfg.get('image_path')
        self.tile = int(render_cfg.get('tile', config.NET_TILE_SIZE))
        self.hud = NetHUD(label=bool(render_cfg.get('label', False)))

        self.cube = CubeState()
        self.replay = shuffle_cfg.get('replay')

    def _show(self, title: str):
        print(f"\n{title}  (solved={self.cube.is_solved()})")
        if self.show_text_net:
            print(self.cube.cube.net_string())

    def _save_image(self, suffix: str):
        if not self.image_path:
            return
        root, ext = os.path.splitext(self.image_path)
        path = f"{root}_{suffix}{ext or '.png'}"
        img = self.hud.render_image(self.cube.cube, tile=self.tile)
        if cv2.imwrite(path, img):
            print(f"✓ Net image saved: {path}")
        else:
            print(f"⚠ Could not write net image: {path}")

    def run(self) -> int:
        print("=" * 60)
        print("Rubik's Cube facelet model")
        print("=" * 60)

        self._show("Solved cube")

        if self.replay:
            moves = self.cube.apply_sequence(self.replay)
        else:
            moves = self.cube.scramble(self.shuffle_moves, self.sampler)
        print(f"\nShuffle ({len(moves)} moves): {format_sequence(moves)}")
        for m in moves:
            print(f"  {m.value:<3} {describe_move(m)}")
        self._show("Shuffled cube")
        self._save_image("shuffled")

        ok, counts = self.cube.is_counts_valid()
        print(f"\nColor counts valid: {ok} {counts}")

        undo_moves = self.cube.revert()
        print(f"\nInverse sequence: {format_sequence(undo_moves)}")
        self._show("Restored cube")
        self._save_image("restored")
        return 0 if self.cube.is_solved() else 1


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if argv else "config.yaml"
    try:
        return App(config_path).run()
    except (UnknownMoveError, ValueError) as e:
        print(f"❌ {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
