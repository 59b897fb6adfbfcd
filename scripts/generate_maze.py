from __future__ import annotations

import argparse
import json
import os

from maze_gen import generate_from_config, generate_grid
from maze_gen.grid import grid_to_ascii
from maze_gen.utils import load_maze_config


def main():
    parser = argparse.ArgumentParser(description="Generate a maze and emit its wall blocks as JSON")
    parser.add_argument("--config", type=str, default=None, help="YAML config (see configs/maze.yaml)")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--validate", action="store_true")
    parser.add_argument("--ascii", action="store_true", help="Print the logical grid instead of JSON")
    parser.add_argument("--out", type=str, default=None, help="Write JSON here instead of stdout")
    parser.add_argument("overrides", nargs="*", help="OmegaConf dotlist overrides, e.g. projection.unit=2")
    args = parser.parse_args()

    overrides = list(args.overrides)
    for key in ("width", "height", "seed"):
        val = getattr(args, key)
        if val is not None:
            overrides.append(f"{key}={val}")
    if args.validate:
        overrides.append("validate=true")
    cfg = load_maze_config(args.config, overrides)

    if args.ascii:
        maze = generate_grid(cfg.width, cfg.height, cfg.seed, validate=cfg.validate)
        print(grid_to_ascii(maze.tags))
        return

    result = generate_from_config(cfg)
    payload = json.dumps(result.to_dict(), indent=2)
    if args.out:
        os.makedirs(os.path.dirname(os.path.abspath(args.out)), exist_ok=True)
        with open(args.out, "w") as f:
            f.write(payload)
        print(f"[MAZE] {cfg.width}x{cfg.height} walls={len(result.walls)} -> {args.out}")
    else:
        print(payload)


if __name__ == "__main__":
    main()
