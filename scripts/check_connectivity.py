from __future__ import annotations

import argparse
import numpy as np

from maze_gen.grid import build_maze_grid, validate_maze_grid


def main():
    parser = argparse.ArgumentParser(
        description="Smoke test: generated mazes must satisfy every grid invariant"
    )
    parser.add_argument("--n", type=int, default=200)
    parser.add_argument("--min-size", type=int, default=1)
    parser.add_argument("--max-size", type=int, default=25)
    parser.add_argument("--seed", type=int, default=1234)
    args = parser.parse_args()

    rng = np.random.default_rng(int(args.seed))

    failures = 0
    partitions = []
    for k in range(int(args.n)):
        sd = int(rng.integers(0, 2**32 - 1))
        w = int(rng.integers(args.min_size, args.max_size, endpoint=True))
        h = int(rng.integers(args.min_size, args.max_size, endpoint=True))
        maze = build_maze_grid(w, h, np.random.default_rng(sd))
        partitions.append(len(maze.partitions))
        problems = validate_maze_grid(maze)
        if problems:
            failures += 1
            print(f"[FAIL] seed={sd} size={w}x{h}: {'; '.join(problems)}")

    print("[SMOKE] N=", int(args.n))
    print("[SMOKE] failures=", failures)
    print("[SMOKE] mean_partitions=", float(np.mean(partitions) if partitions else 0.0))


if __name__ == "__main__":
    main()
