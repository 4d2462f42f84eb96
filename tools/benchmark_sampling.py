#!/usr/bin/env python3
"""
Benchmark skeleton loading and pose sampling.

Times three phases over the bundled (or a given) skeleton document:
* parsing and building the skeleton
* resolving a session
* sampling one full animation cycle at 60 Hz
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from spinelib import ASSETS_DIR, DEFAULT_SAMPLE_DELTA, SkeletonLoader, resolve  # noqa: E402


def _timeit(label: str, iterations: int, func) -> None:
    start = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed = time.perf_counter() - start
    print(f"{label:<12} {iterations:>6} runs  {elapsed / iterations * 1e6:10.1f} us/run")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("path", nargs="?", type=Path, default=ASSETS_DIR / "stickman.json")
    parser.add_argument("--skin", default="default")
    parser.add_argument("--animation", default="walk")
    parser.add_argument("--iterations", type=int, default=200)
    args = parser.parse_args()

    loader = SkeletonLoader()
    skeleton = loader.load(args.path)

    _timeit("load", args.iterations, lambda: loader.load(args.path))
    _timeit("resolve", args.iterations, lambda: resolve(skeleton, args.skin, args.animation))

    session = resolve(skeleton, args.skin, args.animation)
    frames = sum(1 for _ in session.stream(DEFAULT_SAMPLE_DELTA))
    print(f"cycle: {session.duration:.2f}s, {frames} frames")
    _timeit("cycle", max(1, args.iterations // 10), lambda: list(session.stream(DEFAULT_SAMPLE_DELTA)))


if __name__ == "__main__":
    main()
