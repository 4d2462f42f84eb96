#!/usr/bin/env python3
"""
Sample Animation Example

Loads a skeleton document and prints the sprites of an animation at a fixed
sample rate. Defaults to the setup pose of the bundled stickman; pass
``--animation walk`` for its walk cycle.
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from spinelib import ASSETS_DIR, SkeletonLoader, resolve


def build_parser():
    parser = argparse.ArgumentParser(description="Print sampled sprites of a skeletal animation")
    parser.add_argument("path", nargs="?", default=str(ASSETS_DIR / "stickman.json"),
                        help="Skeleton JSON document")
    parser.add_argument("--skin", default="default", help="Skin name")
    parser.add_argument("--animation", default=None, help="Animation name (omit for setup pose)")
    parser.add_argument("--fps", type=float, default=10.0, help="Samples per second")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    skeleton = SkeletonLoader().load(args.path)
    session = resolve(skeleton, args.skin, args.animation)
    print(session)

    stream = session.stream(delta=1.0 / args.fps)
    for sprites in stream:
        print(f"t={stream.time - stream.delta:.3f}s ({len(sprites)} sprites)")
        for sprite in sprites:
            print(f"  {sprite}")


if __name__ == '__main__':
    main()
