#!/usr/bin/env python3
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

import sys
import pathlib
import argparse

# Put this folder on sys.path so `core` / `ui` / `utils` import when run from anywhere.
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent))

from app import main

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="NestDrag drag-to-reorder list demo")
    parser.add_argument(
        "--verbosity",
        type=int, default=0,
        help="Set verbosity level (0=quiet, 1=normal, 2=verbose, 3+=debug)"
    )
    parser.add_argument(
        "--stdexp",
        action="store_true",
        help="Use standard exception handling to stdout / stderr."
    )
    parser.add_argument(
        "--data",
        metavar="PATH",
        help="Load the list from a JSON file instead of the built-in sample."
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Write the list back to --data after every change."
    )
    args = parser.parse_args()
    if args.save and not args.data:
        parser.error("--save requires --data PATH")

    sys.exit(
        main(verbosity=args.verbosity, stdexp=args.stdexp, data_path=args.data, save=args.save)
    )
