'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import sys
import random
import pathlib

# Run from anywhere: put the repo root on sys.path so `core` / `utils` import.
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent))

from utils.data_file import save_data
from utils.sample_data import CONTAINER_PATH, random_data

def count_elements(data):
    """(roots, containers, children) in a generated data list."""
    containers = [e for e in data if CONTAINER_PATH in e]
    children = sum(len(c[CONTAINER_PATH]) for c in containers)
    return len(data), len(containers), children

def main(argv=None):
    argv = sys.argv if argv is None else argv
    if len(argv) not in (3, 4):
        print(f"Usage: {argv[0]} /path/to/data.json N [seed]")
        print("Writes N random root elements (items and containers) as JSON.")
        return 1

    out_path = argv[1]
    try:
        count = int(argv[2])
        seed = int(argv[3]) if len(argv) == 4 else None
    except ValueError:
        print("Error: N and seed must be integers")
        return 1

    if count < 0:
        print("Error: N must be >= 0")
        return 1

    data = random_data(count, rng=random.Random(seed))
    save_data(out_path, data)

    roots, containers, children = count_elements(data)
    print(f"Wrote {roots} roots ({containers} containers, {children} children) to {out_path}")
    return 0

if __name__ == '__main__':
    sys.exit(main())
