# scripts/smoke.py
"""
Smoke Test Script for the Kantai position engine.

Usage
-----
1. Run against the bundled sample:
    $ python scripts/smoke.py

2. Run against another dataset, at a specific date:
    $ python scripts/smoke.py --file data.yml --at 1944-10-25
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path

from dotenv import load_dotenv

from kantai.core.engine import snapshot, time_bounds
from kantai.core.timeutil import format_millis, to_millis
from kantai.io.loader import check_references, load_dataset

env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

DEFAULT_FILE = Path(__file__).resolve().parent.parent / "samples" / "data.yml"


def main() -> None:
    """Load a dataset, print its bounds and one frame of positions."""
    parser = argparse.ArgumentParser(description="Run Kantai Smoke Test")
    parser.add_argument("--file", "-f", type=str, help="Dataset path (.yml/.yaml/.json)")
    parser.add_argument("--at", "-t", type=str, help="Query date (ISO-8601)")
    args = parser.parse_args()

    path = Path(args.file) if args.file else DEFAULT_FILE

    try:
        dataset = load_dataset(path)
        begin, end = time_bounds(dataset).require()
        t = to_millis(args.at) if args.at else (begin + end) // 2
    except Exception as exc:
        print(f"\n❌ Load failed: {exc}")
        traceback.print_exc()
        return

    print(f"\n📅 Bounds: {format_millis(begin)} .. {format_millis(end)}")

    dangling = check_references(dataset)
    if dangling:
        print(f"⚠️  {len(dangling)} dangling place reference(s):")
        for problem in dangling:
            print(f"  - {problem}")

    snap = snapshot(dataset, t)
    print(f"\n🧭 Frame at {format_millis(t)}:")
    for frame in snap.frames:
        where = "not positioned" if frame.position is None else f"{frame.position}"
        print(f"  - {frame.name:<12} {where}  (track: {len(frame.track)} pts)")


if __name__ == "__main__":
    main()
