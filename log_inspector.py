"""CLI log inspector — list or prune archived log files."""

import argparse
import os
import sys

from rotating_transport.errors import ScanError
from rotating_transport.inspector import describe_archives, format_size
from rotating_transport.rotator import prune


def main():
    parser = argparse.ArgumentParser(description="Inspect archived log files")
    parser.add_argument("--file", default=os.environ.get("LOG_FILE", "./logs/application.log"),
                        help="Active log file whose archives to inspect")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--list", action="store_true", help="List archives, newest first")
    group.add_argument("--prune", metavar="N", type=int,
                       help="Delete all but the N newest archives")
    args = parser.parse_args()

    if args.list:
        try:
            archives = describe_archives(args.file)
        except ScanError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        if not archives:
            print("No archived logs found.")
            return
        for info in archives:
            when = info.timestamp.isoformat() if info.timestamp else "unknown date"
            print(f"  {info.name}  ({format_size(info.size)}, {when})")

    else:
        deleted = prune(args.file, args.prune)
        if not deleted:
            print("Nothing to prune.")
            return
        for path in deleted:
            print(f"  deleted {path}")


if __name__ == "__main__":
    main()
