#!/usr/bin/env python3
"""
Unified entry point for the Mini Cactpot calculator.

Usage:
    python cactpot.py                              # Default: terminal UI
    python cactpot.py --ui cli --board 12.......   # One-shot analysis
    python cactpot.py --ui cli --board 1234..... --json

Individual entry points (tui.py, cli.py) still work independently.
"""
import argparse
import sys


def main(argv=None):
    # Pre-parse just the --ui flag, pass everything else through
    parser = argparse.ArgumentParser(
        description="Mini Cactpot calculator — terminal UI or one-shot CLI",
        add_help=False,
    )
    parser.add_argument("--ui", choices=["tui", "cli"], default="tui",
                        help="Interface: tui (default) or cli")
    args, remaining = parser.parse_known_args(argv)

    if args.ui == "cli":
        from cli import main as run_cli
        return run_cli(remaining)

    from tui import main as run_tui
    run_tui(remaining)
    return 0


if __name__ == "__main__":
    sys.exit(main())
