#!/usr/bin/env python3
"""
Console front end for the page replacement engine.

Two ways in:
    - one-shot:  page-replacement --policy LRU --frames 3 --refs 7,0,1,2,0
    - menu:      page-replacement            (prompts until 0 is entered)
"""

import argparse
import sys
from typing import List, Optional

from engine import InvalidConfiguration, ReplacementPolicy, simulate
from report import compare_policies, event_log, format_table
from utils import DEFAULT_FRAME_COUNT, POLICY_CHOICES, parse_reference_string


def check_frames(frames):
    try:
        frames = int(frames)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Frame count must be an integer, given: {frames}") from None
    if frames <= 0:
        raise argparse.ArgumentTypeError(f"Frame count must be positive, given: {frames}")
    return frames


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Page replacement simulator (FIFO, OPT, LRU)")
    parser.add_argument("--policy", type=str.upper, choices=ReplacementPolicy.ALL,
                        default=ReplacementPolicy.FIFO, help="Page replacement algorithm")
    parser.add_argument("--frames", type=check_frames, default=DEFAULT_FRAME_COUNT,
                        help="Number of physical frames")
    parser.add_argument("--refs", type=str,
                        help="Reference string, comma or space separated; omit for the interactive menu")
    parser.add_argument("--all", action="store_true",
                        help="Compare all policies on the same input")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Also print the event log")
    return parser


def print_run(policy: str, frames: int, refs: List[int], verbose: bool = False) -> None:
    print(f"\nRunning {policy} with {frames} frames on {len(refs)} references.\n")
    trace = simulate(policy, frames, refs)
    print(format_table(trace))
    if verbose:
        print()
        for ev in event_log(trace):
            print(ev)


def print_comparison(frames: int, refs: List[int]) -> None:
    print(f"\n{'Policy':<8}{'Hits':<8}{'Faults':<8}Hit Ratio")
    for row in compare_policies(frames, refs):
        print(f"{row['policy']:<8}{row['hits']:<8}{row['faults']:<8}{row['hit_ratio']}")


# --------------------------------------------------------
# Interactive menu
# --------------------------------------------------------

def run_menu(verbose: bool = False) -> int:
    print("==== Page Replacement Simulator ====")
    print("Algorithms: " + "  ".join(f"{k}) {v}" for k, v in POLICY_CHOICES.items()))
    print("Enter 0 as algorithm choice to exit.\n")

    while True:
        try:
            choice = input("Select algorithm (0 to exit): ").strip()
        except EOFError:
            print("\nExiting...")
            return 0

        if choice == "0":
            print("Exiting...")
            return 0
        if not choice.isdigit() or int(choice) not in POLICY_CHOICES:
            print("Invalid choice.")
            continue
        policy = POLICY_CHOICES[int(choice)]

        try:
            frames = check_frames(input("Enter frame count: ").strip())
            refs = parse_reference_string(
                input("Enter reference string (space separated integers):\n"))
            print_run(policy, frames, refs, verbose)
        except (argparse.ArgumentTypeError, InvalidConfiguration) as e:
            print(e)
            continue
        except EOFError:
            print("\nExiting...")
            return 0
        print()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.refs is None:
        return run_menu(args.verbose)

    try:
        refs = parse_reference_string(args.refs)
        if args.all:
            print_comparison(args.frames, refs)
        else:
            print_run(args.policy, args.frames, refs, args.verbose)
    except InvalidConfiguration as e:
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
