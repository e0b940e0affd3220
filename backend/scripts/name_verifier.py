"""Command-line front end for the name verifier.

Usage (from repo root):
    python backend/scripts/name_verifier.py set "Tyler Bliha"
    python backend/scripts/name_verifier.py verify "Tlyer Bilha"
    python backend/scripts/name_verifier.py corpus
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Make `app` imports work whether the script is run from repo root or backend/.
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from app.config import get_settings
from app.services.target_store import TargetNameStore, TargetStoreError
from app.services.verification import NoTargetConfiguredError, get_verification_engine, verify_candidate
from app.verification.corpus import run_corpus


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse script CLI arguments."""

    parser = argparse.ArgumentParser(description="Verify candidate names against a stored target name.")
    parser.add_argument(
        "--storage",
        default=None,
        help="Path of the target-name JSON record (default: configured storage_path)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log per-signal scores.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    set_parser = subparsers.add_parser("set", help="Store a target name.")
    set_parser.add_argument("name")
    subparsers.add_parser("show", help="Show the current target name.")
    subparsers.add_parser("clear", help="Forget the current target name.")
    verify_parser = subparsers.add_parser("verify", help="Verify a candidate against the target.")
    verify_parser.add_argument("candidate")
    subparsers.add_parser("corpus", help="Run the regression corpus.")
    return parser.parse_args(argv)


def _print_result(result) -> None:
    print("-" * 40)
    print(f"Target Name:    {result.target_name}")
    print(f"Candidate Name: {result.candidate_name}")
    print(f"Match:          {'YES' if result.match else 'NO'}")
    print(f"Confidence:     {result.confidence}%")
    print(f"Reason:         {result.reason}")
    print("-" * 40)


def run_corpus_report() -> int:
    """Print PASS/FAIL for every corpus case; returns the number of failures."""

    results = run_corpus(get_verification_engine())
    failures = 0
    for index, item in enumerate(results, start=1):
        status = "PASS" if item.passed else "FAIL"
        if not item.passed:
            failures += 1
        expected = "match" if item.case.expected_match else "no match"
        print(
            f"{index:2d}. [{status}] {item.case.target!r} vs {item.case.candidate!r} "
            f"expected {expected}, got confidence {item.outcome.confidence}% - {item.outcome.reason}"
        )
    print(f"\n{len(results) - failures}/{len(results)} cases passed")
    return failures


def main(argv: list[str] | None = None) -> int:
    """Dispatch one sub-command and return the process exit status."""

    args = parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level.upper())
    store = TargetNameStore(args.storage or settings.storage_path)

    try:
        return _run_command(args, store)
    except TargetStoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _run_command(args: argparse.Namespace, store: TargetNameStore) -> int:
    if args.command == "set":
        if not args.name.strip():
            print("Error: Name cannot be empty.", file=sys.stderr)
            return 1
        store.save(args.name.strip())
        print(f"Target name stored: {args.name.strip()}")
        return 0

    if args.command == "show":
        target = store.get_latest()
        if target is None:
            print("No target name has been generated yet.")
        else:
            print(f"Current target name: {target}")
        return 0

    if args.command == "clear":
        store.clear()
        print("Target name cleared.")
        return 0

    if args.command == "verify":
        candidate = args.candidate.strip()
        if not candidate:
            print("Error: Candidate name cannot be empty.", file=sys.stderr)
            return 1
        try:
            result = verify_candidate(store, candidate)
        except NoTargetConfiguredError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        _print_result(result)
        return 0

    return 1 if run_corpus_report() else 0


if __name__ == "__main__":
    sys.exit(main())
