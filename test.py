#!/usr/bin/env python3

import argparse
import concurrent.futures
import os
import shlex
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

GOLDEN_DIR = Path(__file__).resolve().parent / "tests" / "golden"


@dataclass
class CaseResult:
    path: str
    returncode: int
    expected: str
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and self.stdout == self.expected


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run chex golden-output cases, optionally in parallel."
    )
    parser.add_argument(
        "--jobs",
        type=int,
        default=max(1, (os.cpu_count() or 1)),
        help="Number of parallel chex processes (default: CPU count).",
    )
    parser.add_argument(
        "--chex",
        default=f"{shlex.quote(sys.executable)} -m chexdump",
        help="Command used to invoke chex (default: current interpreter -m chexdump).",
    )
    parser.add_argument(
        "cases",
        nargs="*",
        help="Case files (*.args) to execute (default: every case in tests/golden).",
    )
    return parser.parse_args()


def run_one(chex: str, case_path: str) -> CaseResult:
    case = Path(case_path)
    argv = shlex.split(chex) + shlex.split(case.read_text())
    expected = case.with_suffix(".out").read_text()
    proc = subprocess.run(
        argv,
        cwd=case.parent,
        capture_output=True,
        text=True,
        check=False,
    )
    return CaseResult(
        path=case_path,
        returncode=proc.returncode,
        expected=expected,
        stdout=proc.stdout,
        stderr=proc.stderr,
    )


def main() -> int:
    args = parse_args()

    cases = args.cases or [str(p) for p in sorted(GOLDEN_DIR.glob("*.args"))]
    if not cases:
        print(f"error: no golden cases found in {GOLDEN_DIR}", file=sys.stderr)
        return 2

    jobs = max(1, args.jobs)
    cases = list(dict.fromkeys(cases))
    failed: list[CaseResult] = []

    if jobs == 1:
        for case_path in cases:
            result = run_one(args.chex, case_path)
            if not result.ok:
                failed.append(result)
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=jobs) as executor:
            futures = [executor.submit(run_one, args.chex, case) for case in cases]
            for future in concurrent.futures.as_completed(futures):
                result = future.result()
                if not result.ok:
                    failed.append(result)

    if not failed:
        print(f"{len(cases)} case(s) passed")
        return 0

    print(f"{len(failed)} of {len(cases)} case(s) failed:", file=sys.stderr)
    for result in sorted(failed, key=lambda item: item.path):
        print(f"- {result.path} (exit {result.returncode})", file=sys.stderr)
        if result.stdout != result.expected:
            print("  expected:", file=sys.stderr)
            for line in result.expected.splitlines():
                print(f"    {line}", file=sys.stderr)
            print("  got:", file=sys.stderr)
            for line in result.stdout.splitlines():
                print(f"    {line}", file=sys.stderr)
        if result.stderr:
            print("  stderr:", file=sys.stderr)
            for line in result.stderr.rstrip("\n").splitlines():
                print(f"    {line}", file=sys.stderr)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
