#!/usr/bin/env python3
from __future__ import annotations

import sys

from abacus.lint import lint_module
from abacus.registry import load_filesystem_modules


def main() -> int:
    issues = 0
    for name, meta in sorted(load_filesystem_modules().items()):
        lint = lint_module(meta)
        if lint["ok"]:
            continue
        issues += 1
        print(f"[ERROR] {name}")
        for issue in lint["issues"]:
            print(f"  - {issue}")
        if not lint["entrypoint_ok"]:
            print(f"  - entrypoint: {lint['entrypoint_error']}")
    if issues:
        print(f"\nFound {issues} module(s) with lint errors.")
        return 1
    print("All modules passed lint.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
