#!/usr/bin/env python3
"""primefield walkthrough.

Usage:
    python -m primefield.demo.run_demo

The script:
1. Constructs a few elements of F_p and prints them.
2. Compares elements for equality.
3. Adds elements, including a sum that wraps around p.
4. Shows a rejected construction (num >= p).
5. Shows a rejected cross-field addition.
"""

from __future__ import annotations

import logging

from primefield.arith.element import (
    FieldElement,
    FieldMismatchError,
    NotInFiniteField,
)
from primefield.config import DEFAULT_PRIME, LOG_LEVEL


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def main() -> int:
    logging.basicConfig(level=LOG_LEVEL)
    p = DEFAULT_PRIME

    # ---- 1. Construct ----
    banner(f"1) Construct elements of F_{p}")
    a = FieldElement.new(1, p)
    b = FieldElement.new(p - 1, p)
    print(f"   a = {a}")
    print(f"   b = {b}")

    # ---- 2. Equality ----
    banner("2) Equality")
    other = FieldElement.new(1, p + 1)
    print(f"   {a} == {FieldElement.new(1, p)}: {a == FieldElement.new(1, p)}")
    print(f"   {a} == {other}: {a == other}")

    # ---- 3. Addition ----
    banner("3) Addition")
    print(f"   {a} + {a} = {a + a}")
    print(f"   {b} + {b} = {b + b}  (wraps around {p})")

    # ---- 4. Out of range ----
    banner("4) Out-of-range construction")
    try:
        FieldElement.new(p, p)
    except NotInFiniteField as exc:
        print(f"   rejected: {exc}")

    # ---- 5. Cross-field ----
    banner("5) Cross-field addition")
    try:
        a + other
    except FieldMismatchError as exc:
        print(f"   rejected: {exc}")

    banner("DEMO COMPLETE")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
