import argparse
import json
import math
import sys
from typing import Optional

from .errors import InvalidArgument
from .metrics import compute_mcnemar
from .report import format_report
from .validation import DEFAULT_ALPHA


def _count(s: str) -> int | float:
    # exact ints for large counts; validation rejects non-integer floats
    try:
        return int(s)
    except ValueError:
        pass
    try:
        return float(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not a number: {s!r}") from e


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        "mcnemar",
        description="McNemar's chi-square test for matched pairs on a 2x2 table "
        "[[A, B], [C, D]], where B and C are the discordant pairs.",
    )
    ap.add_argument("a", type=_count, help="Pairs positive under both conditions.")
    ap.add_argument("b", type=_count, help="Pairs positive under condition 1 only.")
    ap.add_argument("c", type=_count, help="Pairs positive under condition 2 only.")
    ap.add_argument("d", type=_count, help="Pairs negative under both conditions.")
    ap.add_argument("--alpha", type=float, default=DEFAULT_ALPHA)
    ap.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of the text summary.",
    )
    return ap


def main(argv: Optional[list[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        result = compute_mcnemar(
            [[args.a, args.b], [args.c, args.d]], alpha=args.alpha
        )
    except InvalidArgument as e:
        print(f"mcnemar: error: {e}", file=sys.stderr)
        return 2

    if args.json:
        # nan is not valid JSON, emit null instead
        out = {
            k: (None if isinstance(v, float) and math.isnan(v) else v)
            for k, v in result.to_dict().items()
        }
        print(json.dumps(out, indent=2))
    else:
        print(format_report(result))

    return 0


if __name__ == "__main__":
    sys.exit(main())
