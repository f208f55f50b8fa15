from __future__ import annotations
import argparse
import json
import sys
from typing import Optional, Sequence

from . import aggregate, formats, ingest
from .config import default_config
from .exceptions import MDError
from .log import get_logger, setup_logging
from .types import MonthKey

logger = get_logger(__name__)


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="meterdelta",
        description="Monthly feed-in / consumption deltas from cumulative meter readings.",
    )
    p.add_argument("input", help='JSON file: {"feed": [{"ts", "value"}], "consumption": [...]}')
    p.add_argument("--year", type=int, required=True)
    p.add_argument("--month", type=int, required=True, help="calendar month, 1-12")
    p.add_argument(
        "--intra-month",
        action="store_true",
        help="first-to-last reading inside the month instead of previous-month baseline",
    )
    p.add_argument("--json", action="store_true", help="print a JSON payload")
    p.add_argument("--log-level", default="WARNING")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    setup_logging(args.log_level)
    cfg = default_config()

    try:
        target = MonthKey.from_calendar(args.year, args.month)
        feed, consumption = ingest.read_json(args.input)
        mc = aggregate.calculate_monthly_consumption(
            feed,
            consumption,
            target,
            config=cfg.delta,
            method="intra_month" if args.intra_month else "previous_month",
        )
    except (MDError, OSError) as e:
        logger.error("meterdelta.failed", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(formats.consumption_payload(mc), indent=2))
    else:
        print(formats.render_report(mc, config=cfg.report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
