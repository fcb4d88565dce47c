from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from typing import Any, Dict

from pydantic import ValidationError

from storerota.allocator import aggregate_stats, allocate, coverage_summary, coverage_table, roster_stats
from storerota.io.csv_loader import load_preferences, load_workers
from storerota.models.config import AllocatorConfig
from storerota.models.roster import roster_to_dict
from storerota.models.validated import ValidatedAllocatorConfig, validate_locations
from storerota.models.worker import DuplicateWorkerNameError, resolve_names
from storerota.payroll import calculate_payroll, payroll_total
from storerota.utils.logging_setup import get_logger, setup_logging

logger = get_logger("storerota.cli")


def _build_cfg(args: argparse.Namespace) -> Dict[str, Any]:
    cfg: Dict[str, Any] = {}
    if args.capacity:
        cap: Dict[str, int] = {}
        for item in args.capacity:
            slot, _, n = item.partition("=")
            cap[slot] = int(n)
        cfg["capacity"] = cap
    if args.base_rate is not None:
        cfg["base_rate"] = float(args.base_rate)
    return cfg


def _fmt_stats(stats) -> str:
    return f"{stats.total_assigned}/{stats.total_required} ({stats.fill_rate:.0f}%)"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Allocate weekly shifts across store locations")
    p.add_argument("--preferences", required=True, help="CSV/XLSX of name,day,slot[,available] rows")
    p.add_argument("--locations", nargs="+", required=True, help="Location ids, highest priority first")
    p.add_argument("--workers", help="CSV/XLSX of worker records (id,name,salary_coefficient) for payroll")
    p.add_argument("--capacity", nargs="*", metavar="SLOT=N", help="Override workers per slot, e.g. Morning=3")
    p.add_argument("--base-rate", type=float, default=None, help="Hourly pay rate for payroll")
    p.add_argument("--log-file", default=None, help="Write a rotating log file here")
    p.add_argument("-v", "--verbose", action="count", default=0)
    p.add_argument("--json", dest="json_out", action="store_true", help="JSON output (rosters + stats)")
    args = p.parse_args(argv)

    level = "DEBUG" if args.verbose > 1 else "INFO" if args.verbose else "WARNING"
    setup_logging(level=level, log_file=args.log_file)

    try:
        config = AllocatorConfig.from_dict(_build_cfg(args))
        config = ValidatedAllocatorConfig.from_dataclass(config).to_dataclass()
        locations = validate_locations(args.locations)
        availability = load_preferences(args.preferences)
        workers = load_workers(args.workers) if args.workers else None
        if workers is not None:
            resolve_names(workers)
    except (ValidationError, DuplicateWorkerNameError, ValueError) as e:
        logger.error(f"Invalid input: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 2

    multi = allocate(availability, locations, capacity=config.capacity)
    per_location = {loc: roster_stats(r, config.capacity) for loc, r in multi.items()}
    overall = aggregate_stats(multi, config.capacity)
    summary = coverage_summary(coverage_table(multi, config.capacity))
    payroll = (
        calculate_payroll(workers, multi, config.base_rate, config.slot_hours)
        if workers is not None else None
    )

    if args.json_out:
        out: Dict[str, Any] = {
            "rosters": roster_to_dict(multi),
            "locations": {loc: s.to_dict() for loc, s in per_location.items()},
            "overall": overall.to_dict(),
            "coverage": summary,
        }
        if payroll is not None:
            out["payroll"] = [asdict(line) for line in payroll]
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return 0

    print("Summary:")
    for loc, stats in per_location.items():
        print(f" - {loc}: {_fmt_stats(stats)}")
    print(f" - all locations: {_fmt_stats(overall)}")
    print(f"Short slots: {summary['short']} (missing {summary['deficit_total']} workers)")
    print("Shifts per worker:")
    for name, n in sorted(overall.per_worker_count.items(), key=lambda kv: (-kv[1], kv[0])):
        print(f" - {name}: {n}")
    if payroll is not None:
        print("Payroll:")
        for line in payroll:
            print(f" - {line.name}: {line.hours:g}h → {line.salary:,.0f}")
        print(f"Total: {payroll_total(payroll):,.0f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
