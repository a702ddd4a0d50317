"""Command-line front end for the WBS engine."""

import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

import yaml

from .calendar.business_days import BusinessDayCalendar
from .calendar.grid import CalendarGridBuilder
from .calendar.holidays import HOLIDAY_CALENDAR
from .engine.aggregator import ScheduleAggregator
from .engine.delay import DelayClassifier
from .engine.effort import BUSINESS_DAYS_PER_MONTH_BASELINE, HOURS_PER_DAY, EffortUnitConverter
from .exceptions import ConfigError, ScheduleEngineError
from .models.work_item import WorkItem
from .sampling.generator import WorkItemGenerator
from .utils.config import resolve_config
from .utils.datetime_utils import to_date
from .utils.logging_config import configure_logging, get_logger

logger = get_logger("cli")

WEEKDAY_HEADER = ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']


def load_items(items_path: str) -> List[WorkItem]:
    """Load work items from a JSON or YAML file (a list, or {'items': [...]})."""
    path = Path(items_path)
    if not path.exists():
        raise ConfigError(items_path, "items file not found")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            if path.suffix.lower() in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ConfigError(items_path, f"parse error: {exc}") from exc

    if isinstance(data, dict):
        data = data.get('items', [])
    if not isinstance(data, list):
        raise ConfigError(items_path, "expected a list of items")
    return [WorkItem.from_dict(record) for record in data]


def run_holidays(config: dict, year: int) -> None:
    """Print every holiday of the year."""
    for day, name in HOLIDAY_CALENDAR.holidays_in_year(year):
        print(f"{day.isoformat()} ({day.strftime('%a')}) {name}")


def run_business_days(config: dict, year: int, month: int) -> None:
    """Print business-day and effort baselines for a month."""
    business_calendar = BusinessDayCalendar.from_config(config)
    converter = EffortUnitConverter(business_calendar)
    business_days = business_calendar.business_days_in_month(year, month)
    expected_hours = converter.expected_hours_for_month(year, month)

    print(f"{year}-{month:02d}")
    print(f"  Business days:  {business_days}")
    print(f"  Expected hours: {converter.format_hours_and_person_days(expected_hours)}")
    print(f"  Person-months:  {converter.format_person_months(expected_hours)}"
          f" (baseline {BUSINESS_DAYS_PER_MONTH_BASELINE} days x {HOURS_PER_DAY}h)")


def run_calendar(config: dict, year: int, month: int) -> None:
    """Print the six-week grid of a month; holidays marked with '*'."""
    builder = CalendarGridBuilder(BusinessDayCalendar.from_config(config))
    cells = builder.build_month_grid(year, month)

    print(f"{year}-{month:02d}".center(7 * 5))
    print(''.join(f"{name:>5}" for name in WEEKDAY_HEADER))
    for week in range(6):
        row = []
        for cell in cells[week * 7:(week + 1) * 7]:
            label = str(cell.date.day) if cell.is_in_target_month else '.'
            if cell.is_holiday and cell.is_in_target_month:
                label += '*'
            row.append(f"{label:>5}")
        print(''.join(row))

    for cell in cells:
        if cell.is_holiday and cell.is_in_target_month:
            print(f"  * {cell.date.isoformat()} {cell.holiday_name}")


def run_report(config: dict, items_path: str, today: Optional[str], as_json: bool) -> None:
    """Aggregate an item file and print the report."""
    items = load_items(items_path)
    classifier = DelayClassifier(config, clock=date.today)
    aggregator = ScheduleAggregator(
        config,
        classifier=classifier,
        converter=EffortUnitConverter(BusinessDayCalendar.from_config(config)),
    )
    report = aggregator.aggregate(items, to_date(today) if today else None)
    logger.info("report generated", extra={'item_count': len(items), 'as_of': report.as_of})

    if as_json:
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False, default=str))
    else:
        print(report.to_human_readable())


def run_generate_items(config: dict, count: Optional[int], today: Optional[str], output: Optional[str]) -> None:
    """Write a deterministic sample item file."""
    generator = WorkItemGenerator(seed=42, config=config)
    reference = to_date(today) if today else date.today()
    items = generator.generate_items(reference, count=count)
    payload = {'items': [item.to_dict() for item in items]}

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        print(f"Generated {len(items)} items")
        print(f"Items saved to: {output_path}")
    else:
        print(json.dumps(payload, indent=2, ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="WBS business calendar and schedule analytics"
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration file (YAML or JSON)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Log level override (default: from config)'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    holidays = subparsers.add_parser('holidays', help='List the holidays of a year')
    holidays.add_argument('--year', type=int, required=True)

    business_days = subparsers.add_parser('business-days', help='Business days of a month')
    business_days.add_argument('--year', type=int, required=True)
    business_days.add_argument('--month', type=int, required=True)

    grid = subparsers.add_parser('calendar', help='Print a month calendar')
    grid.add_argument('--year', type=int, required=True)
    grid.add_argument('--month', type=int, required=True)

    report = subparsers.add_parser('report', help='Aggregate a work item file')
    report.add_argument('--items', type=str, required=True, help='JSON or YAML item file')
    report.add_argument('--today', type=str, default=None, help='Reference date (default: today)')
    report.add_argument('--json', action='store_true', help='Print JSON instead of text')

    generate = subparsers.add_parser('generate-items', help='Generate a sample item file')
    generate.add_argument('--count', type=int, default=None)
    generate.add_argument('--today', type=str, default=None)
    generate.add_argument('--output', type=str, default=None)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args.config)
        logging_config = config.get('logging', {})
        configure_logging(
            level=args.log_level or logging_config.get('level', 'WARNING'),
            structured=logging_config.get('structured', True),
        )

        if args.command == 'holidays':
            run_holidays(config, args.year)
        elif args.command == 'business-days':
            run_business_days(config, args.year, args.month)
        elif args.command == 'calendar':
            run_calendar(config, args.year, args.month)
        elif args.command == 'report':
            run_report(config, args.items, args.today, args.json)
        elif args.command == 'generate-items':
            run_generate_items(config, args.count, args.today, args.output)
    except ScheduleEngineError as exc:
        logger.error("command failed", exc_info=True, extra={'command': args.command})
        print(f"Error [{exc.code}]: {exc}", file=sys.stderr)
        return 1

    return 0
