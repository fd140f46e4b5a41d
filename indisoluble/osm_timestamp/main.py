#!/usr/bin/env python3

import argparse
import logging
import sys

from typing import Any, Dict, Iterator, Optional, TextIO

from .errors import TimestampParseError
from .timestamp import Timestamp, end_of_time, start_of_time
from .timestamp_range import TimestampRange, timestamp_extent


_ARG_INPUT = "input"
_ARG_LOG_LEVEL = "log_level"
_ARG_OUTPUT_FORMAT = "output_format"
_ARG_RANGE = "range"
_ARG_SINCE = "since"
_ARG_SKIP_INVALID = "skip_invalid"
_ARG_SUMMARY = "summary"
_ARG_UNTIL = "until"
_GRP_GENERAL = "General"
_GRP_INPUT_OUTPUT = "Input and output"
_GRP_TIME_WINDOW = "Time window"
_NAME_INPUT = "input"
_NAME_LOG_LEVEL = "log-level"
_NAME_OUTPUT_FORMAT = "output-format"
_NAME_SINCE = "since"
_NAME_SKIP_INVALID = "skip-invalid"
_NAME_SUMMARY = "summary"
_NAME_UNTIL = "until"
_VAL_INPUT = "-"
_VAL_LOG_LEVEL = logging._levelToName[logging.INFO].lower()
_VAL_OUTPUT_FORMAT_ISO = "iso"
_VAL_OUTPUT_FORMAT_SECONDS = "seconds"


def _make_arg_parser() -> argparse.ArgumentParser:
    epilog = f"""
Parameter details
=================

{_GRP_GENERAL}
{len(_GRP_GENERAL) * '-'}
--{_NAME_LOG_LEVEL}: Controls verbosity of log output (debug, info, warning, error, critical).

{_GRP_INPUT_OUTPUT}
{len(_GRP_INPUT_OUTPUT) * '-'}
--{_NAME_INPUT}: File with one timestamp per line in "yyyy-mm-ddThh:mm:ssZ" format, '-' for standard input.
--{_NAME_OUTPUT_FORMAT}: Write kept timestamps as ISO text or as seconds since the epoch.
--{_NAME_SKIP_INVALID}: Reject malformed lines with a warning instead of stopping at the first one.
--{_NAME_SUMMARY}: After the timestamps, write the first and last one kept.

{_GRP_TIME_WINDOW}
{len(_GRP_TIME_WINDOW) * '-'}
--{_NAME_SINCE}: Keep timestamps at or after this one (default: start of time).
--{_NAME_UNTIL}: Keep timestamps at or before this one (default: end of time).

Example usage
=============
osm-timestamp \\
    --{_NAME_INPUT} timestamps.txt \\
    --{_NAME_SINCE} 2016-01-01T00:00:00Z \\
    --{_NAME_UNTIL} 2016-12-31T23:59:59Z \\
    --{_NAME_OUTPUT_FORMAT} {_VAL_OUTPUT_FORMAT_SECONDS} \\
    --{_NAME_SUMMARY}
"""
    parser = argparse.ArgumentParser(
        description="Filter and convert OSM timestamps",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    general_group = parser.add_argument_group(_GRP_GENERAL)
    general_group.add_argument(
        f"--{_NAME_LOG_LEVEL}",
        type=str,
        choices=[
            name.lower() for name in logging._levelToName.values() if name != "NOTSET"
        ],
        default=_VAL_LOG_LEVEL,
        dest=_ARG_LOG_LEVEL,
        help=f"Logging level (default: {_VAL_LOG_LEVEL})",
    )
    io_group = parser.add_argument_group(_GRP_INPUT_OUTPUT)
    io_group.add_argument(
        f"--{_NAME_INPUT}",
        type=str,
        default=_VAL_INPUT,
        dest=_ARG_INPUT,
        help=f"Input file (default: {_VAL_INPUT}, standard input)",
    )
    io_group.add_argument(
        f"--{_NAME_OUTPUT_FORMAT}",
        type=str,
        choices=[_VAL_OUTPUT_FORMAT_ISO, _VAL_OUTPUT_FORMAT_SECONDS],
        default=_VAL_OUTPUT_FORMAT_ISO,
        dest=_ARG_OUTPUT_FORMAT,
        help=f"Output format (default: {_VAL_OUTPUT_FORMAT_ISO})",
    )
    io_group.add_argument(
        f"--{_NAME_SKIP_INVALID}",
        action="store_true",
        dest=_ARG_SKIP_INVALID,
        help="Skip malformed timestamps instead of failing",
    )
    io_group.add_argument(
        f"--{_NAME_SUMMARY}",
        action="store_true",
        dest=_ARG_SUMMARY,
        help="Write first and last kept timestamps",
    )
    window_group = parser.add_argument_group(_GRP_TIME_WINDOW)
    window_group.add_argument(
        f"--{_NAME_SINCE}",
        type=str,
        dest=_ARG_SINCE,
        help="Lower bound, inclusive (default: start of time)",
    )
    window_group.add_argument(
        f"--{_NAME_UNTIL}",
        type=str,
        dest=_ARG_UNTIL,
        help="Upper bound, inclusive (default: end of time)",
    )

    return parser


def _parse_bound(name: str, text: str) -> Optional[Timestamp]:
    try:
        return Timestamp(text)
    except TimestampParseError as ex:
        logging.error("Invalid --%s value: %s", name, ex.internal_details)
        return None


def _derive_range(args: Dict[str, Any]) -> Optional[TimestampRange]:
    if args[_ARG_SINCE] is None:
        since = start_of_time()
        logging.info("Lower bound not provided, using start of time")
    else:
        since = _parse_bound(_NAME_SINCE, args[_ARG_SINCE])
        if since is None:
            return None

    if args[_ARG_UNTIL] is None:
        until = end_of_time()
        logging.info("Upper bound not provided, using end of time")
    else:
        until = _parse_bound(_NAME_UNTIL, args[_ARG_UNTIL])
        if until is None:
            return None

    try:
        return TimestampRange(since, until)
    except ValueError as ex:
        logging.error("Invalid time window: %s", ex)
        return None


def _normalize_config(args: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    config = {
        key: value
        for key, value in args.items()
        if key not in (_ARG_SINCE, _ARG_UNTIL)
    }

    time_range = _derive_range(args)
    if time_range is None:
        return None

    config[_ARG_RANGE] = time_range

    return config


def _iter_timestamps(lines: TextIO, skip_invalid: bool) -> Iterator[Timestamp]:
    for line_number, line in enumerate(lines, start=1):
        text = line.rstrip("\r\n")
        if not text:
            continue

        try:
            yield Timestamp(text)
        except TimestampParseError as ex:
            if not skip_invalid:
                ex.internal_details = f"Line {line_number}: {ex.internal_details}"
                raise

            logging.warning("Line %d rejected: %s", line_number, ex.internal_details)


def _format_timestamp(timestamp: Timestamp, output_format: str) -> str:
    if output_format == _VAL_OUTPUT_FORMAT_SECONDS:
        return str(timestamp.seconds_since_epoch())

    return timestamp.to_iso()


def _process(lines: TextIO, out: TextIO, config: Dict[str, Any]) -> bool:
    time_range = config[_ARG_RANGE]
    output_format = config[_ARG_OUTPUT_FORMAT]

    kept = []
    try:
        for timestamp in _iter_timestamps(lines, config[_ARG_SKIP_INVALID]):
            if not time_range.contains(timestamp):
                logging.debug("Timestamp %s outside of %s", timestamp, time_range)
                continue

            kept.append(timestamp)
            out.write(_format_timestamp(timestamp, output_format) + "\n")
    except TimestampParseError as ex:
        logging.error("Failed to parse input: %s", ex.internal_details)
        return False

    logging.info("Kept %d timestamps", len(kept))

    if config[_ARG_SUMMARY]:
        extent = timestamp_extent(kept)
        if extent is None:
            logging.info("No timestamps kept, nothing to summarize")
        else:
            out.write(f"first: {_format_timestamp(extent.first, output_format)}\n")
            out.write(f"last: {_format_timestamp(extent.last, output_format)}\n")

    return True


def _main(args: Dict[str, Any]) -> int:
    # Set up logging
    numeric_level = getattr(logging, args[_ARG_LOG_LEVEL].upper())
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(levelname)s - %(module)s.%(funcName)s - %(message)s",
    )

    # Complete config
    config = _normalize_config(args)
    if not config:
        return 1

    # Convert timestamps
    if config[_ARG_INPUT] == _VAL_INPUT:
        success = _process(sys.stdin, sys.stdout, config)
    else:
        try:
            with open(config[_ARG_INPUT], "r", encoding="ascii") as input_file:
                success = _process(input_file, sys.stdout, config)
        except (OSError, UnicodeDecodeError) as ex:
            logging.error("Failed to read %s: %s", config[_ARG_INPUT], ex)
            return 1

    return 0 if success else 1


def main():
    args = _make_arg_parser().parse_args()
    sys.exit(_main(vars(args)))
