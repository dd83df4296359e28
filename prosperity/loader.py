"""
CSV loading for the prosperity chart.

The chart only ever sees the validated row list; everything that can go wrong
while reading the file is sorted into three buckets:

    DataLoadError   the file could not be read at all
    DataParseError  the document is malformed (no partial rendering)
    warnings        a single row was unusable and has been dropped
"""
import csv
import io
import logging
from pathlib import Path
from typing import List, Sequence

from .entities import LoadResult, RawRecord

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = (
    "Civilization",
    "Calendar System",
    "Calendar Type",
    "Start Date",
    "End Date",
    "Historical Period",
    "Prosperity Score",
    "Key Events",
)


class DatasetError(Exception):
    """Base class for errors that prevent the chart from rendering."""


class DataLoadError(DatasetError):
    pass


class DataParseError(DatasetError):
    def __init__(self, problems: Sequence[str]):
        self.problems = list(problems)
        super().__init__(f"CSV parsing errors: {', '.join(self.problems)}")


def read_source(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise DataLoadError(f"Failed to load data: {e}") from e


def _is_blank(row: List[str]) -> bool:
    return not any(cell.strip() for cell in row)


def parse_rows(text: str) -> LoadResult:
    """Parse CSV text into RawRecords, dropping rows that do not fit the header."""
    reader = csv.reader(io.StringIO(text), strict=True)
    lines = []
    try:
        for row in reader:
            if not _is_blank(row):
                lines.append((reader.line_num, row))
    except csv.Error as e:
        raise DataParseError([f"line {reader.line_num}: {e}"]) from e

    if not lines:
        raise DataParseError(["document is empty"])

    _, header = lines[0]
    header = [name.strip() for name in header]
    missing = [c for c in REQUIRED_COLUMNS if c not in header]
    if missing:
        raise DataParseError([f"missing column '{c}'" for c in missing])

    result = LoadResult()
    for line_num, row in lines[1:]:
        if len(row) != len(header):
            result.warnings.append(
                f"Row {line_num}: expected {len(header)} fields, found {len(row)}; row skipped"
            )
            continue
        try:
            result.rows.append(RawRecord.from_row(dict(zip(header, row))))
        except ValueError as e:
            result.warnings.append(f"Row {line_num}: {e}; row skipped")

    for warning in result.warnings:
        logger.warning(warning)
    return result


def load_dataset(path: str) -> LoadResult:
    logger.info(f"Loading data from: {path}")
    result = parse_rows(read_source(path))
    logger.info(f"Loaded {len(result.rows)} rows ({len(result.warnings)} skipped)")
    return result
