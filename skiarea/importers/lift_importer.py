"""LiftImporter - Bulk import of lift types and lifts from a text file.

File format, one record per line:
    T;<code>;<category>;<capacity>
    L;<liftName>;<typeCode>

Spaces around separators are ignored. Trailing empty fields are dropped
before counting, so "T;C1;Chair;" has three fields and is skipped.

Failure policy:
- The whole file is read before any line is applied; a read failure
  raises ImportReadError and leaves the SkiArea untouched.
- Lines with an unknown tag or too few fields are skipped.
- Any other failure (bad capacity, duplicate type, unknown type) stops
  the import immediately. Lines applied before it stay applied.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from skiarea.constants import ImportConfig
from skiarea.model.errors import CapacityParseError, ImportReadError

if TYPE_CHECKING:
    from skiarea.model.ski_area import SkiArea

logger = logging.getLogger(__name__)


@dataclass
class ImportSummary:
    """Outcome of a completed import.

    Attributes:
        lift_types: Number of lift types defined
        lifts: Number of lifts created
        skipped_lines: 1-based numbers of lines that were ignored
    """

    lift_types: int = 0
    lifts: int = 0
    skipped_lines: list[int] = field(default_factory=list)

    @property
    def applied(self) -> int:
        """Number of records applied to the ski area."""
        return self.lift_types + self.lifts


def split_fields(line: str) -> list[str]:
    """Split an import line into stripped fields.

    Trailing empty fields are removed before stripping, so a line ending
    with the separator does not gain an extra field.

    Args:
        line: Raw line without its newline

    Returns:
        List of stripped fields (at least one, possibly empty).
    """
    fields = line.split(ImportConfig.FIELD_SEPARATOR)
    while len(fields) > 1 and fields[-1] == "":
        fields.pop()
    return [f.strip() for f in fields]


def parse_capacity(value: str, line_number: int) -> int:
    """Parse a capacity field as a base-10 integer.

    Raises:
        CapacityParseError: If value is not an optionally signed run of digits
            or does not fit a signed 32-bit integer.
    """
    if not ImportConfig.INTEGER_PATTERN.fullmatch(value):
        raise CapacityParseError(line_number, value)
    number = int(value)
    if not ImportConfig.INT_MIN <= number <= ImportConfig.INT_MAX:
        raise CapacityParseError(line_number, value)
    return number


class LiftImporter:
    """Feeds lift type and lift records from a file into a SkiArea.

    Example:
        summary = LiftImporter(area=area).read(path="lifts.txt")
        print(summary.skipped_lines)
    """

    def __init__(self, area: "SkiArea") -> None:
        self.area = area

    @staticmethod
    def read_lines(path: str | Path) -> list[str]:
        """Read the whole file into memory.

        Raises:
            ImportReadError: If the file cannot be opened, read or decoded.
        """
        try:
            with open(path, "r", encoding=ImportConfig.ENCODING) as fh:
                # Only \n, \r and \r\n end a line; str.splitlines would also split on
                # form feeds and Unicode separators inside names
                return [line.rstrip("\n") for line in fh]
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read lift file {path}: {e}")
            raise ImportReadError(path, str(e)) from e

    def read(self, path: str | Path) -> ImportSummary:
        """Import every record of a file, in order.

        Args:
            path: Path of the import file

        Returns:
            ImportSummary of the applied and skipped lines.
        """
        lines = self.read_lines(path=path)
        summary = ImportSummary()

        for line_number, line in enumerate(lines, start=1):
            self.apply_line(line=line, line_number=line_number, summary=summary)

        logger.info(
            f"Imported {path}: {summary.lift_types} lift types, {summary.lifts} lifts, "
            f"{len(summary.skipped_lines)} lines skipped"
        )
        return summary

    def apply_line(self, line: str, line_number: int, summary: ImportSummary) -> None:
        """Apply a single line to the ski area, or record it as skipped."""
        fields = split_fields(line=line)
        tag = fields[0]

        if tag == ImportConfig.LIFT_TYPE_TAG and len(fields) >= ImportConfig.MIN_LIFT_TYPE_FIELDS:
            capacity = parse_capacity(value=fields[3], line_number=line_number)
            self.area.define_lift_type(code=fields[1], category=fields[2], capacity=capacity)
            summary.lift_types += 1
        elif tag == ImportConfig.LIFT_TAG and len(fields) >= ImportConfig.MIN_LIFT_FIELDS:
            self.area.create_lift(name=fields[1], type_code=fields[2])
            summary.lifts += 1
        else:
            logger.debug(f"Line {line_number} skipped: {line!r}")
            summary.skipped_lines.append(line_number)
