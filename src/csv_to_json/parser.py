# src/csv_to_json/parser.py
import re
from typing import List, Tuple

from .errors import RowShapeMismatch

_LINE_BREAK = re.compile(r"\r\n|\n")


def split_lines(raw_text: str) -> List[str]:
    return _LINE_BREAK.split(raw_text)


def parse(raw_text: str, delimiter: str = ",", trim_values: bool = False) -> Tuple[List[str], List[List[str]]]:
    """
    Split delimited text into (header, records).

    The first line is always the header and its names are always trimmed.
    Blank or whitespace-only data lines are skipped. Splitting is a plain
    substring split; quoted fields are not recognised.

    Raises RowShapeMismatch on the first data row whose field count differs
    from the header's. Nothing is returned in that case.
    """
    lines = split_lines(raw_text)
    header = [name.strip() for name in lines[0].split(delimiter)]

    records = []
    for line in lines[1:]:
        if not line.strip():
            continue
        values = line.split(delimiter)
        if len(values) != len(header):
            # header is line 1, skipped blank lines do not count
            raise RowShapeMismatch(len(records) + 2, len(header), len(values))
        if trim_values:
            values = [v.strip() for v in values]
        records.append(values)

    return header, records
