# src/csv_to_json/emitter.py
import json
from typing import List, Sequence

INDENT = "    "


def _quote(text: str) -> str:
    # json.dumps escapes quotes, backslashes and control characters
    return json.dumps(text, ensure_ascii=False)


def _render_object(header: Sequence[str], record: Sequence[str]) -> str:
    fields = [f"{INDENT * 2}{_quote(name)}: {_quote(value)}" for name, value in zip(header, record)]
    return f"{INDENT}{{\n" + ",\n".join(fields) + f"\n{INDENT}}}"


def emit(header: Sequence[str], records: List[Sequence[str]]) -> str:
    """
    Render records as an indented JSON array of flat string objects.

    Objects are written field by field in header order rather than through a
    dict so repeated header names survive into the output.
    """
    if not records:
        return "[]\n"
    return "[\n" + ",\n".join(_render_object(header, r) for r in records) + "\n]\n"
