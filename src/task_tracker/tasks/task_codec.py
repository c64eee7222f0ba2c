# src/task_tracker/tasks/task_codec.py

r"""
One-line record format for tasks.

    id;description;status;created_at;updated_at

Text fields escape the delimiter and line breaks with a backslash:

    \\  -> backslash
    \;  -> ';'
    \n  -> newline
    \r  -> carriage return

Any other backslash is literal, including one at the end of a field, so a
description like C:\temp\x needs no escaping. On write, a backslash is
doubled only where it would otherwise be read back as one of the sequences
above. Text without ';' or line breaks is therefore written verbatim and
plain files decode and re-encode byte for byte, unless they happen to
contain one of the four sequences literally.
"""

from __future__ import annotations

import re

from ..errors import ParseError
from .task_models import Task, TaskStatus

DELIMITER = ";"
ESCAPE = "\\"
FIELD_COUNT = 5

_ESCAPES = {
    ESCAPE: ESCAPE,
    DELIMITER: DELIMITER,
    "\n": "n",
    "\r": "r",
}
_UNESCAPES = {v: k for k, v in _ESCAPES.items()}

# Characters that, right after a literal backslash, would make it read back as an escape.
_AMBIGUOUS_AFTER_ESCAPE = frozenset(_UNESCAPES) | frozenset(_ESCAPES)

# Canonical ASCII integers only, so re-encoding never rewrites the id.
_ID_RE = re.compile(r"0|-?[1-9][0-9]*")


def escape_field(text: str) -> str:
    out: list[str] = []
    for i, ch in enumerate(text):
        if ch == ESCAPE:
            following = text[i + 1] if i + 1 < len(text) else None
            if following is None or following in _AMBIGUOUS_AFTER_ESCAPE:
                out.append(ESCAPE + ESCAPE)
            else:
                out.append(ESCAPE)
            continue
        code = _ESCAPES.get(ch)
        out.append(ESCAPE + code if code is not None else ch)
    return "".join(out)


def unescape_field(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == ESCAPE and i + 1 < len(text) and text[i + 1] in _UNESCAPES:
            out.append(_UNESCAPES[text[i + 1]])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def split_fields(line: str) -> list[str]:
    """Split on unescaped delimiters and unescape every field."""
    raw_fields: list[str] = []
    current: list[str] = []
    escaped = False
    for ch in line:
        if escaped:
            current.append(ch)
            escaped = False
        elif ch == ESCAPE:
            current.append(ch)
            escaped = True
        elif ch == DELIMITER:
            raw_fields.append("".join(current))
            current = []
        else:
            current.append(ch)
    raw_fields.append("".join(current))
    return [unescape_field(f) for f in raw_fields]


def encode_task(task: Task) -> str:
    return DELIMITER.join(
        (
            str(task.id),
            escape_field(task.description),
            task.status.value,
            escape_field(task.created_at),
            escape_field(task.updated_at),
        )
    )


def decode_task(line: str, *, line_no: int | None = None) -> Task:
    fields = split_fields(line)

    if len(fields) != FIELD_COUNT:
        raise ParseError(
            f"expected {FIELD_COUNT} fields, got {len(fields)}", line=line, line_no=line_no
        )

    raw_id, description, raw_status, created_at, updated_at = fields

    if not _ID_RE.fullmatch(raw_id):
        raise ParseError(f"task id is not an integer: {raw_id!r}", line=line, line_no=line_no)
    task_id = int(raw_id)

    try:
        status = TaskStatus.parse(raw_status)
    except ValueError:
        raise ParseError(f"unknown status: {raw_status!r}", line=line, line_no=line_no) from None

    return Task(
        id=task_id,
        description=description,
        status=status,
        created_at=created_at,
        updated_at=updated_at,
    )
