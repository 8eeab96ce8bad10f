"""
Reading and writing of the attribute/data text format.

Responsibilities:
- input decoding (best-effort encoding detection, LF newlines)
- tokenizing lines on whitespace within fixed bounds
- schema declarations (@attribute) and numeric data rows (@data)
- serializing a schema plus numeric table back to the same format
"""

from __future__ import annotations

import math
import os
from typing import List, Optional, Tuple

from charset_normalizer import from_bytes

from . import rules
from .errors import (
    CapacityExceeded,
    FileOpenError,
    FileWriteError,
    InputTooLarge,
    MalformedData,
)
from .models import Attribute, Dataset


def decode_input(raw: bytes) -> Tuple[str, Optional[str]]:
    """
    Decode raw input bytes to text with LF newlines.

    Returns the text and the encoding charset-normalizer detected (None when
    detection gave nothing and UTF-8 was assumed).
    """
    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            # Last resort: keep going with replacement characters
            text = raw.decode("utf-8", errors="replace")

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text, detected


def tokenize(line: str) -> List[str]:
    tokens = line.split()
    if len(tokens) > rules.MAX_TOKENS:
        raise InputTooLarge(
            f"Line has {len(tokens)} tokens; at most {rules.MAX_TOKENS} are supported"
        )
    for token in tokens:
        if len(token) > rules.MAX_TOKEN_LENGTH:
            raise InputTooLarge(
                f"Token '{token[:20]}...' is longer than {rules.MAX_TOKEN_LENGTH} characters"
            )
    return tokens


def _has_marker(line: str, marker: str) -> bool:
    tokens = line.split(None, 1)
    return bool(tokens) and tokens[0].lower() == marker


def read_attribute(line: str, dataset: Dataset) -> Optional[Attribute]:
    """
    Append the attribute declared on `line` to the dataset's schema.

    Declarations with fewer than three tokens are skipped and None is returned.
    """
    tokens = tokenize(line)
    if len(tokens) < 3:
        return None
    if len(dataset.attributes) >= rules.MAX_COLUMNS:
        raise CapacityExceeded(f"More than {rules.MAX_COLUMNS} attributes declared")

    attribute = Attribute(name=tokens[1], declared_type=tokens[2])
    dataset.attributes.append(attribute)
    return attribute


def read_data_row(line: str, dataset: Dataset, line_no: int = 0) -> Optional[List[float]]:
    tokens = tokenize(line)
    if not tokens:
        return None
    if len(dataset.rows) >= rules.MAX_ROWS:
        raise CapacityExceeded(f"More than {rules.MAX_ROWS} data rows")

    expected = len(dataset.attributes)
    if len(tokens) != expected:
        raise MalformedData(
            f"Line {line_no}: expected {expected} values, found {len(tokens)}"
        )

    row: List[float] = []
    for token in tokens:
        try:
            row.append(float(token))
        except ValueError:
            raise MalformedData(f"Line {line_no}: '{token}' is not a number") from None
        if not math.isfinite(row[-1]):
            raise MalformedData(f"Line {line_no}: '{token}' is not a finite number")

    dataset.rows.append(row)
    return row


def parse_arff(text: str) -> Dataset:
    """Single pass over the text: declarations first, then one row per data line."""
    dataset = Dataset()
    in_data = False

    for line_no, line in enumerate(text.split("\n"), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(rules.COMMENT_MARKER):
            continue

        if in_data:
            read_data_row(stripped, dataset, line_no)
        elif _has_marker(stripped, rules.DATA_MARKER):
            in_data = True
        elif _has_marker(stripped, rules.ATTRIBUTE_MARKER):
            read_attribute(stripped, dataset)
        elif _has_marker(stripped, rules.RELATION_MARKER):
            dataset.relation = stripped[len(rules.RELATION_MARKER):].strip()

    return dataset


def read_arff(path: str) -> Tuple[Dataset, Optional[str]]:
    try:
        with open(path, "rb") as fh:
            raw = fh.read()
    except OSError as exc:
        raise FileOpenError(f"Error opening file {path}: {exc.strerror}") from exc

    text, encoding = decode_input(raw)
    return parse_arff(text), encoding


def relation_name(filename: str) -> str:
    name = os.path.basename(filename)
    if name.endswith(rules.RELATION_SUFFIX):
        name = name[: -len(rules.RELATION_SUFFIX)]
    return name


def format_arff(relation: str, attributes: List[Attribute], rows: List[List[float]]) -> str:
    lines = [f"{rules.RELATION_MARKER} {relation}", ""]
    for attr in attributes:
        lines.append(f"{rules.ATTRIBUTE_MARKER} {attr.name} {attr.declared_type}")
    lines.append(rules.DATA_MARKER)

    width = len(attributes)
    for i, row in enumerate(rows):
        if len(row) != width:
            raise MalformedData(f"Row {i}: expected {width} values, found {len(row)}")
        lines.append(rules.VALUE_SEPARATOR.join(rules.FLOAT_FORMAT.format(v) for v in row))

    return "\n".join(lines) + "\n"


def write_arff(filename: str, dataset: Dataset) -> None:
    """Write `dataset` to `filename`; the relation header comes from the filename."""
    text = format_arff(relation_name(filename), dataset.attributes, dataset.rows)
    try:
        with open(filename, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(text)
    except OSError as exc:
        raise FileWriteError(f"Error saving file {filename}: {exc.strerror}") from exc
