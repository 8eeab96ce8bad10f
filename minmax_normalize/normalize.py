"""
Column statistics and min-max rescaling.

Responsibilities:
- per-column minimum / maximum over every attribute (class included)
- linear rescaling of selected columns into caller-given ranges
- leaving every other column (and the class attribute) untouched
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from .errors import DegenerateRange, EmptyDataset, InvalidArgument, UnknownAttribute
from .models import Dataset, MinMaxTable, RangeSpec


def compute_min(dataset: Dataset, column: int) -> float:
    if not dataset.rows:
        raise EmptyDataset("Dataset has no rows; min is undefined")
    return min(dataset.column(column))


def compute_max(dataset: Dataset, column: int) -> float:
    if not dataset.rows:
        raise EmptyDataset("Dataset has no rows; max is undefined")
    return max(dataset.column(column))


def compute_min_max(dataset: Dataset) -> MinMaxTable:
    columns = range(len(dataset.attributes))
    return MinMaxTable(
        attributes=list(dataset.attributes),
        minimums=[compute_min(dataset, i) for i in columns],
        maximums=[compute_max(dataset, i) for i in columns],
    )


def rescale(value: float, old_min: float, old_max: float, new_min: float, new_max: float) -> float:
    return (value - old_min) * (new_max - new_min) / (old_max - old_min) + new_min


def _resolve_ranges(
    dataset: Dataset, class_attribute: str, ranges: Iterable[RangeSpec]
) -> Dict[int, RangeSpec]:
    by_column: Dict[int, RangeSpec] = {}
    for spec in ranges:
        if spec.attribute == class_attribute:
            raise InvalidArgument(
                f"Class attribute {class_attribute} cannot be normalized"
            )
        index = dataset.column_index(spec.attribute)
        if index is None:
            raise UnknownAttribute(spec.attribute)
        by_column[index] = spec
    return by_column


def normalize_dataset(
    dataset: Dataset,
    stats: MinMaxTable,
    class_attribute: str,
    ranges: Iterable[RangeSpec],
) -> Dataset:
    """
    Return a new Dataset with each ranged column rescaled.

    Every check runs before any value is computed, so a failure leaves
    nothing half-normalized. The input dataset is not modified.
    """
    by_column = _resolve_ranges(dataset, class_attribute, ranges)

    for index, spec in by_column.items():
        old_min, old_max = stats.minimums[index], stats.maximums[index]
        if old_max == old_min:
            raise DegenerateRange(spec.attribute, old_min)

    new_rows: List[List[float]] = [list(row) for row in dataset.rows]
    for index, spec in by_column.items():
        old_min, old_max = stats.minimums[index], stats.maximums[index]
        for row in new_rows:
            row[index] = rescale(row[index], old_min, old_max, spec.new_min, spec.new_max)

    return Dataset(
        relation=dataset.relation,
        attributes=list(dataset.attributes),
        rows=new_rows,
    )
