from __future__ import annotations

from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class Attribute(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    declared_type: str = Field(examples=["numeric"])


class RangeSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    attribute: str
    new_min: float
    new_max: float


class Dataset(BaseModel):
    relation: str = ""
    attributes: List[Attribute] = Field(default_factory=list)
    rows: List[List[float]] = Field(default_factory=list)

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.rows), len(self.attributes)

    def column_index(self, name: str) -> Optional[int]:
        # exact, case-sensitive match
        lookup = {attr.name: i for i, attr in enumerate(self.attributes)}
        return lookup.get(name)

    def column(self, index: int) -> List[float]:
        return [row[index] for row in self.rows]


class MinMaxTable(BaseModel):
    """Per-attribute extrema; column i belongs to attribute i."""

    attributes: List[Attribute]
    minimums: List[float]
    maximums: List[float]

    def as_dataset(self, relation: str = "") -> Dataset:
        return Dataset(
            relation=relation,
            attributes=list(self.attributes),
            rows=[list(self.minimums), list(self.maximums)],
        )


class RunReport(BaseModel):
    input_file: str
    encoding: Optional[str] = None
    rows: int = 0
    columns: int = 0
    class_attribute: str
    normalized: List[str] = Field(default_factory=list)
    minmax_file: str
    normalized_file: str
