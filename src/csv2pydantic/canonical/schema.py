from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from csv2pydantic.canonical.field import FieldSchema


@dataclass
class CanonicalSchema:
    """
    Ordered column collection, index-aligned with the header row.
    Its length is fixed once built from the header.
    """
    type_name: str
    fields: List[FieldSchema]

    # Inference counters
    rows_read: int = 0
    rows_skipped: int = 0
    raw_metadata: Dict = field(default_factory=dict)

    @classmethod
    def from_headers(cls, type_name: str, headers: Iterable[str]) -> "CanonicalSchema":
        return cls(
            type_name=type_name,
            fields=[FieldSchema.from_header(h) for h in headers],
        )

    def __len__(self) -> int:
        return len(self.fields)

    def rename_mappings(self) -> Dict[str, str]:
        """
        Raw header -> field name, for renamed columns only.
        """
        return {
            f.source_name: f.display_name
            for f in self.fields
            if f.needs_rename
        }

    def to_dict(self) -> Dict:
        return {
            "type_name": self.type_name,
            "rows_read": self.rows_read,
            "rows_skipped": self.rows_skipped,
            "fields": [f.to_dict() for f in self.fields],
            **({"metadata": self.raw_metadata} if self.raw_metadata else {}),
        }
