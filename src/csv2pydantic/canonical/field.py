from dataclasses import dataclass, field
from typing import Any, Dict, List

from csv2pydantic.inference.type_candidates import TypeCandidate
from csv2pydantic.utils.naming import sanitize_identifier

# Type used for columns that never held a value
EMPTY_PLACEHOLDER_TYPE = "None"


@dataclass
class FieldSchema:
    """
    Inference state for one CSV column.

    remaining_candidates only ever shrinks and never empties (STRING
    accepts everything). saw_empty_value makes the final type Optional;
    without saw_any_value the column resolves to the None placeholder.
    """
    display_name: str
    source_name: str
    remaining_candidates: List[TypeCandidate] = field(default_factory=TypeCandidate.all)

    saw_empty_value: bool = False
    saw_any_value: bool = False

    @classmethod
    def from_header(cls, raw: str) -> "FieldSchema":
        return cls(display_name=sanitize_identifier(raw), source_name=raw)

    @property
    def needs_rename(self) -> bool:
        return self.display_name != self.source_name

    def update_for(self, token: str) -> None:
        if not token:
            self.saw_empty_value = True
            return

        self.saw_any_value = True
        self.remaining_candidates = [
            candidate
            for candidate in self.remaining_candidates
            if candidate.can_parse(token)
        ]

    def resolved_candidate(self) -> TypeCandidate:
        """
        Narrowest surviving candidate in priority order.
        """
        for candidate in TypeCandidate.all():
            if candidate in self.remaining_candidates:
                return candidate
        return TypeCandidate.STRING

    def resolve(self) -> str:
        if not self.saw_any_value:
            return EMPTY_PLACEHOLDER_TYPE
        return self.resolved_candidate().type_name(self.saw_empty_value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.display_name,
            "source_name": self.source_name,
            "type": self.resolve(),
            "optional": self.saw_empty_value or not self.saw_any_value,
            "empty": not self.saw_any_value,
            "candidates": [c.value for c in self.remaining_candidates],
        }
