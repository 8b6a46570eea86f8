"""Lesson search: literal, case-insensitive text match plus numeric equality."""
from __future__ import annotations

import re
from dataclasses import dataclass
from numbers import Number
from typing import Any, Mapping, Optional

TEXT_FIELDS = ("subject", "description", "location")
NUMERIC_FIELDS = ("price", "spaces")
NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_number(value: str) -> Optional[float]:
    """Return the numeric value of a well-formed decimal literal, else None."""
    if not NUMBER_PATTERN.fullmatch(value):
        return None
    number = float(value)
    if number != number or number in (float("inf"), float("-inf")):
        return None
    if number.is_integer() and abs(number) < 2**63:
        return int(number)
    return number


@dataclass(frozen=True)
class LessonQuery:
    text: str
    number: Optional[float] = None

    @property
    def escaped(self) -> str:
        return re.escape(self.text)

    @property
    def pattern(self) -> re.Pattern:
        return re.compile(self.escaped, re.IGNORECASE)

    def to_mongo(self) -> dict:
        clauses: list[dict] = [
            {field: {"$regex": self.escaped, "$options": "i"}} for field in TEXT_FIELDS
        ]
        if self.number is not None:
            clauses.extend({field: self.number} for field in NUMERIC_FIELDS)
        return {"$or": clauses}

    def matches(self, doc: Mapping[str, Any]) -> bool:
        pattern = self.pattern
        for field in TEXT_FIELDS:
            value = doc.get(field)
            if isinstance(value, str) and pattern.search(value):
                return True
        if self.number is None:
            return False
        for field in NUMERIC_FIELDS:
            value = doc.get(field)
            if isinstance(value, Number) and not isinstance(value, bool) and value == self.number:
                return True
        return False


def build_query(raw: str | None) -> Optional[LessonQuery]:
    """Build a query from free text; blank input yields None (empty result)."""
    text = (raw or "").strip()
    if not text:
        return None
    return LessonQuery(text=text, number=parse_number(text))
