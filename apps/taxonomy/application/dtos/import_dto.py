"""
Bulk import DTOs.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from uuid import UUID

CREATED = 'created'
UPDATED = 'updated'
SKIPPED = 'skipped'
ERROR = 'error'


@dataclass
class ImportRowOutcome:
    """Result of importing one row."""
    row: int
    status: str
    name: Optional[str] = None
    category_id: Optional[UUID] = None
    reason: Optional[str] = None


@dataclass
class ImportReport:
    """Per-row outcomes and totals of a bulk import."""
    rows: List[ImportRowOutcome] = field(default_factory=list)

    def add(self, outcome: ImportRowOutcome) -> None:
        self.rows.append(outcome)

    def count(self, status: str) -> int:
        return sum(1 for outcome in self.rows if outcome.status == status)

    @property
    def totals(self) -> Dict[str, Any]:
        return {
            'total': len(self.rows),
            CREATED: self.count(CREATED),
            UPDATED: self.count(UPDATED),
            SKIPPED: self.count(SKIPPED),
            ERROR: self.count(ERROR),
        }


@dataclass
class ImportCategoriesDTO:
    """Rows parsed from an import file, already mapped to category field names."""
    rows: List[Dict[str, Any]]
    update_existing: bool = False
