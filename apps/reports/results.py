"""Result envelopes returned by the report service.

The host front end expects ``{"success", "message", "model"}`` with
camelCase keys; ``as_dict()`` produces exactly that.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional


@dataclass
class ReportIndexRow:
    id: int
    custom_field_1: str
    done_at_user_editable: Optional[datetime]
    done_by: str
    is_archived: bool
    item_name: Optional[str] = None
    item_id: Optional[int] = None
    template_id: Optional[int] = None

    def as_dict(self):
        return {
            "id": self.id,
            "customField1": self.custom_field_1,
            "doneAtUserEditable": (
                self.done_at_user_editable.isoformat() if self.done_at_user_editable else None
            ),
            "doneBy": self.done_by,
            "itemName": self.item_name,
            "itemId": self.item_id,
            "templateId": self.template_id,
            "isArchived": self.is_archived,
        }


@dataclass
class Paged:
    total: int = 0
    entities: List[ReportIndexRow] = field(default_factory=list)

    def as_dict(self):
        return {
            "total": self.total,
            "entities": [row.as_dict() for row in self.entities],
        }


@dataclass
class OperationDataResult:
    success: bool
    model: Any = None
    message: str = ""

    def as_dict(self):
        return {
            "success": self.success,
            "message": self.message,
            "model": self.model.as_dict() if self.model is not None else None,
        }
