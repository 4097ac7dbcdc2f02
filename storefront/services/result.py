# services/result.py
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from storefront.models.enums import ErrorKind


@dataclass(frozen=True)
class Result:
    """Outcome of a data-access call: a payload on success, a kind and message on failure."""

    success: bool
    payload: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, **payload: Any) -> "Result":
        return cls(success=True, payload=payload)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "Result":
        return cls(success=False, error=message, kind=kind)

    def to_envelope(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, **self.payload}
        return {"success": False, "error": self.error}
