"""RFC 7807 problem details reported by the correspondence backend."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class ProblemDetails(BaseModel):
    """Machine-readable error body (``application/problem+json``).

    The backend adds an ``errors`` map for validation failures; any other
    extension members are kept as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    title: Optional[str] = None
    status: Optional[int] = None
    detail: Optional[str] = None
    instance: Optional[str] = None
    errors: Optional[Dict[str, List[str]]] = None

    @classmethod
    def from_body(cls, body: Any) -> Optional["ProblemDetails"]:
        """Parse a decoded JSON body, returning None if it is not a problem document."""
        if not isinstance(body, dict):
            return None
        if not any(key in body for key in ("detail", "title", "errors")):
            return None
        try:
            return cls.model_validate(body)
        except ValueError:
            return None

    @property
    def message(self) -> str:
        """Best human-readable description of the problem."""
        if self.detail:
            return self.detail
        if self.errors:
            flattened = [
                f"{field}: {reason}"
                for field, reasons in self.errors.items()
                for reason in reasons
            ]
            if self.title:
                return f"{self.title} ({'; '.join(flattened)})"
            return "; ".join(flattened)
        return self.title or "Unknown error"
