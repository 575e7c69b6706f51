"""Result envelopes returned by the correspondence handlers."""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from altinn_correspondence.infrastructure.operations import Outcome
from altinn_correspondence.modules.correspondence.domain.models import Receipt
from altinn_correspondence.modules.correspondence.schemas import (
    CorrespondenceOverview,
)


@dataclass(frozen=True)
class CorrespondenceResult(Outcome[Receipt]):
    """Outcome of a send.

    ``cause`` holds the exception behind an unexpected failure so the
    throw-based adapter can chain it.
    """

    cause: Optional[BaseException] = field(default=None, compare=False)

    @property
    def receipt(self) -> Optional[Receipt]:
        return self.value

    @classmethod
    def from_exception(cls, message: str, cause: BaseException) -> "CorrespondenceResult":
        return cls(is_success=False, value=None, error=message, cause=cause)


@dataclass(frozen=True)
class SearchResult(Outcome[List[UUID]]):
    """Outcome of a search; the value is the list of matching ids."""

    @property
    def ids(self) -> List[UUID]:
        return self.value if self.value is not None else []


@dataclass(frozen=True)
class GetResult(Outcome[CorrespondenceOverview]):
    @property
    def overview(self) -> Optional[CorrespondenceOverview]:
        return self.value
