import math
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    total_pages: int = 0
    current_page: int = 1
    total_records: int = 0


def paginate(items: Sequence[T], page: int, limit: int) -> Page[T]:
    """Slices an in-memory list the way the lalin API pages its rows."""
    start = (page - 1) * limit
    return Page(
        items=list(items[start:start + limit]),
        total_pages=math.ceil(len(items) / limit) if limit > 0 else 0,
        current_page=page,
        total_records=len(items),
    )
