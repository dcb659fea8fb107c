import math
from dataclasses import dataclass
from typing import Any, List

from sqlalchemy.orm import Query

# bornes des paramètres de pagination, page * size reste un entier SQL
MAX_PAGE = 10_000_000
MAX_PAGE_SIZE = 100


@dataclass
class PageResult:
    items: List[Any]
    page: int
    size: int
    total: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0


def paginate(query: Query, page: int, size: int) -> PageResult:
    """Zero-based page of ``query``; the query must already be ordered."""
    total = query.order_by(None).count()
    items = query.offset(page * size).limit(size).all()
    return PageResult(items=items, page=page, size=size, total=total)
