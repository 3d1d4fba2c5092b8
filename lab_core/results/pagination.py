# lab_core/results/pagination.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from lab_core.results.criteria import DEFAULT_PAGE_LIMIT, DEFAULT_PAGE_NUM
from lab_core.results.document import ResultDocument


@dataclass(frozen=True)
class ResultPage:
    document: ResultDocument
    page_num: int
    page_limit: int
    total: int

    def meta(self) -> dict[str, Any]:
        return {"total": self.total, "pageNum": self.page_num, "pageLimit": self.page_limit}

    def to_json(self) -> dict[str, Any]:
        return self.document.to_json(meta=self.meta())


def page_window(page_num: int, page_limit: int) -> tuple[int, int]:
    return (page_num - 1) * page_limit, page_num * page_limit


def paginate(
    document: ResultDocument,
    page_num: Optional[int] = None,
    page_limit: Optional[int] = None,
    *,
    default_page_limit: int = DEFAULT_PAGE_LIMIT,
) -> ResultPage:
    """
    Slice `data` and `included` with the same numeric window.

    The two collections are cut independently; included profiles are NOT
    re-aligned with the records on the page. Pages past the end are empty.
    """
    page_num = int(page_num or DEFAULT_PAGE_NUM)
    page_limit = int(page_limit or default_page_limit)
    start, end = page_window(page_num, page_limit)

    total = document.total if document.total is not None else len(document.data)
    return ResultPage(
        document=document.replace(
            data=document.data[start:end],
            included=document.included[start:end],
            total=total,
        ),
        page_num=page_num,
        page_limit=page_limit,
        total=total,
    )
