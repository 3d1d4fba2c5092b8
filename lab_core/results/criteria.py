# lab_core/results/criteria.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_PAGE_NUM = 1
DEFAULT_PAGE_LIMIT = 5


@dataclass(frozen=True)
class ResultCriteria:
    """
    Per-request narrowing options for the result list.
    Every filter is independently optional; the page window always has a value.
    """

    patient_name: Optional[str] = None
    activate_date: Optional[str] = None
    result_date: Optional[str] = None
    patient_id: Optional[str] = None

    page_num: int = DEFAULT_PAGE_NUM
    page_limit: int = DEFAULT_PAGE_LIMIT
