# lab_core/results/conf.py
from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from lab_core.results.criteria import DEFAULT_PAGE_LIMIT
from lab_core.results.filters import NARROWING_STRATEGIES, UNION


def included_narrowing() -> str:
    value = getattr(settings, "RESULTS_INCLUDED_NARROWING", UNION) or UNION
    if value not in NARROWING_STRATEGIES:
        raise ImproperlyConfigured(
            f"RESULTS_INCLUDED_NARROWING must be one of {sorted(NARROWING_STRATEGIES)}, got {value!r}"
        )
    return value


def default_page_limit() -> int:
    value = int(getattr(settings, "RESULTS_DEFAULT_PAGE_LIMIT", DEFAULT_PAGE_LIMIT) or DEFAULT_PAGE_LIMIT)
    if value < 1:
        raise ImproperlyConfigured("RESULTS_DEFAULT_PAGE_LIMIT must be a positive integer")
    return value
