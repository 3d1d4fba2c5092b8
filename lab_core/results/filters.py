# lab_core/results/filters.py
"""
Post-fetch filter pipeline for result documents.

Each step is a pure function (document, criterion) -> document and the
pipeline applies the present criteria in a fixed order:

    patient name -> activation date -> result date -> patient id

Order matters: the date steps rebuild `included` from the `data` that is left
at that point, not from the original document.
Zero matches are a valid outcome; nothing here raises.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from django.utils.dateparse import parse_date, parse_datetime

from lab_core.results.criteria import ResultCriteria
from lab_core.results.document import ResultDocument

DAY_FORMAT = "%m/%d/%Y"

# How the date steps narrow `included` once `data` is filtered.
UNION = "union"
PER_RECORD = "per_record"
NARROWING_STRATEGIES = frozenset({UNION, PER_RECORD})


def _present(value: Any) -> bool:
    return value not in (None, "")


def day_key(value: Any) -> Optional[str]:
    """
    Calendar day of `value` as MM/DD/YYYY, or None if it can't be read as a day.
    Time-of-day and UTC offset are dropped, never converted.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.strftime(DAY_FORMAT)
    if isinstance(value, date):
        return value.strftime(DAY_FORMAT)

    raw = str(value).strip()
    if not raw:
        return None

    try:
        dt = parse_datetime(raw)
        if dt is not None:
            return dt.strftime(DAY_FORMAT)
        d = parse_date(raw)
        if d is not None:
            return d.strftime(DAY_FORMAT)
    except ValueError:
        # well-formed but impossible, e.g. 2024-02-30
        return None

    try:
        return datetime.strptime(raw, DAY_FORMAT).strftime(DAY_FORMAT)
    except ValueError:
        return None


def filter_by_patient_name(document: ResultDocument, patient_name: str) -> ResultDocument:
    """
    Keep profiles named `patient_name`; keep results of the FIRST such profile only.
    Same-named profiles after the first stay in `included` but contribute no results.
    """
    included = tuple(p for p in document.included if p.name == patient_name)
    if not included:
        return document.replace(data=(), included=())

    first_id = included[0].id
    data = tuple(r for r in document.data if r.profile_id == first_id)
    return document.replace(data=data, included=included)


def _narrow_included(document: ResultDocument, data: tuple, narrowing: str) -> tuple:
    if not data:
        return ()

    if narrowing == PER_RECORD:
        # Narrow once per surviving record. With more than one referenced
        # profile this empties `included`.
        included = document.included
        for record in data:
            included = tuple(p for p in included if p.id == record.profile_id)
        return included

    referenced = document.replace(data=data).referenced_profile_ids()
    return tuple(p for p in document.included if p.id in referenced)


def _filter_by_day(document: ResultDocument, criterion: Any, attr: str, narrowing: str) -> ResultDocument:
    target = day_key(criterion)
    if target is None:
        return document.replace(data=(), included=())

    data = tuple(r for r in document.data if day_key(getattr(r, attr)) == target)
    return document.replace(data=data, included=_narrow_included(document, data, narrowing))


def filter_by_activate_date(document: ResultDocument, activate_date: Any, *, narrowing: str = UNION) -> ResultDocument:
    return _filter_by_day(document, activate_date, "activate_time", narrowing)


def filter_by_result_date(document: ResultDocument, result_date: Any, *, narrowing: str = UNION) -> ResultDocument:
    return _filter_by_day(document, result_date, "result_time", narrowing)


def filter_by_patient_id(document: ResultDocument, patient_id: Any) -> ResultDocument:
    profile = document.profile_index().get(patient_id)
    return document.replace(
        data=tuple(r for r in document.data if r.profile_id == patient_id),
        included=(profile,) if profile is not None else (),
    )


def apply_filters(document: ResultDocument, criteria: ResultCriteria, *, narrowing: str = UNION) -> ResultDocument:
    """
    Run every present criterion in order and stamp `total` on the result.
    """
    if _present(criteria.patient_name):
        document = filter_by_patient_name(document, criteria.patient_name)

    if _present(criteria.activate_date):
        document = filter_by_activate_date(document, criteria.activate_date, narrowing=narrowing)

    if _present(criteria.result_date):
        document = filter_by_result_date(document, criteria.result_date, narrowing=narrowing)

    if _present(criteria.patient_id):
        document = filter_by_patient_id(document, criteria.patient_id)

    return document.replace(total=len(document.data))
