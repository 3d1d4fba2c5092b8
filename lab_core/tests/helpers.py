# lab_core/tests/helpers.py
from lab_core.results.document import ProfileRecord, ResultDocument, ResultRecord


def results_url(org):
    return f"/api/v1/organisations/{org}/results/"


def profile_results_url(org, profile_id):
    return f"/api/v1/organisations/{org}/profiles/{profile_id}/results/"


def profile_result_url(org, profile_id, sample_id):
    return f"/api/v1/organisations/{org}/profiles/{profile_id}/results/{sample_id}/"


def doc(data=(), included=()):
    """
    data: (record_id, profile_id[, activate_time[, result_time]]) tuples
    included: (profile_id[, name]) tuples
    """
    records = []
    for row in data:
        rid, pid, *rest = row
        activate_time = rest[0] if len(rest) > 0 else None
        result_time = rest[1] if len(rest) > 1 else None
        records.append(ResultRecord(id=rid, profile_id=pid, activate_time=activate_time, result_time=result_time))

    profiles = []
    for row in included:
        pid, *rest = row
        profiles.append(ProfileRecord(id=pid, attributes={"name": rest[0]} if rest else {}))

    return ResultDocument(data=tuple(records), included=tuple(profiles))


def ids(items):
    return [item.id for item in items]
