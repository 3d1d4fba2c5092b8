# lab_core/results/tests/test_document_model.py
from datetime import datetime, timezone

from lab_core.results.document import ProfileRecord, ResultDocument, ResultRecord


def _payload():
    return {
        "data": [
            {
                "id": "r1",
                "type": "sample",
                "attributes": {
                    "sampleId": "S-1",
                    "resultType": "CBC",
                    "activateTime": "2024-02-01T10:00:00Z",
                    "resultTime": None,
                    "result": {"hb": 12.5},
                },
                "relationships": {"profile": {"data": {"id": "pA", "type": "profile"}}},
            }
        ],
        "included": [
            {"id": "pA", "type": "profile", "attributes": {"name": "Alice", "email": "a@example.com"}},
        ],
    }


def test_from_json_reads_attributes_and_relationship():
    d = ResultDocument.from_json(_payload())

    record = d.data[0]
    assert record.id == "r1"
    assert record.profile_id == "pA"
    assert record.sample_id == "S-1"
    assert record.result == {"hb": 12.5}
    assert d.included[0].name == "Alice"


def test_to_json_round_trips_wire_shape():
    payload = _payload()
    assert ResultDocument.from_json(payload).to_json() == payload


def test_to_json_adds_meta_only_when_given():
    d = ResultDocument()
    assert d.to_json() == {"data": [], "included": []}
    assert d.to_json(meta={"total": 0})["meta"] == {"total": 0}


def test_missing_relationship_reads_as_none():
    record = ResultRecord.from_json({"id": "r9", "attributes": {}})
    assert record.profile_id is None
    assert record.to_json()["relationships"]["profile"]["data"]["id"] is None


def test_profile_index_and_referenced_ids():
    d = ResultDocument(
        data=[ResultRecord(id="r1", profile_id="p1"), ResultRecord(id="r2", profile_id="p2")],
        included=[
            ProfileRecord(id="p1", attributes={"name": "first"}),
            ProfileRecord(id="p1", attributes={"name": "dup"}),
            ProfileRecord(id="p3"),
        ],
    )

    index = d.profile_index()
    assert index["p1"].name == "first"
    assert set(index) == {"p1", "p3"}
    assert d.referenced_profile_ids() == {"p1", "p2"}


def test_lists_are_frozen_to_tuples():
    d = ResultDocument(data=[ResultRecord(id="r1")], included=[])
    assert isinstance(d.data, tuple)
    assert isinstance(d.included, tuple)


def test_replace_returns_new_document():
    d = ResultDocument(data=[ResultRecord(id="r1", activate_time=datetime(2024, 1, 1, tzinfo=timezone.utc))])

    narrowed = d.replace(data=(), total=0)

    assert len(d.data) == 1
    assert d.total is None
    assert narrowed.data == ()
    assert narrowed.total == 0
