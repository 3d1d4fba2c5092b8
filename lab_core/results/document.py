# lab_core/results/document.py
"""
JSON:API-style result document shared by the search, filter and pagination stages.

Wire shape:

    {
      "data": [
        {"id": ..., "type": "sample",
         "attributes": {"sampleId", "resultType", "activateTime", "resultTime", "result"},
         "relationships": {"profile": {"data": {"id": ..., "type": "profile"}}}}
      ],
      "included": [
        {"id": ..., "type": "profile", "attributes": {"name": ..., ...}}
      ]
    }

Records are immutable; every stage returns a new ResultDocument.
The profile relationship is a lookup key into `included`, never an embedded object.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping, Optional

SAMPLE_TYPE = "sample"
PROFILE_TYPE = "profile"


@dataclass(frozen=True)
class ProfileRecord:
    id: Any
    attributes: Mapping[str, Any] = field(default_factory=dict)

    TYPE: ClassVar[str] = PROFILE_TYPE

    @property
    def name(self) -> Optional[str]:
        return self.attributes.get("name")

    def to_json(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.TYPE, "attributes": dict(self.attributes)}

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "ProfileRecord":
        return cls(id=payload.get("id"), attributes=dict(payload.get("attributes") or {}))


@dataclass(frozen=True)
class ResultRecord:
    id: Any
    profile_id: Any = None
    sample_id: Any = None
    result_type: Any = None
    activate_time: Any = None
    result_time: Any = None
    result: Any = None

    TYPE: ClassVar[str] = SAMPLE_TYPE

    def attributes(self) -> dict[str, Any]:
        return {
            "sampleId": self.sample_id,
            "resultType": self.result_type,
            "activateTime": self.activate_time,
            "resultTime": self.result_time,
            "result": self.result,
        }

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.TYPE,
            "attributes": self.attributes(),
            "relationships": {
                "profile": {"data": {"id": self.profile_id, "type": PROFILE_TYPE}},
            },
        }

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "ResultRecord":
        attrs = payload.get("attributes") or {}
        profile_ref = ((payload.get("relationships") or {}).get("profile") or {}).get("data") or {}
        return cls(
            id=payload.get("id"),
            profile_id=profile_ref.get("id"),
            sample_id=attrs.get("sampleId"),
            result_type=attrs.get("resultType"),
            activate_time=attrs.get("activateTime"),
            result_time=attrs.get("resultTime"),
            result=attrs.get("result"),
        )


@dataclass(frozen=True)
class ResultDocument:
    data: tuple[ResultRecord, ...] = ()
    included: tuple[ProfileRecord, ...] = ()

    # matched `data` count before pagination; set by the filter pipeline
    total: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "data", tuple(self.data))
        object.__setattr__(self, "included", tuple(self.included))

    def replace(self, **changes: Any) -> "ResultDocument":
        return dataclasses.replace(self, **changes)

    def profile_index(self) -> dict[Any, ProfileRecord]:
        """
        profile id -> ProfileRecord. First occurrence wins on duplicate ids.
        """
        index: dict[Any, ProfileRecord] = {}
        for profile in self.included:
            index.setdefault(profile.id, profile)
        return index

    def referenced_profile_ids(self) -> set:
        return {record.profile_id for record in self.data}

    def to_json(self, *, meta: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        body: dict[str, Any] = {
            "data": [record.to_json() for record in self.data],
            "included": [profile.to_json() for profile in self.included],
        }
        if meta is not None:
            body["meta"] = dict(meta)
        return body

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "ResultDocument":
        """
        Build a document from the wire shape, for fixtures and for reading a
        rendered document back. The search provider builds records from the
        ORM directly.
        """
        return cls(
            data=tuple(ResultRecord.from_json(item) for item in payload.get("data") or []),
            included=tuple(ProfileRecord.from_json(item) for item in payload.get("included") or []),
        )
