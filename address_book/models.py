#!/usr/bin/env python3
"""
Data model for one RandomUser record and a fetched batch of them.
"""

import copy
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .errors import DecodeError


@dataclass(frozen=True)
class UserRecord:
    picture_thumbnail_url: str
    first_name: str
    # The full user object exactly as the API sent it (unmodeled fields included).
    data: Dict[str, Any] = field(repr=False, hash=False)

    @classmethod
    def from_json(cls, obj: Any) -> "UserRecord":
        # Pulls out the two fields the list needs (picture.thumbnail and name.first)
        # and keeps a private copy of everything else for the "Show Info" dump.
        if not isinstance(obj, dict):
            raise DecodeError(f"user record must be a JSON object, got {type(obj).__name__}")

        picture = obj.get("picture")
        name = obj.get("name")
        thumbnail = picture.get("thumbnail") if isinstance(picture, dict) else None
        first = name.get("first") if isinstance(name, dict) else None

        if not isinstance(thumbnail, str):
            raise DecodeError("user record is missing picture.thumbnail")
        if not isinstance(first, str):
            raise DecodeError("user record is missing name.first")

        return cls(
            picture_thumbnail_url=thumbnail,
            first_name=first,
            data=copy.deepcopy(obj),
        )

    def to_json(self) -> str:
        return json.dumps(self.data)


# A batch is an immutable, ordered sequence of records (same order as the API response).
UserBatch = Tuple[UserRecord, ...]
