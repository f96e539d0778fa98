# -*- coding: utf-8 -*-
# s3post - Signed Amazon S3 POST policies for browser uploads,
# (C) 2025 s3post contributors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
s3post.policy
~~~~~~~~~~~~~

This module contains :class:`Policy <Policy>` which builds the POST policy
document a browser sends along with a direct upload to S3. Condition
elements and their matching rules are described at
https://docs.aws.amazon.com/AmazonS3/latest/API/sigv4-HTTPPOSTConstructPolicy.html

    >>> policy = Policy(datetime(2015, 12, 30, 12, tzinfo=timezone.utc))
    >>> policy.set_condition(ConditionKey.BUCKET, "sigv4examplebucket")
    >>> policy.set_condition(
    ...     ConditionKey.KEY, "user/user1/", ConditionMatch.STARTS_WITH,
    ... )
    >>> policy.set_range_condition(
    ...     ConditionKey.CONTENT_LENGTH_RANGE, 0, 10485760,
    ... )
    >>> policy.serialize()

"""

from __future__ import absolute_import, annotations

import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Iterable, Iterator, Union

from .error import PolicyParseError, PolicySerializationError
from .helpers import check_uint64
from .time import from_iso8601utc, to_iso8601utc

AWS_V4_SIGNATURE_ALGORITHM = "AWS4-HMAC-SHA256"

_STARTS_WITH = "starts-with"
_EQ = "eq"


class ConditionKey(str):
    """
    Name of a form field a condition applies to. Well-known names are
    available as class attributes; any other name, e.g. ``x-amz-meta-uuid``,
    is accepted as is.
    """
    __slots__ = ()

    ACL: ClassVar[ConditionKey]
    BUCKET: ClassVar[ConditionKey]
    CONTENT_LENGTH_RANGE: ClassVar[ConditionKey]
    CACHE_CONTROL: ClassVar[ConditionKey]
    CONTENT_TYPE: ClassVar[ConditionKey]
    CONTENT_DISPOSITION: ClassVar[ConditionKey]
    CONTENT_ENCODING: ClassVar[ConditionKey]
    EXPIRES: ClassVar[ConditionKey]
    KEY: ClassVar[ConditionKey]
    SUCCESS_ACTION_REDIRECT: ClassVar[ConditionKey]
    REDIRECT: ClassVar[ConditionKey]
    SUCCESS_ACTION_STATUS: ClassVar[ConditionKey]
    AMZ_ALGORITHM: ClassVar[ConditionKey]
    AMZ_CREDENTIAL: ClassVar[ConditionKey]
    AMZ_DATE: ClassVar[ConditionKey]
    AMZ_SECURITY_TOKEN: ClassVar[ConditionKey]

    def __repr__(self) -> str:
        return f"ConditionKey({str.__repr__(self)})"


ConditionKey.ACL = ConditionKey("acl")
ConditionKey.BUCKET = ConditionKey("bucket")
ConditionKey.CONTENT_LENGTH_RANGE = ConditionKey("content-length-range")
ConditionKey.CACHE_CONTROL = ConditionKey("Cache-Control")
ConditionKey.CONTENT_TYPE = ConditionKey("Content-Type")
ConditionKey.CONTENT_DISPOSITION = ConditionKey("Content-Disposition")
ConditionKey.CONTENT_ENCODING = ConditionKey("Content-Encoding")
ConditionKey.EXPIRES = ConditionKey("Expires")
ConditionKey.KEY = ConditionKey("key")
ConditionKey.SUCCESS_ACTION_REDIRECT = ConditionKey("success_action_redirect")
ConditionKey.REDIRECT = ConditionKey("redirect")
ConditionKey.SUCCESS_ACTION_STATUS = ConditionKey("success_action_status")
ConditionKey.AMZ_ALGORITHM = ConditionKey("x-amz-algorithm")
ConditionKey.AMZ_CREDENTIAL = ConditionKey("x-amz-credential")
ConditionKey.AMZ_DATE = ConditionKey("x-amz-date")
ConditionKey.AMZ_SECURITY_TOKEN = ConditionKey("x-amz-security-token")


class ConditionMatch(Enum):
    """How a form field is matched against a condition."""

    # {"acl": "public-read"}
    EXACT = "exact"
    # ["starts-with", "$key", "user/user1/"]
    STARTS_WITH = "starts-with"
    # ["starts-with", "$success_action_redirect", ""]
    ANY = "any"
    # ["content-length-range", "1048579", "10485760"]
    RANGE = "range"


def _to_key(key: str) -> ConditionKey:
    """Convert key to ConditionKey."""
    if not isinstance(key, str):
        raise ValueError("condition key must be str type")
    if not key:
        raise ValueError("condition key cannot be empty")
    return key if isinstance(key, ConditionKey) else ConditionKey(key)


@dataclass(frozen=True)
class Condition:
    """
    Exact, starts-with or any-content condition of a form field. Value of
    any-content condition is always empty.
    """

    key: ConditionKey
    value: str
    match: ConditionMatch = ConditionMatch.EXACT

    def __post_init__(self):
        object.__setattr__(self, "key", _to_key(self.key))
        if not isinstance(self.match, ConditionMatch):
            raise ValueError("match must be ConditionMatch type")
        if self.match == ConditionMatch.RANGE:
            raise ValueError(
                "range match is unsupported for condition; "
                "use RangeCondition instead",
            )
        if not isinstance(self.value, str):
            raise ValueError("condition value must be str type")
        if self.match == ConditionMatch.ANY:
            object.__setattr__(self, "value", "")

    def to_json(self) -> dict[str, str] | list[str]:
        """Convert to JSON compatible value."""
        if self.match == ConditionMatch.EXACT:
            return {str(self.key): self.value}
        return [_STARTS_WITH, "$" + self.key, self.value]


@dataclass(frozen=True)
class RangeCondition:
    """Range condition of a form field, e.g. content-length-range."""

    key: ConditionKey
    lower: int
    upper: int

    def __post_init__(self):
        object.__setattr__(self, "key", _to_key(self.key))
        check_uint64("lower limit", self.lower)
        check_uint64("upper limit", self.upper)

    @property
    def match(self) -> ConditionMatch:
        """Get match type; always range."""
        return ConditionMatch.RANGE

    def to_json(self) -> list[str]:
        """Convert to JSON compatible value. Limits are decimal strings."""
        return [str(self.key), str(self.lower), str(self.upper)]


ConditionType = Union[Condition, RangeCondition]


def _trim_dollar(value: str) -> str:
    """Trim dollar character if present."""
    return value[1:] if value.startswith("$") else value


def _parse_limit(value: Any) -> int:
    """Parse range limit given as JSON integer or decimal string."""
    if isinstance(value, str) and value.isdigit() and value.isascii():
        return int(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise ValueError(f"invalid range limit {value!r}")


def _parse_condition(element: Any) -> ConditionType:
    """Parse a condition element of policy document."""
    if isinstance(element, dict):
        if len(element) != 1:
            raise ValueError("exact condition must have exactly one entry")
        key, value = next(iter(element.items()))
        return Condition(key, value)

    if not isinstance(element, list) or len(element) != 3:
        raise ValueError(f"invalid condition {element!r}")

    operator, target, value = element
    if not isinstance(operator, str):
        raise ValueError(f"invalid condition {element!r}")
    if operator.lower() in (_EQ, _STARTS_WITH) and not isinstance(target, str):
        raise ValueError(f"invalid condition {element!r}")
    if operator.lower() == _EQ:
        return Condition(_trim_dollar(target), value)
    if operator.lower() == _STARTS_WITH:
        return Condition(
            _trim_dollar(target),
            value,
            ConditionMatch.STARTS_WITH if value else ConditionMatch.ANY,
        )
    return RangeCondition(operator, _parse_limit(target), _parse_limit(value))


class Policy:
    """
    POST policy containing expiration and ordered conditions. Conditions
    are written in the order they are set.
    """

    def __init__(
            self,
            expiration: datetime,
            conditions: Iterable[ConditionType] = (),
    ):
        if not isinstance(expiration, datetime):
            raise ValueError("expiration must be datetime type")
        self._expiration = expiration
        self._conditions: list[ConditionType] = []
        for condition in conditions:
            if not isinstance(condition, (Condition, RangeCondition)):
                raise ValueError(
                    "condition must be Condition or RangeCondition type",
                )
            self._conditions.append(condition)

    @property
    def expiration(self) -> datetime:
        """Get expiration."""
        return self._expiration

    @property
    def conditions(self) -> tuple[ConditionType, ...]:
        """Get conditions in the order they were set."""
        return tuple(self._conditions)

    def __len__(self) -> int:
        return len(self._conditions)

    def __iter__(self) -> Iterator[ConditionType]:
        return iter(self.conditions)

    def set_condition(
            self,
            key: str,
            value: str,
            match: ConditionMatch = ConditionMatch.EXACT,
    ):
        """
        Add exact, starts-with or any-content condition of a form field.
        Multiple conditions may be set for the same form field.

        Range match is not accepted here; use
        :meth:`set_range_condition` instead.

        :param key: Form field name; see :class:`ConditionKey`.
        :param value: Value to match. Ignored for any-content match.
        :param match: :class:`ConditionMatch` other than RANGE.
        """
        self._conditions.append(Condition(key, value, match))

    def set_range_condition(self, key: str, lower: int, upper: int):
        """
        Add range condition of a form field. Limits must fit in unsigned
        64-bit integer; lower limit greater than upper limit is not checked
        and is rejected by S3 at upload time.

        :param key: Form field name, usually content-length-range.
        :param lower: Lower limit.
        :param upper: Upper limit.
        """
        self._conditions.append(RangeCondition(key, lower, upper))

    def to_json(self) -> dict[str, Any]:
        """Convert to JSON compatible value."""
        return {
            "expiration": to_iso8601utc(self._expiration),
            "conditions": [
                condition.to_json() for condition in self._conditions
            ],
        }

    def serialize(self) -> bytes:
        """
        Return canonical JSON document of this policy as UTF-8 encoded
        bytes. Raise :exc:`PolicySerializationError` on encoding failure.
        """
        try:
            return json.dumps(
                self.to_json(),
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            ).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise PolicySerializationError(
                f"unable to serialize policy; {exc}",
            ) from exc

    @classmethod
    def from_json(cls, data: bytes | str) -> Policy:
        """
        Parse policy document. Starts-with condition with empty value is
        parsed as any-content condition. Raise :exc:`PolicyParseError` on
        malformed document.
        """
        document = (
            data.decode("utf-8", "replace")
            if isinstance(data, bytes) else data
        )
        try:
            value = json.loads(data)
        except (ValueError, RecursionError) as exc:
            raise PolicyParseError(
                f"invalid policy document; {exc}", document,
            ) from exc
        if not isinstance(value, dict):
            raise PolicyParseError(
                "policy document must be JSON object", document,
            )

        expiration = value.get("expiration")
        if not isinstance(expiration, str):
            raise PolicyParseError("expiration must be string", document)
        conditions = value.get("conditions", [])
        if not isinstance(conditions, list):
            raise PolicyParseError("conditions must be array", document)

        try:
            return cls(
                from_iso8601utc(expiration),  # type: ignore[arg-type]
                [_parse_condition(element) for element in conditions],
            )
        except (ValueError, RecursionError) as exc:
            raise PolicyParseError(str(exc), document) from exc
