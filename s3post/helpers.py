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

"""Helper functions."""

from __future__ import absolute_import, annotations

import base64
import os
import re
from datetime import datetime

from typing_extensions import Protocol

MAX_UINT64 = 2 ** 64 - 1

_REGION_REGEX = re.compile(r'^((?!_)(?!-)[a-z_\d-]{1,63}(?<!-)(?<!_))$',
                           re.IGNORECASE)


class ClockType(Protocol):  # pylint: disable=too-few-public-methods
    """typing stub for a source of the current time."""

    def __call__(self) -> datetime:
        """Return current time."""


def base64_string(data: bytes) -> str:
    """Encode data with standard base64 alphabet, padded, without newlines."""
    return base64.b64encode(data).decode("ascii")


def check_uint64(name: str, value: int):
    """Check value fits in unsigned 64-bit integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be int type")
    if value < 0:
        raise ValueError(f"{name} cannot be negative number")
    if value > MAX_UINT64:
        raise ValueError(f"{name} cannot be greater than {MAX_UINT64}")


def check_region(region: str):
    """Check whether region is valid or not."""
    if not _REGION_REGEX.match(region):
        raise ValueError(f"invalid region {region}")


def get_default_region() -> str:
    """Return region from AWS_REGION or AWS_DEFAULT_REGION environment."""
    return (
        os.environ.get("AWS_REGION") or
        os.environ.get("AWS_DEFAULT_REGION") or
        ""
    )
