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

"""Credential definitions used to sign POST policies."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Credentials:
    """
    Secret key used to derive the signing key, with optional access key and
    session token which only appear in upload form fields. Secret key and
    session token are kept out of repr().
    """

    secret_key: str = field(repr=False)
    access_key: Optional[str] = None
    session_token: Optional[str] = field(default=None, repr=False)

    def __post_init__(self):
        if not self.secret_key:
            raise ValueError("secret key must not be empty")
