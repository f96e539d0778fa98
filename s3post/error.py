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
s3post.error
~~~~~~~~~~~~

This module provides custom exception classes for policy serialization,
policy parsing and signing failures. Invalid arguments are reported as
:exc:`ValueError`.

"""

from __future__ import absolute_import, annotations


class S3PostException(Exception):
    """Base s3post exception."""


class PolicySerializationError(S3PostException):
    """Raised to indicate that a policy cannot be encoded as JSON."""


class PolicyParseError(S3PostException):
    """Raised to indicate that a policy document is malformed."""

    def __init__(self, message: str, document: str | None = None):
        self._document = document
        super().__init__(message)

    @property
    def document(self) -> str | None:
        """Get the document which failed to parse."""
        return self._document

    def __reduce__(self):
        return type(self), (str(self), self._document)


class SigningError(S3PostException):
    """Raised to indicate that the policy signature cannot be computed."""
