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
Secret key sources for :class:`s3post.signer.Signer`.

Only the secret key is required to sign a policy; a provider fails with
:exc:`ValueError` when it cannot find one.
"""

from __future__ import annotations

import configparser
import os
from abc import ABCMeta, abstractmethod

from .credentials import Credentials


class Provider(metaclass=ABCMeta):  # pylint: disable=too-few-public-methods
    """Credential retriever."""

    @abstractmethod
    def retrieve(self) -> Credentials:
        """Retrieve credentials; raise ValueError if secret key is missing."""


class StaticProvider(Provider):
    """Fixed credential provider."""

    def __init__(
            self,
            secret_key: str,
            access_key: str | None = None,
            session_token: str | None = None,
    ):
        self._credentials = Credentials(secret_key, access_key, session_token)

    def retrieve(self) -> Credentials:
        return self._credentials


class EnvAWSProvider(Provider):
    """
    Credential provider reading AWS_SECRET_ACCESS_KEY (or AWS_SECRET_KEY).
    AWS_ACCESS_KEY_ID and AWS_SESSION_TOKEN are picked up when set.
    """

    def retrieve(self) -> Credentials:
        secret_key = (
            os.environ.get("AWS_SECRET_ACCESS_KEY") or
            os.environ.get("AWS_SECRET_KEY")
        )
        if not secret_key:
            raise ValueError(
                "AWS_SECRET_ACCESS_KEY environment variable is not set",
            )
        return Credentials(
            secret_key,
            access_key=(
                os.environ.get("AWS_ACCESS_KEY_ID") or
                os.environ.get("AWS_ACCESS_KEY")
            ),
            session_token=os.environ.get("AWS_SESSION_TOKEN"),
        )


class AWSConfigProvider(Provider):
    """
    Credential provider reading a profile of the AWS shared credential file.
    File defaults to AWS_SHARED_CREDENTIALS_FILE or ~/.aws/credentials and
    profile to AWS_PROFILE or "default".
    """

    def __init__(
            self,
            filename: str | None = None,
            profile: str | None = None,
    ):
        self._filename = (
            filename or
            os.environ.get("AWS_SHARED_CREDENTIALS_FILE") or
            os.path.join(os.path.expanduser("~"), ".aws", "credentials")
        )
        self._profile = profile or os.environ.get("AWS_PROFILE") or "default"

    def retrieve(self) -> Credentials:
        parser = configparser.ConfigParser(interpolation=None)
        if not parser.read(self._filename):
            raise ValueError(
                f"AWS credential file {self._filename} cannot be read",
            )
        if not parser.has_section(self._profile):
            raise ValueError(
                f"profile {self._profile} does not exist in "
                f"AWS credential file {self._filename}"
            )

        section = parser[self._profile]
        secret_key = section.get("aws_secret_access_key")
        if not secret_key:
            raise ValueError(
                f"aws_secret_access_key is not set in profile "
                f"{self._profile} of AWS credential file {self._filename}"
            )
        return Credentials(
            secret_key,
            access_key=section.get("aws_access_key_id"),
            session_token=section.get("aws_session_token"),
        )


class ChainedProvider(Provider):
    """Return credentials of the first provider which finds a secret key."""

    def __init__(self, providers: list[Provider]):
        self._providers = providers

    def retrieve(self) -> Credentials:
        errors = []
        for provider in self._providers:
            try:
                return provider.retrieve()
            except ValueError as exc:
                errors.append(str(exc))
        raise ValueError(
            "no secret key found; " + "; ".join(errors),
        )


def default_provider() -> Provider:
    """Environment first, then AWS shared credential file."""
    return ChainedProvider([EnvAWSProvider(), AWSConfigProvider()])
