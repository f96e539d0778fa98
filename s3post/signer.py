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
s3post.signer
~~~~~~~~~~~~~

This module implements AWS Signature version '4' signing of POST policies.
Calculation is described at
https://docs.aws.amazon.com/AmazonS3/latest/API/sigv4-authentication-HTTPPOST.html

Module level functions are pure; :class:`Signer <Signer>` binds a region,
a secret key and a clock to them.

"""

from __future__ import absolute_import, annotations

import hashlib
import hmac
from datetime import datetime
from typing import NamedTuple, cast

from . import time
from .credentials import Provider, default_provider
from .error import SigningError
from .helpers import ClockType, base64_string, check_region, get_default_region

_SERVICE_NAME = "s3"


class SignedPolicy(NamedTuple):
    """Base64 encoded policy and its hex encoded signature."""
    policy: str
    signature: str


def _hmac_hash(
        key: bytes,
        data: bytes,
        hexdigest: bool = False,
) -> bytes | str:
    """Return HMacSHA256 digest of given key and data."""

    hasher = hmac.new(key, data, hashlib.sha256)
    return hasher.hexdigest() if hexdigest else hasher.digest()


def get_signing_key(
        secret_key: str,
        date: datetime,
        region: str,
        service_name: str = _SERVICE_NAME,
) -> bytes:
    """Get signing key."""

    # DateKey = HMAC-SHA256("AWS4" + SecretKey, "yyyymmdd")
    date_key = cast(
        bytes,
        _hmac_hash(
            ("AWS4" + secret_key).encode(),
            time.to_signer_date(date).encode(),
        ),
    )
    # DateRegionKey = HMAC-SHA256(DateKey, Region)
    date_region_key = cast(bytes, _hmac_hash(date_key, region.encode()))
    # DateRegionServiceKey = HMAC-SHA256(DateRegionKey, "s3")
    date_region_service_key = cast(
        bytes,
        _hmac_hash(date_region_key, service_name.encode()),
    )
    # SigningKey = HMAC-SHA256(DateRegionServiceKey, "aws4_request")
    return cast(
        bytes,
        _hmac_hash(date_region_service_key, b"aws4_request"),
    )


def _get_signature(signing_key: bytes, string_to_sign: str) -> str:
    """Get signature."""

    return cast(
        str,
        _hmac_hash(signing_key, string_to_sign.encode(), hexdigest=True),
    )


def get_credential_string(access_key: str, date: datetime, region: str) -> str:
    """Get credential string of given access key, date and region."""
    return (
        f"{access_key}/{time.to_signer_date(date)}/{region}/"
        f"{_SERVICE_NAME}/aws4_request"
    )


def post_presign_v4(
        data: str,
        secret_key: str,
        date: datetime,
        region: str,
) -> str:
    """Do signature V4 of given base64 encoded POST policy."""
    return _get_signature(
        get_signing_key(secret_key, date, region),
        data,
    )


def sign_policy(
        policy: bytes,
        secret_key: str,
        region: str,
        date: datetime,
) -> SignedPolicy:
    """
    Encode policy document in base64 which is the string to sign, and sign
    it with the key derived from secret key, date and region.
    """
    if not isinstance(policy, (bytes, bytearray, memoryview)):
        raise SigningError("policy must be bytes type")

    try:
        string_to_sign = base64_string(bytes(policy))
        signature = post_presign_v4(string_to_sign, secret_key, date, region)
    except (TypeError, ValueError) as exc:
        raise SigningError(f"unable to sign policy; {exc}") from exc
    return SignedPolicy(string_to_sign, signature)


class Signer:
    """
    POST policy signer for a region and a secret key.

    If region is empty, AWS_REGION or AWS_DEFAULT_REGION environment
    variable is used. If secret key is empty, it is retrieved from given
    credential provider, which defaults to AWS_SECRET_ACCESS_KEY environment
    variable and then the AWS shared credential file. Current date is read
    from clock on each :meth:`sign` call.
    """

    def __init__(
            self,
            region: str = "",
            secret_key: str = "",
            clock: ClockType | None = None,
            provider: Provider | None = None,
    ):
        region = region or get_default_region()
        if not region:
            raise ValueError(
                "region cannot be empty; pass region or set AWS_REGION",
            )
        check_region(region)
        if not secret_key:
            secret_key = (provider or default_provider()).retrieve().secret_key
        self._region = region
        self._secret_key = secret_key
        self._clock: ClockType = clock or time.utcnow

    def __repr__(self) -> str:
        return f"{type(self).__name__}(region={self._region!r})"

    @property
    def region(self) -> str:
        """Get region."""
        return self._region

    def now(self) -> datetime:
        """Get current time from clock."""
        return self._clock()

    def sign(self, policy: bytes) -> SignedPolicy:
        """
        Sign POST policy document at current date.

        :param policy: Serialized policy document.
        :return: :class:`SignedPolicy` of base64 encoded policy and hex
            encoded signature.
        """
        return self.sign_at(policy, self.now())

    def sign_at(self, policy: bytes, date: datetime) -> SignedPolicy:
        """Sign POST policy document at given date."""
        if not isinstance(date, datetime):
            raise ValueError("date must be datetime type")
        return sign_policy(policy, self._secret_key, self._region, date)
