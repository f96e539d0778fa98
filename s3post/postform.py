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

"""Form-data of a presigned POST policy."""

from __future__ import absolute_import, annotations

from .policy import AWS_V4_SIGNATURE_ALGORITHM, ConditionKey, Policy
from .signer import Signer, get_credential_string
from .time import to_amz_date


def presigned_post_form_data(
        policy: Policy,
        signer: Signer,
        access_key: str,
        session_token: str | None = None,
) -> dict[str, str]:
    """
    Return form-data of given post policy. x-amz-algorithm,
    x-amz-credential, x-amz-security-token and x-amz-date conditions are
    added to a copy of the policy before signing; the passed policy is not
    modified. The returned dict contains x-amz-algorithm, x-amz-credential,
    x-amz-security-token, x-amz-date, policy and x-amz-signature.
    """
    if not isinstance(policy, Policy):
        raise ValueError("policy must be Policy type")
    if not access_key:
        raise ValueError("access key cannot be empty")

    date = signer.now()
    credential = get_credential_string(access_key, date, signer.region)
    amz_date = to_amz_date(date)

    signed_policy = Policy(policy.expiration, policy.conditions)
    signed_policy.set_condition(
        ConditionKey.AMZ_ALGORITHM, AWS_V4_SIGNATURE_ALGORITHM,
    )
    signed_policy.set_condition(ConditionKey.AMZ_CREDENTIAL, credential)
    if session_token:
        signed_policy.set_condition(
            ConditionKey.AMZ_SECURITY_TOKEN, session_token,
        )
    signed_policy.set_condition(ConditionKey.AMZ_DATE, amz_date)

    encoded_policy, signature = signer.sign_at(
        signed_policy.serialize(), date,
    )
    form_data = {
        "x-amz-algorithm": AWS_V4_SIGNATURE_ALGORITHM,
        "x-amz-credential": credential,
        "x-amz-date": amz_date,
        "policy": encoded_policy,
        "x-amz-signature": signature,
    }
    if session_token:
        form_data["x-amz-security-token"] = session_token
    return form_data
