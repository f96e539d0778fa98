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
s3post - Signed Amazon S3 POST policies for direct browser uploads

    >>> from datetime import datetime, timedelta, timezone
    >>> from s3post import ConditionKey, ConditionMatch, Policy, Signer
    >>> policy = Policy(datetime.now(timezone.utc) + timedelta(days=1))
    >>> policy.set_condition(ConditionKey.BUCKET, "my-bucket")
    >>> policy.set_condition(
    ...     ConditionKey.KEY, "uploads/", ConditionMatch.STARTS_WITH,
    ... )
    >>> signer = Signer("us-east-1", "wJalrXUtnFEMI/K7MDENG/bPxRfiCYEXAMPLEKEY")
    >>> encoded_policy, signature = signer.sign(policy.serialize())

:license: Apache 2.0, see LICENSE for more details.
"""

__title__ = "s3post"
__author__ = "s3post contributors"
__version__ = "1.0.0"
__license__ = "Apache 2.0"

# pylint: disable=unused-import,useless-import-alias
from .error import PolicyParseError as PolicyParseError
from .error import PolicySerializationError as PolicySerializationError
from .error import S3PostException as S3PostException
from .error import SigningError as SigningError
from .policy import AWS_V4_SIGNATURE_ALGORITHM as AWS_V4_SIGNATURE_ALGORITHM
from .policy import Condition as Condition
from .policy import ConditionKey as ConditionKey
from .policy import ConditionMatch as ConditionMatch
from .policy import Policy as Policy
from .policy import RangeCondition as RangeCondition
from .postform import presigned_post_form_data as presigned_post_form_data
from .signer import SignedPolicy as SignedPolicy
from .signer import Signer as Signer
