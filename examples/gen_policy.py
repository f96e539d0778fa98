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

from datetime import datetime, timezone

from s3post import ConditionKey, ConditionMatch, Policy, Signer

# Secret key is read from AWS_SECRET_ACCESS_KEY environment variable.
signer = Signer("us-east-1")

policy = Policy(datetime(2007, 12, 1, 12, 0, 0, 0, timezone.utc))
policy.set_condition(ConditionKey.ACL, "public-read")
policy.set_condition(ConditionKey.BUCKET, "johnsmith")
policy.set_condition(ConditionKey.KEY, "user/eric/", ConditionMatch.STARTS_WITH)

encoded_policy, signature = signer.sign(policy.serialize())

# Use encoded policy and signature as "policy" and "x-amz-signature" fields
# of the upload form.
print(encoded_policy)
print(signature)
