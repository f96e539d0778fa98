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

import os
from datetime import datetime, timedelta, timezone

from s3post import (ConditionKey, ConditionMatch, Policy, Signer,
                    presigned_post_form_data)
from s3post.credentials import default_provider

bucket = "my-bucket"

creds = default_provider().retrieve()
if not creds.access_key:
    raise SystemExit("AWS_ACCESS_KEY_ID is required to build the form")
signer = Signer(os.environ.get("AWS_REGION", "us-east-1"), creds.secret_key)

policy = Policy(datetime.now(timezone.utc) + timedelta(days=1))
policy.set_condition(ConditionKey.BUCKET, bucket)
policy.set_condition(ConditionKey.KEY, "uploads/", ConditionMatch.STARTS_WITH)
policy.set_condition(ConditionKey.ACL, "public-read")
policy.set_condition(
    ConditionKey.CONTENT_TYPE, "video/", ConditionMatch.STARTS_WITH,
)
policy.set_range_condition(
    ConditionKey.CONTENT_LENGTH_RANGE, 1*1024*1024, 10*1024*1024,
)

form_data = presigned_post_form_data(
    policy, signer, creds.access_key, creds.session_token,
)

args = " ".join([f"-F {k}={v}" for k, v in form_data.items()])
curl_cmd = (
    f"curl -X POST https://{bucket}.s3.amazonaws.com/ "
    f"{args} -F acl=public-read -F Content-Type=<CONTENT-TYPE> "
    "-F key=uploads/<OBJECT-NAME> -F file=@<FILE>"
)
print(curl_cmd)
