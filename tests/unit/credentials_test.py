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
from unittest import TestCase, mock

from s3post.credentials import (AWSConfigProvider, ChainedProvider,
                                Credentials, EnvAWSProvider, StaticProvider,
                                default_provider)

CREDENTIALS_SAMPLE = os.path.join(
    os.path.dirname(__file__), "credentials.sample",
)
CREDENTIALS_MISSING = os.path.join(
    os.path.dirname(__file__), "credentials.missing",
)


class CredentialsTest(TestCase):
    def test_empty_secret_key(self):
        with self.assertRaises(ValueError):
            Credentials("")

    def test_secret_key_only(self):
        creds = Credentials("secret")
        self.assertIsNone(creds.access_key)
        self.assertIsNone(creds.session_token)

    def test_repr_hides_secret(self):
        creds = Credentials("secret", "access", "token")
        self.assertIn("access", repr(creds))
        self.assertNotIn("secret", repr(creds))
        self.assertNotIn("token", repr(creds))


class StaticProviderTest(TestCase):
    def test_static_credentials(self):
        creds = StaticProvider("SECRET", "UXHW").retrieve()
        self.assertEqual(creds.secret_key, "SECRET")
        self.assertEqual(creds.access_key, "UXHW")
        self.assertIsNone(creds.session_token)


class EnvAWSProviderTest(TestCase):
    @mock.patch.dict(os.environ, {
        "AWS_ACCESS_KEY_ID": "access",
        "AWS_SECRET_ACCESS_KEY": "secret",
        "AWS_SESSION_TOKEN": "token",
    }, clear=True)
    def test_env_aws(self):
        creds = EnvAWSProvider().retrieve()
        self.assertEqual(creds.access_key, "access")
        self.assertEqual(creds.secret_key, "secret")
        self.assertEqual(creds.session_token, "token")

    @mock.patch.dict(os.environ, {"AWS_SECRET_KEY": "secret"}, clear=True)
    def test_env_aws_secret_only(self):
        creds = EnvAWSProvider().retrieve()
        self.assertEqual(creds.secret_key, "secret")
        self.assertIsNone(creds.access_key)

    @mock.patch.dict(os.environ, {"AWS_ACCESS_KEY_ID": "access"}, clear=True)
    def test_env_aws_missing_secret(self):
        with self.assertRaises(ValueError):
            EnvAWSProvider().retrieve()


class AWSConfigProviderTest(TestCase):
    @mock.patch.dict(os.environ, {}, clear=True)
    def test_file_aws(self):
        creds = AWSConfigProvider(CREDENTIALS_SAMPLE).retrieve()
        self.assertEqual(creds.access_key, "accessKey")
        self.assertEqual(creds.secret_key, "secret")
        self.assertEqual(creds.session_token, "token")

    def test_file_aws_from_env(self):
        with mock.patch.dict(
                os.environ,
                {
                    "AWS_SHARED_CREDENTIALS_FILE": CREDENTIALS_SAMPLE,
                    "AWS_PROFILE": "no_token",
                },
        ):
            creds = AWSConfigProvider().retrieve()
        self.assertEqual(creds.secret_key, "secret")
        self.assertIsNone(creds.session_token)

    def test_file_aws_secret_only(self):
        creds = AWSConfigProvider(CREDENTIALS_SAMPLE, "secret_only").retrieve()
        self.assertEqual(creds.secret_key, "only%secret")
        self.assertIsNone(creds.access_key)

    def test_file_aws_no_secret(self):
        with self.assertRaises(ValueError):
            AWSConfigProvider(CREDENTIALS_SAMPLE, "no_secret").retrieve()

    def test_file_aws_unknown_profile(self):
        with self.assertRaises(ValueError):
            AWSConfigProvider(CREDENTIALS_SAMPLE, "unknown").retrieve()

    def test_file_aws_missing_file(self):
        with self.assertRaises(ValueError):
            AWSConfigProvider(CREDENTIALS_MISSING).retrieve()


class ChainedProviderTest(TestCase):
    @mock.patch.dict(os.environ, {}, clear=True)
    def test_chain_retrieve(self):
        provider = ChainedProvider([
            EnvAWSProvider(),
            AWSConfigProvider(CREDENTIALS_MISSING),
            StaticProvider("secret"),
        ])
        self.assertEqual(provider.retrieve().secret_key, "secret")

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_chain_all_fail(self):
        provider = ChainedProvider([
            EnvAWSProvider(),
            AWSConfigProvider(CREDENTIALS_MISSING),
        ])
        with self.assertRaises(ValueError) as ctx:
            provider.retrieve()
        self.assertIn("AWS_SECRET_ACCESS_KEY", str(ctx.exception))
        self.assertIn(CREDENTIALS_MISSING, str(ctx.exception))


class DefaultProviderTest(TestCase):
    @mock.patch.dict(os.environ, {
        "AWS_SECRET_ACCESS_KEY": "env-secret",
        "AWS_SHARED_CREDENTIALS_FILE": CREDENTIALS_SAMPLE,
    }, clear=True)
    def test_environment_first(self):
        self.assertEqual(default_provider().retrieve().secret_key,
                         "env-secret")

    @mock.patch.dict(os.environ, {
        "AWS_SHARED_CREDENTIALS_FILE": CREDENTIALS_SAMPLE,
    }, clear=True)
    def test_shared_file_fallback(self):
        self.assertEqual(default_provider().retrieve().secret_key, "secret")
