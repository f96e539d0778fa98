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

import unittest
from datetime import datetime, timedelta, timezone

from s3post.time import (from_iso8601utc, to_amz_date, to_iso8601utc,
                         to_signer_date, utcnow)


class TimeutilsTest(unittest.TestCase):
    def test_to_iso8601utc(self) -> None:
        for value, expected in [
            (datetime(2015, 12, 30, 12, tzinfo=timezone.utc),
             "2015-12-30T12:00:00.000Z"),
            (datetime(2015, 12, 30, 12, 0, 0, 999999),
             "2015-12-30T12:00:00.999Z"),
            (datetime(2015, 12, 31, 1, 30,
                      tzinfo=timezone(timedelta(hours=5, minutes=30))),
             "2015-12-30T20:00:00.000Z"),
        ]:
            self.assertEqual(to_iso8601utc(value), expected)

    def test_from_iso8601utc(self) -> None:
        expected = datetime(2015, 12, 30, 12, tzinfo=timezone.utc)
        self.assertEqual(from_iso8601utc("2015-12-30T12:00:00.000Z"),
                         expected)
        self.assertEqual(from_iso8601utc("2015-12-30T12:00:00Z"), expected)
        self.assertIsNone(from_iso8601utc(None))
        with self.assertRaises(ValueError):
            from_iso8601utc("2015-12-30 12:00:00")

    def test_signer_dates(self) -> None:
        value = datetime(2015, 12, 28, 19, 0, 0,
                         tzinfo=timezone(timedelta(hours=-5)))
        self.assertEqual(to_signer_date(value), "20151229")
        self.assertEqual(to_amz_date(value), "20151229T000000Z")

    def test_utcnow(self) -> None:
        self.assertEqual(utcnow().tzinfo, timezone.utc)
