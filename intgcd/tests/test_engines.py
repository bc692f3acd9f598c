#  Copyright (c) 2019-2023 SRI International.
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
import math

import pytest

from intgcd.euclidean import fold_gcd_euclidean, remainder
from intgcd.stein import fold_gcd_stein
from intgcd.validation import INT32_MAX


@pytest.mark.parametrize("a, b, expected", [
    (7, 3, 1),
    (-7, 3, -1),
    (7, -3, 1),
    (-7, -3, -1),
    (6, 3, 0),
])
def test_remainder_truncates(a, b, expected):
    assert remainder(a, b) == expected


@pytest.mark.parametrize("a, b, expected", [
    (48, 18, 6),
    (18, 48, 6),
    (-48, 18, 6),
    (48, -18, 6),
    (-48, -18, 6),
    (0, -9, 9),
    (-9, 0, 9),
    (0, 0, 0),
    (1, 1, 1),
    (INT32_MAX, 1, 1),
])
def test_fold_euclidean(a, b, expected):
    assert fold_gcd_euclidean(a, b) == expected


@pytest.mark.parametrize("a, b, expected", [
    (48, 18, 6),
    (0, 7, 7),
    (7, 0, 7),
    (-5, 0, -5),
    (0, -5, -5),
    (-4, -4, -4),
    (1, 1000, 1),
    (1000, 1, 1),
    (64, 48, 16),
    (-2, -4, -2),
    (-3, 6, 3),
])
def test_fold_stein_keeps_sign(a, b, expected):
    assert fold_gcd_stein(a, b) == expected


def test_fold_stein_large_operands():
    assert abs(fold_gcd_stein(INT32_MAX, -INT32_MAX)) == INT32_MAX
    assert abs(fold_gcd_stein(2 ** 30, 2 ** 20 * 3)) == 2 ** 20


@pytest.mark.parametrize("a", [-120, -17, -8, -1, 1, 9, 36, 97, 2 ** 24])
@pytest.mark.parametrize("b", [-90, -6, -1, 1, 12, 33, 1024, 65535])
def test_engines_agree_with_math_gcd(a, b):
    assert fold_gcd_euclidean(a, b) == math.gcd(a, b)
    assert abs(fold_gcd_stein(a, b)) == math.gcd(a, b)
