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


# binary GCD using only shifts, comparisons and subtraction.
# & and >> act on the two's-complement bit pattern of negative ints, so
# intermediate results may be negative. callers take abs() once at the end.
def fold_gcd_stein(a: int, b: int) -> int:
    if a == 0:
        return b
    if b == 0:
        return a
    if a == b:
        return a
    if a == 1 or b == 1:
        return 1

    if a & 1 == 0:
        if b & 1 == 0:
            return fold_gcd_stein(a >> 1, b >> 1) << 1
        return fold_gcd_stein(a >> 1, b)

    if b & 1 == 0:
        return fold_gcd_stein(a, b >> 1)
    return fold_gcd_stein(b, a - b if a > b else b - a)
