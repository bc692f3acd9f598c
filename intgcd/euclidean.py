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


# remainder truncated toward zero, so it takes the sign of the dividend
# (python's % takes the sign of the divisor)
def remainder(a: int, b: int) -> int:
    r = abs(a) % abs(b)
    return -r if a < 0 else r


# euclidean GCD by recursive remainder reduction; every level of the
# recursion returns a non-negative value, not just the outermost call
def fold_gcd_euclidean(a: int, b: int) -> int:
    result = a if b == 0 else fold_gcd_euclidean(b, remainder(a, b))
    return abs(result)
