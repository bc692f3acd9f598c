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
from intgcd.algorithms import Algorithm, reduce_gcd
from intgcd.calculator import (
    TimedGcd,
    gcd,
    gcd_euclidean,
    gcd_stein,
    timed_gcd,
    timed_gcd_euclidean,
    timed_gcd_stein,
)
from intgcd.errors import GcdDomainError, GcdError, GcdRangeError
from intgcd.euclidean import fold_gcd_euclidean
from intgcd.stein import fold_gcd_stein
from intgcd.validation import INT32_MAX, INT32_MIN
