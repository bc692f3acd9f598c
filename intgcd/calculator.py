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
"""
Validated GCD of two or more 32-bit integers.

Every public function takes two fixed operands plus any number of extra ones, so ``gcd_euclidean(a, b)``,
``gcd_euclidean(a, b, c)`` and ``gcd_euclidean(a, b, *rest)`` are all the same call. Operands are range checked
first, then checked for being all zero, and only then reduced left to right.
"""
from time import monotonic_ns
from typing import NamedTuple, Tuple, Union

import structlog

from intgcd.algorithms import Algorithm
from intgcd.errors import GcdError
from intgcd.validation import validate_operands

LOGGER = structlog.get_logger(__name__)


class TimedGcd(NamedTuple):
    result: int
    elapsed_ms: int


def _validated(algorithm: Algorithm, a: int, b: int, others: Tuple[int, ...]) -> Tuple[int, ...]:
    try:
        return validate_operands(a, b, others)
    except GcdError as e:
        LOGGER.debug("Rejected GCD operands", algorithm=str(algorithm), error=type(e).__name__, reason=str(e))
        raise


def gcd(a: int, b: int, *others: int, algorithm: Union[str, Algorithm] = Algorithm.EUCLIDEAN) -> int:
    algorithm = Algorithm.parse(algorithm)
    operands = _validated(algorithm, a, b, others)
    return algorithm.reduce(operands)


def timed_gcd(a: int, b: int, *others: int, algorithm: Union[str, Algorithm] = Algorithm.EUCLIDEAN) -> TimedGcd:
    """
    Same as gcd(), but also reports how many whole milliseconds validation and reduction took together.
    """
    algorithm = Algorithm.parse(algorithm)

    start = monotonic_ns()
    operands = _validated(algorithm, a, b, others)
    result = algorithm.reduce(operands)
    elapsed_ms = (monotonic_ns() - start) // 1_000_000

    LOGGER.debug("Computed GCD", algorithm=str(algorithm), operands=len(operands), result=result,
                 elapsed_ms=elapsed_ms)
    return TimedGcd(result, elapsed_ms)


def gcd_euclidean(a: int, b: int, *others: int) -> int:
    return gcd(a, b, *others, algorithm=Algorithm.EUCLIDEAN)


def gcd_stein(a: int, b: int, *others: int) -> int:
    return gcd(a, b, *others, algorithm=Algorithm.STEIN)


def timed_gcd_euclidean(a: int, b: int, *others: int) -> TimedGcd:
    return timed_gcd(a, b, *others, algorithm=Algorithm.EUCLIDEAN)


def timed_gcd_stein(a: int, b: int, *others: int) -> TimedGcd:
    return timed_gcd(a, b, *others, algorithm=Algorithm.STEIN)
