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
from typing import Iterable, Tuple

from intgcd.errors import GcdDomainError, GcdRangeError

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def check_operand(value: int, position: int):
    """
    Reject anything that is not an int in the symmetric 32-bit range. The 32-bit minimum has no representable
    absolute value, so it is rejected along with everything beyond the range.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Operand {position} must be an int, not {type(value).__name__}")
    if value == INT32_MIN or not -INT32_MAX <= value <= INT32_MAX:
        raise GcdRangeError(value, position)


def validate_operands(a: int, b: int, others: Iterable[int] = ()) -> Tuple[int, ...]:
    """
    Check every operand against the range first, then make sure at least one of them is non-zero.
    Returns all operands as a tuple in call order.
    """
    operands = (a, b, *others)

    for position, value in enumerate(operands):
        check_operand(value, position)

    if not any(operands):
        raise GcdDomainError(len(operands))

    return operands
