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
from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Union

from intgcd.euclidean import fold_gcd_euclidean
from intgcd.stein import fold_gcd_stein


class Algorithm(Enum):
    EUCLIDEAN = "euclidean"
    STEIN = "stein"

    def __str__(self):
        return self.value

    @property
    def fold(self) -> Callable[[int, int], int]:
        """The unvalidated pairwise primitive for this algorithm."""
        if self is Algorithm.STEIN:
            return fold_gcd_stein
        return fold_gcd_euclidean

    def reduce(self, numbers: Iterable[int]) -> int:
        """
        Fold numbers strictly left to right with the pairwise primitive, then normalize the sign once. Nothing is
        validated here.
        """
        iterator = iter(numbers)
        try:
            result = next(iterator)
        except StopIteration:
            raise ValueError(f"Cannot reduce an empty sequence with {self.value} GCD") from None

        for number in iterator:
            result = self.fold(result, number)

        return abs(result)

    @classmethod
    def parse(cls, value: Union[str, Algorithm]) -> Algorithm:
        if isinstance(value, Algorithm):
            return value

        name = str(value).strip().lower()
        name = ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            choices = ", ".join(sorted([a.value for a in cls] + list(ALIASES)))
            raise ValueError(f"Unknown GCD algorithm {value!r} (expected one of: {choices})") from None


ALIASES = {
    "euclid": Algorithm.EUCLIDEAN.value,
    "binary": Algorithm.STEIN.value,
}


def reduce_gcd(numbers: Iterable[int], algorithm: Union[str, Algorithm] = Algorithm.EUCLIDEAN) -> int:
    return Algorithm.parse(algorithm).reduce(numbers)
