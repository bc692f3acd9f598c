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


class GcdError(ValueError):
    """Base class for operand sets the calculator refuses to compute a GCD for."""


class GcdDomainError(GcdError):
    def __init__(self, operand_count: int):
        super().__init__(f"All {operand_count} numbers cannot be 0 at the same time.")
        self.operand_count = operand_count


class GcdRangeError(GcdError):
    def __init__(self, value: int, position: int):
        super().__init__(f"Operand {position} ({value}) is outside [-int32.max, int32.max].")
        self.value = value
        self.position = position
