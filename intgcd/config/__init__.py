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
from typing import Any, Dict

from dynaconf import Dynaconf

DEFAULTS: Dict[str, Any] = {
    "algorithm": "euclidean",
    "timed": False,
    "log_level": "warning",
}

configuration = Dynaconf(envvar_prefix="INTGCD")


def setting(key: str) -> Any:
    return configuration.get(key, default=DEFAULTS[key])


def loaded_and_sorted_dict() -> Dict[str, Any]:
    return {key: setting(key) for key in sorted(DEFAULTS)}
