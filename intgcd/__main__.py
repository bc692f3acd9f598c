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
import argparse
import sys

import structlog

from intgcd.algorithms import Algorithm
from intgcd.calculator import timed_gcd
from intgcd.config import configuration, loaded_and_sorted_dict, setting
from intgcd.errors import GcdError
from intgcd.log import configure_logging

parser = argparse.ArgumentParser("intgcd", description="Greatest common divisor of two or more 32-bit integers.")
parser.add_argument("--algorithm", choices=[a.value for a in Algorithm],
                    help="The GCD algorithm to use. Defaults to the configured algorithm (euclidean).")
parser.add_argument("--timed", action="store_true", default=None,
                    help="Also print how many milliseconds the computation took.")
parser.add_argument("--config", help="A settings file (toml, yaml, json, ini) to load before running.")
parser.add_argument("--log-level", help="Logging level for diagnostics written to stderr.")
parser.add_argument("a", type=int, help="First integer.")
parser.add_argument("b", type=int, help="Second integer.")
parser.add_argument("others", type=int, nargs="*", help="Any further integers.")


def run(argv=None) -> int:
    args = parser.parse_args(argv)

    if args.config:
        configuration.load_file(path=args.config)

    try:
        configure_logging(args.log_level or setting("log_level"))
        algorithm = Algorithm.parse(args.algorithm or setting("algorithm"))
    except ValueError as e:
        parser.error(str(e))

    timed = setting("timed") if args.timed is None else args.timed
    logger = structlog.get_logger("intgcd.cli")
    logger.debug("Starting", config=loaded_and_sorted_dict(), algorithm=str(algorithm), timed=timed)

    try:
        result, elapsed_ms = timed_gcd(args.a, args.b, *args.others, algorithm=algorithm)
    except GcdError as e:
        logger.info(f"Cannot compute GCD: {e}")
        print(f"intgcd: error: {e}", file=sys.stderr)
        return 2

    if timed:
        print(f"{result} elapsed_ms={elapsed_ms}")
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(run())
