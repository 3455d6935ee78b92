"""Argument parsing functionality for spring-version."""

import argparse

from constants import Constants

DESCRIPTION = """\
Get the latest Spring Boot version and its associated BOM versions, e.g. Spring Cloud.

You can specify the '-b, --boot-version' flag to determine the Spring Boot version,
or you can leave it blank to use the current version.
Furthermore, '-b' flag also supports Semantic Versioning (semver) version comparison.

  $ spring-version
  $ spring-version -b 2.7.15-SNAPSHOT
  $ spring-version -b ">=2.0.0, <4.0.0"
  $ spring-version -b ~3.x

You can also use the '-d, --dependency' flag multiple times to specify dependencies.
Alternatively, you can pass dependencies by separating them with commas, e.g. foo, bar.

  $ spring-version -d cloud-starter -d native
  $ spring-version -d cloud-starter,devtools -d native

You can use the '--starter-url' flag to define the URL of the starter metadata server,
and you can also utilize the '--boot-url' flag to establish the URL for the Spring Boot metadata server.

  $ spring-version --starter-url https://mystarter.com:8080
"""


def _positive_float(value):
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive number")
    return number


def parse_args(argv=None):
    """Parses the arguments passed to the program.

    Flags left unset stay None so config file values are not overridden.
    """
    parser = argparse.ArgumentParser(
        prog="spring-version",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=True,
    )

    parser.add_argument("--starter-url",
                        dest="STARTER_URL",
                        help=f"URL of Starter metadata (default: {Constants.STARTER_URL})",
                        action="store", type=str)
    parser.add_argument("--boot-url",
                        dest="BOOT_URL",
                        help=f"URL of Spring Boot metadata (default: {Constants.BOOT_URL})",
                        action="store", type=str)
    parser.add_argument("-k", "--insecure",
                        dest="INSECURE",
                        help="Allow insecure metadata server connections when using SSL",
                        action="store_true", default=None)
    parser.add_argument("--type-id",
                        dest="TYPE_ID",
                        help=f"Type ID of the action in Spring Boot metadata (default: {Constants.DEFAULT_TYPE_ID})",
                        action="store", type=str)
    parser.add_argument("-b", "--boot-version",
                        dest="BOOT_VERSION",
                        help="Spring Boot version, supports semver comparison",
                        action="store", type=str)
    parser.add_argument("-d", "--dependency",
                        dest="DEPENDENCIES",
                        help="Dependency identifiers to include in the generated project (repeatable, comma-separated)",
                        action="append", type=str,
                        default=[])
    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Output destination, where to write the result (default: stdout)",
                        action="store", type=str,
                        choices=Constants.SUPPORTED_OUTPUTS)
    parser.add_argument("-v", "--verbose",
                        dest="VERBOSE",
                        help="Also write the full generated project properties",
                        action="store_true", default=None)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store", type=str)
    parser.add_argument("--timeout",
                        dest="TIMEOUT",
                        help=f"HTTP request timeout in seconds (default: {Constants.REQUEST_TIMEOUT})",
                        action="store", type=_positive_float)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
