"""spring-version - resolve a Spring Boot version and its BOM versions.

    Returns:
        int: Exit code
"""
import json
import logging
import os
import sys

from analysis import companions
from analysis.dependencies import normalize
from args import parse_args
from cli_config import RunConfig, build_config
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes
from errors import SpringVersionError
from output import write_pair
from registry import boot, pom, starter
from versioning.resolver import resolve

logger = logging.getLogger(__name__)


def run(config: RunConfig) -> None:
    """Resolve the Spring Boot version and write it with its BOM versions.

    Steps run strictly in order and the first failure aborts the run; lines
    already written stay written but the run as a whole has failed.

    Raises:
        SpringVersionError: On any failure.
    """
    releases = boot.fetch_releases(config)
    boot_version = resolve(config.boot_version, releases)

    types = starter.fetch_types(config)
    action = starter.resolve_action(config.type_id, types)

    dependencies = normalize(config.dependencies)
    if is_debug_enabled(logger):
        logger.debug(
            "Generating project",
            extra=extra_context(
                event="function_entry",
                component="cli",
                action="generate_properties",
                type_id=config.type_id,
                dependency_count=len(dependencies),
            ),
        )
    properties = pom.generate_properties(config, action, boot_version, dependencies)

    write_pair(config.output, Constants.BOOT_VERSION_KEY, boot_version)
    for companion in companions.extract(properties):
        write_pair(config.output, companion.prefix, companion.value)
    if config.verbose:
        write_pair(config.output, Constants.METADATA_KEY, json.dumps(properties, separators=(",", ":")))


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    # Honor CLI --loglevel by passing it to centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = args.LOG_LEVEL
    configure_logging(getattr(args, "LOG_FILE", None))

    try:
        config = build_config(args)
        run(config)
    except SpringVersionError as e:
        logger.error("%s", e)
        sys.exit(ExitCodes.FAILURE.value)
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
