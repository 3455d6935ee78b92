"""Result sinks: standard output or the GitHub Actions output file."""
from __future__ import annotations

import logging
import os
import sys

from constants import Constants, OutputTargets
from errors import OutputError

logger = logging.getLogger(__name__)


def write(output: str, text: str) -> None:
    """Write text to the named output.

    "stdout" writes to standard output; "github" appends to the file named by
    the GITHUB_OUTPUT environment variable.

    Raises:
        OutputError: If the output is unknown, GITHUB_OUTPUT is unset or the
            file cannot be opened for appending.
    """
    if output == OutputTargets.STDOUT.value:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    if output == OutputTargets.GITHUB.value:
        path = os.environ.get(Constants.ENV_GITHUB_OUTPUT)
        if not path:
            raise OutputError(output, f"environment variable {Constants.ENV_GITHUB_OUTPUT} must be set")
        try:
            with open(path, "a", encoding="utf-8") as fh:
                fh.write(text)
        except OSError as e:
            raise OutputError(output, f"could not open github output file for writing: {e}") from e
        return
    raise OutputError(output, "unsupported output type")


def write_pair(output: str, key: str, value: str) -> None:
    """Write one ``key=value`` line."""
    logger.debug("Writing %s to %s", key, output)
    write(output, f"{key}={value}\n")
