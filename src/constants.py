"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FAILURE = 1


class OutputTargets(Enum):
    """Output destinations supported by the program.

    Args:
        Enum (string): Output destinations supported by the program.
    """

    STDOUT = "stdout"
    GITHUB = "github"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    STARTER_URL = "https://start.spring.io"
    BOOT_URL = "https://api.spring.io/projects/spring-boot/releases"
    DEFAULT_TYPE_ID = "maven-build"
    STARTER_METADATA_ACCEPT = "application/vnd.initializr.v2.2+json"
    SUPPORTED_OUTPUTS = [
        OutputTargets.STDOUT.value,
        OutputTargets.GITHUB.value,
    ]
    ENV_GITHUB_OUTPUT = "GITHUB_OUTPUT"
    ENV_LOG_LEVEL = "SPRING_VERSION_LOG_LEVEL"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests

    BOOT_VERSION_KEY = "spring-boot"
    METADATA_KEY = "metadata"

    # Names of the BOMs published alongside Spring Boot, in match priority
    # order. Mirrors 'initializr.env.boms' in the start.spring.io application.yml.
    SUPPORTED_BOMS = (
        "spring-cloud",
        "spring-cloud-azure",
        "spring-cloud-gcp",
        "spring-cloud-services",
        "spring-modulith",
        "spring-shell",
        "codecentric-spring-boot-admin",
        "hilla",
        "sentry",
        "solace-spring-boot",
        "solace-spring-cloud",
        "testcontainers",
        "vaadin",
        "wavefront",
    )
