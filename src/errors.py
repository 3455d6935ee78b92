"""Error kinds raised while resolving Spring Boot and BOM versions.

Every error is terminal for a run. Each kind carries the context needed to
diagnose the failure without re-running (offending string, attempted
constraint, candidate list) as attributes, so callers can branch on the class
instead of matching messages.
"""
from __future__ import annotations

from typing import Optional, Sequence


class SpringVersionError(Exception):
    """Base class for all resolution failures."""


class NetworkError(SpringVersionError):
    """A metadata or project request failed at the transport or HTTP level."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        if status_code is None:
            message = f"request to {url} failed: {reason}"
        else:
            message = f"request to {url} failed with HTTP {status_code}: {reason}"
        super().__init__(message)


class ParseError(SpringVersionError):
    """A payload could not be decoded into the expected shape."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"invalid {source}: {reason}")


class InvalidVersionFormat(ParseError):
    """A release catalog entry is not a semantic version."""

    def __init__(self, version: str, reason: str = "not a semantic version"):
        self.version = version
        super().__init__("spring-boot version format", f"{version}: {reason}")


class InvalidConstraint(SpringVersionError):
    """The version selector is neither a version nor a range expression."""

    def __init__(self, selector: str, reason: str):
        self.selector = selector
        self.reason = reason
        super().__init__(f"invalid spring-boot constraint format: {selector}: {reason}")


class NoCurrentRelease(SpringVersionError):
    """No version was requested and no release is flagged current."""

    def __init__(self):
        super().__init__("can not determine spring-boot version: no release is marked current")


class NoMatchingVersion(SpringVersionError):
    """No catalog version satisfies the constraint."""

    def __init__(self, constraint: str, candidates: Sequence[str]):
        self.constraint = constraint
        self.candidates = list(candidates)
        super().__init__(
            f"no spring-boot version matching the given constraints [{constraint}]: "
            + ", ".join(self.candidates)
        )


class TypeNotFound(SpringVersionError):
    """The requested project type id is not offered by the starter."""

    def __init__(self, type_id: str, known_ids: Sequence[str] = ()):
        self.type_id = type_id
        self.known_ids = list(known_ids)
        super().__init__(
            f"can not determine type action for '{type_id}' (available: "
            + (", ".join(self.known_ids) or "none")
            + ")"
        )


class OutputError(SpringVersionError):
    """The output destination is unavailable."""

    def __init__(self, output: str, reason: str):
        self.output = output
        self.reason = reason
        super().__init__(f"cannot write to output '{output}': {reason}")


class ConfigError(SpringVersionError):
    """The configuration file is missing or malformed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"invalid configuration file {path}: {reason}")
