"""Version constraint expressions.

A selector is split into alternatives on ``||``; inside an alternative,
comparators are joined by commas or whitespace and must all hold. Each
alternative is rewritten into a range string and parsed by semantic_version:
``NpmSpec`` for plain release ranges, ``SimpleSpec`` when npm syntax lacks the
operator (``!=``) or when a comparator names a pre-release.

A pre-release version is only considered by an alternative whose every
comparator carries a pre-release qualifier; one plain bound such as
``<3.3.0`` rejects all pre-releases. Build metadata never takes part.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple, Union

import semantic_version
from semantic_version import Version

from errors import InvalidConstraint

_OPERATOR_SPACE_RE = re.compile(r"(<=|>=|!=|==|~>|[<>=~^])\s+")
_V_PREFIX_RE = re.compile(r"(?<![\w.-])v(?=\d)")
_PRERELEASE_RE = re.compile(r"^(?:<=|>=|!=|[<>=~^])?\d+\.\d+\.\d+-[0-9A-Za-z]")
_OPERATOR_ALIASES = (("~>", "~"), ("==", "="))

Spec = Union[semantic_version.NpmSpec, semantic_version.SimpleSpec]


@dataclass(frozen=True)
class Alternative:
    """One ``||`` branch of a selector."""
    spec: Spec
    allows_prerelease: bool

    def matches(self, candidate: Version) -> bool:
        if candidate.prerelease and not self.allows_prerelease:
            return False
        return bool(self.spec.match(candidate))


@dataclass(frozen=True)
class Constraint:
    """Parsed selector: matches when any alternative matches."""
    raw: str
    alternatives: Tuple[Alternative, ...]

    def matches(self, candidate: Version) -> bool:
        candidate = candidate.truncate("prerelease")
        return any(alt.matches(candidate) for alt in self.alternatives)

    def __str__(self) -> str:
        return self.raw


def _tokenize(text: str) -> List[str]:
    """Split one alternative into comparators; ``a - b`` becomes ``>=a <=b``."""
    s = _OPERATOR_SPACE_RE.sub(r"\1", text.replace(",", " "))
    tokens = _V_PREFIX_RE.sub("", s).split()
    for old, new in _OPERATOR_ALIASES:
        tokens = [new + t[len(old):] if t.startswith(old) else t for t in tokens]

    comparators: List[str] = []
    i = 0
    while i < len(tokens):
        if i + 2 < len(tokens) and tokens[i + 1] == "-":
            comparators += [">=" + tokens[i], "<=" + tokens[i + 2]]
            i += 3
        else:
            comparators.append(tokens[i])
            i += 1
    if "-" in comparators:
        raise ValueError("incomplete hyphen range")
    return comparators


def _prerelease_bounds(comparator: str) -> List[str]:
    """Spell ``~`` or ``^`` on a pre-release version as a lower and upper bound."""
    op = comparator[:1]
    if op not in ("~", "^"):
        return [comparator]
    target = Version(comparator[1:])
    release = target.truncate()
    if op == "~" or (not target.major and target.minor):
        high = release.next_minor()
    elif target.major:
        high = release.next_major()
    else:
        high = release.next_patch()
    return [f">={target}", f"<{high}"]


def _parse_alternative(text: str) -> Alternative:
    comparators = _tokenize(text)
    if not comparators:
        raise ValueError("empty alternative")
    flagged = [bool(_PRERELEASE_RE.match(c)) for c in comparators]

    if any(flagged):
        # npm ranges only admit pre-releases of the same patch; compare by plain precedence instead
        blocks: List[str] = []
        for comparator, is_pre in zip(comparators, flagged):
            blocks += _prerelease_bounds(comparator) if is_pre else [comparator]
        spec: Spec = semantic_version.SimpleSpec(",".join(blocks))
    else:
        try:
            spec = semantic_version.NpmSpec(" ".join(comparators))
        except ValueError:
            # Fallback to SimpleSpec if NpmSpec cannot parse (e.g. '!=')
            spec = semantic_version.SimpleSpec(",".join(comparators))
    return Alternative(spec=spec, allows_prerelease=all(flagged))


def parse_constraint(selector: str) -> Constraint:
    """Parse a version selector into a Constraint.

    Args:
        selector: An exact version ("3.1.5"), or a range expression
            (">=2.0.0, <4.0.0", "~3.x", "^3.1 || 2.7.x").

    Raises:
        InvalidConstraint: If the selector cannot be parsed.
    """
    raw = selector.strip()
    if not raw:
        raise InvalidConstraint(selector, "empty constraint")
    try:
        alternatives = tuple(_parse_alternative(part) for part in raw.split("||"))
    except ValueError as exc:
        raise InvalidConstraint(raw, str(exc)) from exc
    return Constraint(raw=raw, alternatives=alternatives)
