"""Parsers for apt-cache text reports.

``apt-cache policy`` prints two-space indented ``Installed:`` and
``Candidate:`` lines, using ``(none)`` when there is no version.
``apt-cache showpkg`` ends with a ``Reverse Provides:`` section listing
one providing package per line.
"""

import re
from dataclasses import dataclass
from enum import Enum

# Marker apt uses for "no version"
NONE_MARKER = "(none)"

_INSTALLED_RE = re.compile(r"^\s{2}Installed: (.+)$")
_CANDIDATE_RE = re.compile(r"^\s{2}Candidate: (.+)$")
_REVERSE_PROVIDES_RE = re.compile(r"Reverse Provides: ?\n")


class PolicyLineKind(Enum):
    """Classification of a single ``apt-cache policy`` output line."""

    INSTALLED = "installed"
    CANDIDATE = "candidate"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class PolicyLine:
    """A classified policy line.

    Attributes:
        kind: What the line reports.
        value: Normalized version, None for ``(none)`` and for OTHER lines.
    """

    kind: PolicyLineKind
    value: str | None = None


def normalize_version(raw: str) -> str | None:
    """Map apt's no-version marker to None."""
    return None if raw == NONE_MARKER else raw


def classify_policy_line(line: str) -> PolicyLine:
    """Classify one line of ``apt-cache policy`` output.

    Args:
        line: A single output line, with or without its line terminator.

    Returns:
        PolicyLine tagged INSTALLED, CANDIDATE or OTHER.
    """
    line = line.rstrip("\r\n")
    if match := _INSTALLED_RE.match(line):
        return PolicyLine(PolicyLineKind.INSTALLED, normalize_version(match.group(1)))
    if match := _CANDIDATE_RE.match(line):
        return PolicyLine(PolicyLineKind.CANDIDATE, normalize_version(match.group(1)))
    return PolicyLine(PolicyLineKind.OTHER)


def parse_policy_output(output: str) -> tuple[str | None, str | None]:
    """Extract installed and candidate versions from ``apt-cache policy`` output.

    When a marker appears more than once the last line wins.

    Args:
        output: Raw stdout of ``apt-cache policy <pkg>``.

    Returns:
        Tuple of (installed_version, candidate_version).
    """
    installed: str | None = None
    candidate: str | None = None
    for line in output.splitlines():
        parsed = classify_policy_line(line)
        if parsed.kind is PolicyLineKind.INSTALLED:
            installed = parsed.value
        elif parsed.kind is PolicyLineKind.CANDIDATE:
            candidate = parsed.value
    return installed, candidate


def parse_reverse_provides(output: str) -> set[str] | None:
    """Collect provider names from the last ``Reverse Provides:`` section.

    Only the first whitespace-delimited token of each line is used, so
    version and architecture columns are ignored. Blank lines are skipped.

    Args:
        output: Raw stdout of ``apt-cache showpkg <pkg>``.

    Returns:
        Set of provider names, or None if the section header is absent.
    """
    headers = list(_REVERSE_PROVIDES_RE.finditer(output))
    if not headers:
        return None

    providers: set[str] = set()
    for line in output[headers[-1].end() :].splitlines():
        tokens = line.split()
        if tokens:
            providers.add(tokens[0])
    return providers
