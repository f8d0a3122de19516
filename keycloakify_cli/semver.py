"""Semantic version parsing (https://semver.org, 2.0.0)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Tuple, Union

_NUMERIC = r"0|[1-9]\d*"
_PRERELEASE_ID = rf"(?:{_NUMERIC}|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_ID = r"[0-9a-zA-Z-]+"

SEMVER_PATTERN = re.compile(
    rf"^(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    rf"(?:\+(?P<build>{_BUILD_ID}(?:\.{_BUILD_ID})*))?$"
)


class InvalidVersionFormat(ValueError):
    """Raised when a string is not a valid semantic version."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid semantic version: {value!r}")


def _prerelease_key(identifier: str) -> Tuple[int, Union[int, str]]:
    # Numeric identifiers sort before alphanumeric ones.
    if identifier.isdigit():
        return (0, int(identifier))
    return (1, identifier)


@total_ordering
@dataclass(frozen=True)
class SemVer:
    major: int
    minor: int
    patch: int
    prerelease: Tuple[str, ...] = ()
    build: Tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def parse(cls, text: str) -> "SemVer":
        """Parse ``text`` or raise :class:`InvalidVersionFormat`."""
        if not isinstance(text, str):
            raise InvalidVersionFormat(text)
        match = SEMVER_PATTERN.fullmatch(text)
        if match is None:
            raise InvalidVersionFormat(text)
        prerelease = match.group("prerelease")
        build = match.group("build")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=tuple(prerelease.split(".")) if prerelease else (),
            build=tuple(build.split(".")) if build else (),
        )

    def _precedence(self):
        release = (self.major, self.minor, self.patch)
        if not self.prerelease:
            # A release outranks any of its pre-releases.
            return (release, 1, ())
        return (release, 0, tuple(_prerelease_key(p) for p in self.prerelease))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence() == other._precedence()

    def __hash__(self) -> int:
        return hash(self._precedence())

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


def is_valid(text: object) -> bool:
    """Return True when ``text`` parses as a semantic version."""
    try:
        SemVer.parse(text)  # type: ignore[arg-type]
    except InvalidVersionFormat:
        return False
    return True
