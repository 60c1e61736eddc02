"""Parse the process environment listing and normalize lookup keys."""

from collections.abc import Iterable
from enum import Enum

from osenv.errors import MalformedEnvironmentEntry


def parse_environment_entry(raw: str) -> tuple[str, str]:
    """Split a ``NAME=value`` entry on the first ``=``.

    The name is lower-cased; the value is kept verbatim, so
    ``"A=b=c"`` becomes ``("a", "b=c")``.

    Raises:
        MalformedEnvironmentEntry: If the entry contains no ``=``.
    """
    name, sep, value = raw.partition("=")
    if not sep:
        raise MalformedEnvironmentEntry(f"Environment entry has no '=': {raw!r}")
    return name.lower(), value


def environment_variables(entries: Iterable[str]) -> list[tuple[str, str]]:
    return [parse_environment_entry(entry) for entry in entries]


def normalize_key(name: str | Enum) -> str:
    """Upper-case a variable name given as a string or an enum member."""
    if isinstance(name, Enum):
        name = name.name
    return name.upper()
