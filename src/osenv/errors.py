"""Errors raised by platform probes.

Lookups that find nothing return ``None``; only parse and detection
failures raise.
"""


class OsEnvError(Exception):
    pass


class MalformedEnvironmentEntry(OsEnvError):
    """Raised when an environment entry has no ``=`` separator."""

    pass


class VersionParseError(OsEnvError, ValueError):
    """Raised when a kernel release segment is not a decimal integer."""

    pass


class IntegerParseError(OsEnvError, ValueError):
    """Raised when numeric command output cannot be parsed."""

    pass


class UnclassifiedArchitecture(OsEnvError):
    """Raised when a string matches no known CPU architecture pattern."""

    pass


class HomeDirectoryUnavailable(OsEnvError):
    """Raised when the launch environment carries no home directory."""

    pass
