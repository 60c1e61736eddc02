import sys
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Architecture(StrEnum):
    X86 = "x86"
    X86_64 = "x86_64"


class OSFamily(StrEnum):
    WINDOWS = "windows"
    DARWIN = "darwin"
    OTHER_UNIX = "unix"


class RuntimeMode(StrEnum):
    """How the host tool was launched.

    ``standalone`` is a packaged artifact run from its install directory,
    ``scripted`` is a script interpreted in place.
    """

    STANDALONE = "standalone"
    SCRIPTED = "scripted"


@dataclass(frozen=True)
class OSType:
    """Interpreter-level OS type, as reported by ``sys.platform``."""

    family: OSFamily
    name: str

    @classmethod
    def from_platform(cls, platform_name: str) -> "OSType":
        if platform_name == "win32":
            return cls(OSFamily.WINDOWS, platform_name)
        if platform_name == "darwin":
            return cls(OSFamily.DARWIN, platform_name)
        return cls(OSFamily.OTHER_UNIX, platform_name)

    @classmethod
    def current(cls) -> "OSType":
        return cls.from_platform(sys.platform)

    @property
    def is_windows(self) -> bool:
        return self.family == OSFamily.WINDOWS


WINDOWS_FAMILY = "windows"


@dataclass(frozen=True)
class OSIdentity:
    """Kernel-level identity: ``uname -s`` name and release numbers.

    On Windows the family is ``"windows"`` and the version is unknown
    (``None``).
    """

    family: str
    version: tuple[int, ...] | None = None

    @property
    def is_windows(self) -> bool:
        return self.family == WINDOWS_FAMILY

    @property
    def is_darwin(self) -> bool:
        return self.family.lower() == "darwin"

    @property
    def version_string(self) -> str:
        if self.version is None:
            return "unknown"
        return ".".join(str(part) for part in self.version)


@dataclass(frozen=True)
class LibraryInfo:
    search_path: str
    found_file: str
    architecture: Architecture

    def to_dict(self) -> dict[str, Any]:
        return {
            "search_path": self.search_path,
            "found_file": self.found_file,
            "architecture": self.architecture.value,
        }


@dataclass(frozen=True)
class EscriptLocation:
    """Result of an escript lookup.

    ``is_default`` marks results found under the system install root rather
    than under a caller-supplied root. ``path`` is ``None`` when nothing was
    found.
    """

    path: str | None
    is_default: bool = False

    @property
    def found(self) -> bool:
        return self.path is not None


@dataclass(frozen=True)
class PlatformSnapshot:
    os_family: str
    os_version: tuple[int, ...] | None
    architecture: Architecture
    word_width: int
    username: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "os_family": self.os_family,
            "os_version": list(self.os_version) if self.os_version is not None else None,
            "architecture": self.architecture.value,
            "word_width": self.word_width,
            "username": self.username,
        }
