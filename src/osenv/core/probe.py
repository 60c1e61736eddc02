"""Platform probe: OS, architecture, executables, libraries and roots."""

import fnmatch
import logging
import os
import shutil
import sys
import sysconfig
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import overload

from osenv.core.config import ProbeSettings
from osenv.core.models import (
    Architecture,
    EscriptLocation,
    LibraryInfo,
    OSIdentity,
    OSType,
    PlatformSnapshot,
    RuntimeMode,
)
from osenv.errors import HomeDirectoryUnavailable, IntegerParseError, VersionParseError
from osenv.utils.arch import classify_architecture
from osenv.utils.commands import CommandRunner, SubprocessRunner, trim_command_output
from osenv.utils.environment import environment_variables, normalize_key
from osenv.utils.family import (
    executable_name,
    library_path_environment_variable,
    load_path_variable,
    path_separator,
)

logger = logging.getLogger(__name__)

ESCRIPT = "escript"


def _executable_in(directory: Path, exe: str) -> str | None:
    # shutil.which would also try the cwd on Windows
    candidate = directory / exe
    if candidate.is_file() and os.access(candidate, os.X_OK):
        return str(candidate)
    return None


class PlatformProbe:
    """Stateless platform queries over an injectable runner and environment.

    Every call recomputes its answer; nothing is cached. The probe only
    holds immutable configuration, so one instance can be shared freely.
    """

    def __init__(
        self,
        settings: ProbeSettings | None = None,
        runner: CommandRunner | None = None,
        environ: Mapping[str, str] | None = None,
        os_type: OSType | None = None,
    ) -> None:
        """Initialize the probe.

        Args:
            settings: Runtime mode and path overrides (loaded from the
                environment and nearest .env when omitted)
            runner: Command runner for ``uname``, ``file`` and friends
            environ: Environment table to read (defaults to ``os.environ``)
            os_type: Interpreter OS type (defaults to the running platform)
        """
        self.settings = settings or ProbeSettings.load()
        self.runner = runner or SubprocessRunner()
        self.environ = os.environ if environ is None else environ
        self.os_type = os_type or OSType.current()

    # --- Environment ---

    def environment_variables(self) -> list[tuple[str, str]]:
        """Return every environment entry with a lower-cased name."""
        return environment_variables(f"{name}={value}" for name, value in self.environ.items())

    @overload
    def get(self, name: str | Enum) -> str | None: ...

    @overload
    def get(self, name: str | Enum, default: str) -> str: ...

    def get(self, name: str | Enum, default: str | None = None) -> str | None:
        """Look up a variable by its upper-cased name.

        ``get("path")`` and ``get(Key.path)`` both read ``PATH``. Returns
        *default* (``None`` unless given) when the variable is unset.
        """
        return self.environ.get(normalize_key(name), default)

    # --- OS identification ---

    def command_output(self, *args: str) -> str:
        """Run a command and return its trimmed output."""
        return trim_command_output(self.runner.run(list(args)), self.os_type.family)

    def inspect_os(self) -> OSIdentity:
        if self.os_type.is_windows:
            return OSIdentity("windows", None)
        family = self.command_output("uname", "-s")
        release = self.command_output("uname", "-r")
        return OSIdentity(family, self._parse_release(release))

    @staticmethod
    def _parse_release(release: str) -> tuple[int, ...]:
        parts = []
        for segment in release.split("."):
            if not segment:
                continue
            if not segment.isdecimal():
                raise VersionParseError(
                    f"Kernel release segment {segment!r} is not an integer in {release!r}"
                )
            parts.append(int(segment))
        return tuple(parts)

    def detect_architecture(self, identity: OSIdentity) -> Architecture:
        if identity.is_windows:
            # TODO: query PROCESSOR_ARCHITECTURE instead of assuming x86
            return Architecture.X86
        return classify_architecture(self.command_output("uname", "-a"))

    def detect_word_width(self, identity: OSIdentity) -> int:
        if identity.is_windows:
            # TODO: detect 64-bit Windows hosts
            return 32
        output = self.command_output("getconf", "LONG_BIT")
        if not output.isdecimal():
            raise IntegerParseError(f"getconf LONG_BIT returned {output!r}")
        return int(output)

    # --- Executables and libraries ---

    def executable_name(self, name: str) -> str:
        return executable_name(name, self.os_type)

    def find_executable(self, name: str, search_dir: str | Path | None = None) -> str | None:
        """Find *name* on PATH, or only in *search_dir* when given."""
        exe = self.executable_name(name)
        if search_dir is None:
            found = shutil.which(exe, path=self.environ.get("PATH", os.defpath))
        else:
            found = _executable_in(Path(search_dir), exe)
        if found is None:
            logger.debug(f"Executable not found: {exe} (search dir: {search_dir or 'PATH'})")
        return found

    def default_escript_executable(self) -> EscriptLocation:
        install_root = self.settings.install_root or Path(sys.base_prefix)
        return EscriptLocation(self.find_executable(ESCRIPT, install_root / "bin"), is_default=True)

    def locate_escript(self, root: str | Path | None = None) -> EscriptLocation:
        """Find escript under ``<root>/bin``, else under the install root."""
        if root is None:
            return self.default_escript_executable()
        found = self.find_executable(ESCRIPT, Path(root) / "bin")
        if found is None:
            logger.info(f"No escript under {root}, falling back to the install root")
            return self.default_escript_executable()
        return EscriptLocation(found, is_default=False)

    def locate_library(self, search_path: str | Path, pattern: str) -> LibraryInfo | None:
        """Find the first file under *search_path* whose name matches *pattern*.

        The walk visits directories and files in sorted order, so the match
        is stable for a given filesystem snapshot. The library's
        architecture comes from ``file`` output.
        """
        matches = []
        for dirpath, dirnames, filenames in os.walk(search_path):
            dirnames.sort()
            for filename in sorted(fnmatch.filter(filenames, pattern)):
                matches.append(os.path.join(dirpath, filename))

        if not matches:
            logger.debug(f"No library matching {pattern!r} under {search_path}")
            return None

        lib_file = matches[0]
        info = LibraryInfo(
            search_path=str(search_path),
            found_file=lib_file,
            architecture=self.detect_library_architecture(lib_file),
        )
        logger.info(f"Located library {lib_file} ({info.architecture})")
        return info

    def detect_library_architecture(self, lib_path: str) -> Architecture:
        return classify_architecture(self.command_output("file", lib_path))

    def library_path_environment_variable(self, identity: OSIdentity) -> str:
        return library_path_environment_variable(identity)

    def path_separator(self, identity: OSIdentity) -> str:
        return path_separator(identity)

    def compute_load_path(self, candidate: str) -> tuple[str, str]:
        """Prepend *candidate* to the dynamic-library search path.

        Returns the variable name and its new value; the environment itself
        is not modified.
        """
        variable, sep = load_path_variable(self.os_type)
        existing = self.environ.get(variable)
        if existing is None:
            return variable, candidate
        parts = [part for part in existing.split(sep) if part]
        return variable, sep.join([candidate, *parts])

    # --- Filesystem roots ---

    def home_directory(self) -> Path:
        if self.settings.home_dir is not None:
            return self.settings.home_dir
        variable = "USERPROFILE" if self.os_type.is_windows else "HOME"
        home = self.environ.get(variable)
        if not home:
            raise HomeDirectoryUnavailable(f"{variable} is not set")
        return Path(home)

    def code_directory(self) -> Path:
        override = self.environ.get(self.settings.code_dir_variable)
        if override:
            return Path(override)
        return Path(sysconfig.get_path("purelib"))

    def root_directory(self, mode: RuntimeMode | None = None) -> Path:
        """Return the tool's root directory.

        Scripted runs use the directory holding the running script;
        standalone runs use the parent of the current working directory.
        """
        mode = mode or self.settings.runtime_mode
        if mode == RuntimeMode.STANDALONE:
            return Path.cwd().parent
        script = self.settings.script_path or Path(sys.argv[0])
        return Path(os.path.dirname(script))

    def relative_path(self, segments: list[str]) -> Path:
        return (self.root_directory() / Path(*segments)).absolute()

    def cached_filename(self, name: str) -> Path:
        return self.relative_path(["build", "cache", name])

    def username(self) -> str:
        if self.os_type.is_windows:
            return self.command_output("whoami", "/UPN").split("@", 1)[0]
        return self.command_output("whoami")

    # --- Summary ---

    def snapshot(self) -> PlatformSnapshot:
        identity = self.inspect_os()
        return PlatformSnapshot(
            os_family=identity.family,
            os_version=identity.version,
            architecture=self.detect_architecture(identity),
            word_width=self.detect_word_width(identity),
            username=self.username(),
        )


def format_platform_context(snapshot: PlatformSnapshot) -> str:
    """Format a snapshot into a text block for tool logs and prompts."""
    identity = OSIdentity(snapshot.os_family, snapshot.os_version)
    return (
        f"OS: {snapshot.os_family}\n"
        f"Kernel: {identity.version_string}\n"
        f"Architecture: {snapshot.architecture.value}\n"
        f"Word width: {snapshot.word_width}\n"
        f"User: {snapshot.username}"
    )
