"""Per-OS decision tables: suffixes, separators and load-path variables.

``library_path_environment_variable`` and ``path_separator`` key off the
kernel identity returned by ``inspect_os``. ``load_path_variable`` keys off
the interpreter's OS type. The two tables are kept separate on purpose and
do not agree on Windows (``LIB`` vs ``PATH``).
"""

from osenv.core.models import OSFamily, OSIdentity, OSType

_EXECUTABLE_SUFFIXES = (".bat", ".exe")

_LOAD_PATH: dict[OSFamily, tuple[str, str]] = {
    OSFamily.WINDOWS: ("PATH", ";"),
    OSFamily.DARWIN: ("DYLD_LIBRARY_PATH", ":"),
    OSFamily.OTHER_UNIX: ("LD_LIBRARY_PATH", ":"),
}


def executable_name(name: str, os_type: OSType) -> str:
    if not os_type.is_windows:
        return name
    if name.endswith(_EXECUTABLE_SUFFIXES):
        return name
    return f"{name}.exe"


# TODO: cover the BSDs and other kernels that use their own variable
def library_path_environment_variable(identity: OSIdentity) -> str:
    if identity.is_windows:
        return "LIB"
    if identity.is_darwin:
        return "DYLD_LIBRARY_PATH"
    return "LD_LIBRARY_PATH"


def path_separator(identity: OSIdentity) -> str:
    return ";" if identity.is_windows else ":"


def load_path_variable(os_type: OSType) -> tuple[str, str]:
    """Return ``(variable, separator)`` for the dynamic-library search path."""
    return _LOAD_PATH[os_type.family]
