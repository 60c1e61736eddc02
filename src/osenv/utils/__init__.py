"""Pure helpers shared by the platform probe."""

from osenv.utils.arch import classify_architecture
from osenv.utils.commands import CommandRunner, SubprocessRunner, trim_command_output
from osenv.utils.environment import (
    environment_variables,
    normalize_key,
    parse_environment_entry,
)
from osenv.utils.family import (
    executable_name,
    library_path_environment_variable,
    load_path_variable,
    path_separator,
)

__all__ = [
    "classify_architecture",
    "CommandRunner",
    "SubprocessRunner",
    "trim_command_output",
    "environment_variables",
    "normalize_key",
    "parse_environment_entry",
    "executable_name",
    "library_path_environment_variable",
    "load_path_variable",
    "path_separator",
]
