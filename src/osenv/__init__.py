"""
osenv - cross-platform OS probing

Environment access, OS/architecture detection, executable and library
lookup, and root-directory resolution for build tooling.
"""

from osenv.core.config import ProbeSettings
from osenv.core.models import (
    Architecture,
    EscriptLocation,
    LibraryInfo,
    OSFamily,
    OSIdentity,
    OSType,
    PlatformSnapshot,
    RuntimeMode,
)
from osenv.core.probe import PlatformProbe, format_platform_context

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "__version__",
    "Architecture",
    "EscriptLocation",
    "LibraryInfo",
    "OSFamily",
    "OSIdentity",
    "OSType",
    "PlatformProbe",
    "PlatformSnapshot",
    "ProbeSettings",
    "RuntimeMode",
    "format_platform_context",
]
