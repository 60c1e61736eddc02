"""CPU architecture classification from free-form tool output."""

import re

from osenv.core.models import Architecture
from osenv.errors import UnclassifiedArchitecture

_ARCH_64 = re.compile(r"64-bit|x86_64|ia64|amd64")
_ARCH_32 = re.compile(r"32-bit|i386|i486|i586|i686|x86")


def classify_architecture(text: str) -> Architecture:
    """Classify ``uname -a`` or ``file`` output as x86 or x86_64.

    64-bit markers win over 32-bit ones, so ``"x86_64"`` is never read as
    ``x86``. Matching is case-sensitive.

    Raises:
        UnclassifiedArchitecture: If neither pattern matches.
    """
    if _ARCH_64.search(text):
        return Architecture.X86_64
    if _ARCH_32.search(text):
        # TODO: tell ia32 and amd32 apart from plain x86
        return Architecture.X86
    raise UnclassifiedArchitecture(f"Unrecognised architecture in: {text!r}")
