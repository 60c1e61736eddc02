import pytest

from osenv.core.models import Architecture
from osenv.errors import UnclassifiedArchitecture
from osenv.utils.arch import classify_architecture


@pytest.mark.parametrize(
    "text",
    [
        "Linux host 5.15.0 #1 SMP x86_64 GNU/Linux",
        "libfoo.so: ELF 64-bit LSB shared object",
        "FreeBSD host 13.2-RELEASE amd64",
        "HP-UX host B.11.31 U ia64",
    ],
)
def test_64_bit_markers(text: str) -> None:
    assert classify_architecture(text) == Architecture.X86_64


@pytest.mark.parametrize(
    "text",
    [
        "Linux host 2.6.32 #1 SMP i686 GNU/Linux",
        "libfoo.so: ELF 32-bit LSB shared object, Intel 80386",
        "Linux old 2.4.20 i386",
        "PE32 executable (DLL) x86, for MS Windows",
    ],
)
def test_32_bit_markers(text: str) -> None:
    assert classify_architecture(text) == Architecture.X86


def test_64_bit_wins_when_both_present() -> None:
    assert classify_architecture("x86_64 kernel running i686 userland") == Architecture.X86_64


def test_unknown_architecture_raises() -> None:
    with pytest.raises(UnclassifiedArchitecture):
        classify_architecture("arm64")


def test_match_is_case_sensitive() -> None:
    with pytest.raises(UnclassifiedArchitecture):
        classify_architecture("AMD64")
