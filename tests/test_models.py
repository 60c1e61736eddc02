import pytest

from osenv.core.models import (
    Architecture,
    EscriptLocation,
    LibraryInfo,
    OSFamily,
    OSIdentity,
    OSType,
)


@pytest.mark.parametrize(
    ("platform_name", "family"),
    [
        ("win32", OSFamily.WINDOWS),
        ("cygwin", OSFamily.OTHER_UNIX),
        ("darwin", OSFamily.DARWIN),
        ("linux", OSFamily.OTHER_UNIX),
        ("freebsd14", OSFamily.OTHER_UNIX),
    ],
)
def test_os_type_from_platform(platform_name: str, family: OSFamily) -> None:
    os_type = OSType.from_platform(platform_name)
    assert os_type.family == family
    assert os_type.name == platform_name


def test_os_type_current_is_consistent() -> None:
    import sys

    assert OSType.current().is_windows == (sys.platform == "win32")


def test_identity_flags() -> None:
    assert OSIdentity("windows").is_windows
    assert OSIdentity("Darwin", (23, 1, 0)).is_darwin
    assert not OSIdentity("Linux", (6, 1, 0)).is_darwin


def test_identity_version_string() -> None:
    assert OSIdentity("Linux", (6, 1, 0)).version_string == "6.1.0"
    assert OSIdentity("windows").version_string == "unknown"


def test_records_are_immutable() -> None:
    info = LibraryInfo("/opt", "/opt/libz.so", Architecture.X86_64)
    with pytest.raises(AttributeError):
        info.found_file = "/tmp/other.so"  # type: ignore[misc]
    location = EscriptLocation("/usr/bin/escript")
    assert location.is_default is False
    assert location.found
