"""Shared fixtures for osenv tests."""

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

from osenv.core.config import ProbeSettings
from osenv.core.models import OSFamily, OSType
from osenv.core.probe import PlatformProbe

LINUX = OSType(OSFamily.OTHER_UNIX, "linux")


class FakeRunner:
    """Returns canned output per argv and records every call."""

    def __init__(self, outputs: Mapping[tuple[str, ...], str] | None = None) -> None:
        self.outputs = dict(outputs or {})
        self.calls: list[list[str]] = []

    def run(self, args: list[str]) -> str:
        self.calls.append(args)
        try:
            return self.outputs[tuple(args)]
        except KeyError:
            raise AssertionError(f"Unexpected command: {args}") from None


ProbeFactory = Callable[..., PlatformProbe]


@pytest.fixture
def make_probe() -> ProbeFactory:
    """Build a probe with a fake runner, an explicit environment and no .env file."""

    def factory(
        outputs: Mapping[tuple[str, ...], str] | None = None,
        environ: Mapping[str, str] | None = None,
        os_type: OSType = LINUX,
        **settings: object,
    ) -> PlatformProbe:
        return PlatformProbe(
            settings=ProbeSettings(_env_file=None, **settings),  # type: ignore[call-arg]
            runner=FakeRunner(outputs),
            environ=dict(environ or {}),
            os_type=os_type,
        )

    return factory


@pytest.fixture
def library_tree(tmp_path: Path) -> Path:
    """A directory tree with one shared library nested two levels down."""
    lib_dir = tmp_path / "lib" / "crypto"
    lib_dir.mkdir(parents=True)
    (lib_dir / "libcrypto.so").write_bytes(b"\x7fELF")
    (tmp_path / "lib" / "README.txt").write_text("not a library\n")
    return tmp_path
