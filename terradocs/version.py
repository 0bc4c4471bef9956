"""Version information of the package."""

from __future__ import annotations

import platform
import sys

_CORE_VERSION = "0.16.0"
_PRERELEASE = "alpha"

_ARCHES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "armv6l": "arm",
    "armv7l": "arm",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
}


def core() -> str:
    """The core version."""
    return _CORE_VERSION


def short() -> str:
    """The version with its pre-release tag, if any."""
    version = _CORE_VERSION
    if _PRERELEASE:
        version += "-" + _PRERELEASE
    return version


def full(commit: str = "") -> str:
    """The version with commit hash, operating system and architecture."""
    if commit and not commit.startswith(" "):
        commit = " " + commit
    return f"v{short()}{commit} {_os_name()}/{_arch_name()}"


def _os_name() -> str:
    name = sys.platform
    if name.startswith("linux"):
        return "linux"
    if name.startswith("freebsd"):
        return "freebsd"
    if name in ("win32", "cygwin"):
        return "windows"
    return name


def _arch_name() -> str:
    machine = platform.machine().lower()
    return _ARCHES.get(machine, machine or "unknown")