"""Infrastructure: architecture and operating-system identifiers.

The identifiers mirror the names Zig uses for its build targets
(``x86_64``, ``aarch64``; ``linux``, ``macos``, ``windows``) so the
version banner reads the same way the toolchain downloads are named.
"""

from __future__ import annotations

import platform

_ARCH_ALIASES: dict[str, str] = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
    "i386": "x86",
    "i686": "x86",
    "armv7l": "arm",
}

_OS_ALIASES: dict[str, str] = {
    "darwin": "macos",
}


def current_arch() -> str:
    """Return the CPU architecture, e.g. ``x86_64``."""
    machine = platform.machine().lower()
    if not machine:
        return "unknown"
    return _ARCH_ALIASES.get(machine, machine)


def current_os() -> str:
    """Return the operating system tag, e.g. ``linux`` or ``macos``."""
    system = platform.system().lower()
    if not system:
        return "unknown"
    return _OS_ALIASES.get(system, system)
