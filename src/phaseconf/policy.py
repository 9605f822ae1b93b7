"""Privilege policy per target OS.

Linux containers elevate to root and reach the daemon through a Unix socket.
Windows containers elevate to the SYSTEM account and reach the daemon through
a named pipe. Windows additionally needs a foreground process that blocks on
stdin: a later exec impersonating a non-privileged user only works while such
a session keeps the container attached.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    LINUX_CONTAINER_ADMIN,
    LINUX_DAEMON_SOCKET_BIND,
    OS_WINDOWS,
    WINDOWS_CONTAINER_ADMIN,
    WINDOWS_DAEMON_SOCKET_BIND,
    WINDOWS_WAIT_CMD,
)
from .spec import ExecConfig


@dataclass(frozen=True)
class PrivilegePolicy:
    """Administrative identity and daemon access for one OS."""

    admin_user: str
    daemon_socket_bind: str
    execs: tuple[ExecConfig, ...] = ()


POSIX_POLICY = PrivilegePolicy(
    admin_user=LINUX_CONTAINER_ADMIN,
    daemon_socket_bind=LINUX_DAEMON_SOCKET_BIND,
)

WINDOWS_POLICY = PrivilegePolicy(
    admin_user=WINDOWS_CONTAINER_ADMIN,
    daemon_socket_bind=WINDOWS_DAEMON_SOCKET_BIND,
    execs=(
        ExecConfig(
            cmd=WINDOWS_WAIT_CMD,
            detach=True,
            attach_stdin=True,
            user="",
        ),
    ),
)


def policy_for_os(os_name: str) -> PrivilegePolicy:
    """Select the privilege policy for a target OS.

    Any tag other than "windows" gets the POSIX policy.
    """
    if os_name == OS_WINDOWS:
        return WINDOWS_POLICY
    return POSIX_POLICY
