"""Tests for per-OS privilege policies."""

from __future__ import annotations

import pytest

from phaseconf.policy import POSIX_POLICY, WINDOWS_POLICY, policy_for_os
from phaseconf.spec import ExecConfig


class TestPolicyForOs:
    """Tests for policy_for_os."""

    def test_windows(self) -> None:
        assert policy_for_os("windows") is WINDOWS_POLICY

    @pytest.mark.parametrize("os_name", ["linux", "darwin", ""])
    def test_everything_else_is_posix(self, os_name: str) -> None:
        assert policy_for_os(os_name) is POSIX_POLICY


class TestPosixPolicy:
    """Tests for the POSIX policy."""

    def test_admin_user(self) -> None:
        assert POSIX_POLICY.admin_user == "root"

    def test_daemon_socket(self) -> None:
        assert POSIX_POLICY.daemon_socket_bind == "/var/run/docker.sock:/var/run/docker.sock"

    def test_no_execs(self) -> None:
        assert POSIX_POLICY.execs == ()


class TestWindowsPolicy:
    """Tests for the Windows policy."""

    def test_admin_user(self) -> None:
        assert WINDOWS_POLICY.admin_user == "NT AUTHORITY\\SYSTEM"

    def test_daemon_named_pipe(self) -> None:
        assert WINDOWS_POLICY.daemon_socket_bind == r"\\.\pipe\docker_engine:\\.\pipe\docker_engine"

    def test_single_waiting_exec(self) -> None:
        """One detached, stdin-attached exec that blocks on input."""
        assert WINDOWS_POLICY.execs == (
            ExecConfig(
                cmd=("cmd.exe", "/c", "set /p wait="),
                detach=True,
                attach_stdin=True,
                user="",
            ),
        )
