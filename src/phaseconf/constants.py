"""Constants module for phaseconf.

Fixed identities, environment variable names and socket binds are defined
here (SSOT). Nothing in this module is mutated at runtime.
"""

from __future__ import annotations

# === Target OS tags ===
OS_LINUX = "linux"
OS_WINDOWS = "windows"
SUPPORTED_OS = frozenset({OS_LINUX, OS_WINDOWS})

# === Lifecycle ===
LIFECYCLE_ROOT = "/cnb/lifecycle"  # Lifecycle binaries inside the builder image
STANDARD_PHASES = ("detector", "analyzer", "restorer", "builder", "exporter")

# Labels applied to every phase container
AUTHOR_LABEL_KEY = "author"
AUTHOR_LABEL_VALUE = "pack"

# === Environment variable names ===
PLATFORM_API_ENV = "CNB_PLATFORM_API"
REGISTRY_AUTH_ENV = "CNB_REGISTRY_AUTH"
HTTP_PROXY_ENV = "HTTP_PROXY"
HTTPS_PROXY_ENV = "HTTPS_PROXY"
NO_PROXY_ENV = "NO_PROXY"

# === Administrative identities ===
LINUX_CONTAINER_ADMIN = "root"
WINDOWS_CONTAINER_ADMIN = "NT AUTHORITY\\SYSTEM"

# === Daemon socket binds (host:container) ===
LINUX_DAEMON_SOCKET_BIND = "/var/run/docker.sock:/var/run/docker.sock"
WINDOWS_DAEMON_SOCKET_BIND = r"\\.\pipe\docker_engine:\\.\pipe\docker_engine"

# Keeps a Windows container session alive for a later impersonated exec
WINDOWS_WAIT_CMD = ("cmd.exe", "/c", "set /p wait=")

# === Mount paths ===
DEFAULT_WORKSPACE = "workspace"  # App directory name inside the container
WINDOWS_VOLUME = "c:"
