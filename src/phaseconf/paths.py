"""OS-aware mount points inside phase containers.

Linux containers mount volumes under the filesystem root (/layers); Windows
containers mount them on the c: volume with backslash separators (c:\\layers).
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_WORKSPACE, OS_WINDOWS, WINDOWS_VOLUME


@dataclass(frozen=True)
class MountPaths:
    """Resolver for container-side directories of one target OS.

    Examples:
        >>> MountPaths.for_os("linux").layers_dir
        '/layers'
        >>> MountPaths.for_os("windows", "app").app_dir
        'c:\\\\app'
    """

    volume: str = ""
    separator: str = "/"
    workspace: str = DEFAULT_WORKSPACE

    @classmethod
    def for_os(cls, os_name: str, workspace: str = "") -> MountPaths:
        """Build the resolver for a target OS.

        Args:
            os_name: Target OS tag ("linux" or "windows").
            workspace: App directory name; defaults to "workspace".
        """
        workspace = workspace or DEFAULT_WORKSPACE
        if os_name == OS_WINDOWS:
            return cls(volume=WINDOWS_VOLUME, separator="\\", workspace=workspace)
        return cls(volume="", separator="/", workspace=workspace)

    def join(self, *parts: str) -> str:
        return self.separator.join(parts)

    @property
    def layers_dir(self) -> str:
        return self.join(self.volume, "layers")

    @property
    def app_dir(self) -> str:
        return self.join(self.volume, self.workspace)
