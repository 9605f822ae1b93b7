"""Phase container assembly.

build_phase_spec() turns a phase name, an execution context and the caller's
operations into a finalized PhaseSpec. Mandatory operations (platform API env,
proxy env, layers/app binds) always run after the caller's operations, so they
cannot be suppressed or reordered by the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .constants import (
    AUTHOR_LABEL_KEY,
    AUTHOR_LABEL_VALUE,
    LIFECYCLE_ROOT,
    OS_WINDOWS,
    PLATFORM_API_ENV,
)
from .errors import ValidationError
from .operations import AddBinds, PhaseOperation, PropagateProxy, SetEnv
from .policy import PrivilegePolicy, policy_for_os
from .spec import ContainerConfig, ExecConfig, HostConfig, Isolation, PhaseSpec, PostCreateAction
from .streams import OutputRouter

if TYPE_CHECKING:
    from .context import ExecutionContext


def lifecycle_path(name: str) -> str:
    """Path of the lifecycle binary that runs a phase."""
    return f"{LIFECYCLE_ROOT}/{name}"


class PhaseConfigBuilder:
    """Mutable accumulator that operations are applied to.

    One builder is owned by one build call; finalize() copies its state into
    an immutable PhaseSpec.
    """

    def __init__(self, name: str, context: ExecutionContext) -> None:
        self.name = name
        self.os = context.os
        self.context = context
        self.policy: PrivilegePolicy = policy_for_os(context.os)

        self.image = context.builder_image
        self.env: list[str] = []
        self.cmd: list[str] = []
        self.user = ""
        self.labels: dict[str, str] = {AUTHOR_LABEL_KEY: AUTHOR_LABEL_VALUE}

        self.binds: list[str] = []
        self.network_mode = ""
        self.isolation = Isolation.PROCESS if context.os == OS_WINDOWS else Isolation.DEFAULT

        self.execs: list[ExecConfig] = []
        self.container_ops: list[PostCreateAction] = []
        self.streams = OutputRouter.for_logger(context.logger)

    def apply(self, operations: list[PhaseOperation]) -> None:
        for op in operations:
            op.apply(self)

    def finalize(self) -> PhaseSpec:
        """Prepend the lifecycle binary and freeze the accumulated state."""
        return PhaseSpec(
            name=self.name,
            os=self.os,
            container=ContainerConfig(
                image=self.image,
                env=tuple(self.env),
                cmd=(lifecycle_path(self.name), *self.cmd),
                user=self.user,
                labels=dict(self.labels),
            ),
            host=HostConfig(
                binds=tuple(self.binds),
                network_mode=self.network_mode,
                isolation=self.isolation,
            ),
            info_writer=self.streams.info,
            error_writer=self.streams.error,
            execs=tuple(self.execs),
            container_ops=tuple(self.container_ops),
        )


def mandatory_operations(context: ExecutionContext) -> list[PhaseOperation]:
    """Operations every phase container gets, applied after the caller's."""
    mounts = context.mount_paths
    return [
        SetEnv(f"{PLATFORM_API_ENV}={context.platform_api}"),
        PropagateProxy(context.proxy),
        AddBinds(
            f"{context.layers_volume}:{mounts.layers_dir}",
            f"{context.app_volume}:{mounts.app_dir}",
        ),
    ]


def _log_spec(context: ExecutionContext, spec: PhaseSpec) -> None:
    """Dump the assembled settings so runtime-side failures can be diagnosed."""
    logger = context.logger
    if not logger.isEnabledFor(logging.DEBUG):
        return

    record = spec.describe()
    logger.debug(
        "Running the %s on OS %s with:", spec.name, spec.os, extra={"phase_spec": record}
    )
    logger.debug("Container Settings:")
    logger.debug("  Args: %s", " ".join(record["args"]))
    logger.debug("  System Envs: %s", " ".join(record["env"]))
    logger.debug("  Image: %s", record["image"])
    logger.debug("  User: %s", record["user"])
    logger.debug("  Labels: %s", record["labels"])
    logger.debug("Host Settings:")
    logger.debug("  Binds: %s", " ".join(record["binds"]))
    logger.debug("  Network Mode: %s", record["network_mode"])


def build_phase_spec(
    name: str,
    context: ExecutionContext,
    *operations: PhaseOperation,
) -> PhaseSpec:
    """Assemble the container specification for one lifecycle phase.

    Args:
        name: Phase name; also the lifecycle binary name (e.g. "detector").
        context: Validated, read-only execution context.
        *operations: Caller operations, applied in order before the
            mandatory ones.

    Returns:
        Finalized PhaseSpec whose command starts with /cnb/lifecycle/<name>.

    Raises:
        ValidationError: If name is empty.
    """
    if not name:
        raise ValidationError("Phase name must not be empty")

    builder = PhaseConfigBuilder(name, context)
    builder.apply([*operations, *mandatory_operations(context)])
    spec = builder.finalize()

    _log_spec(context, spec)
    return spec
