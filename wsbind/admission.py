"""Pre-admission workspace checks for a run.

Runs the binding-set check first; the single-claim check only applies when
the affinity assistant schedules the run, since it is the affinity assistant
that pins every sub-unit to the node holding the claim.
"""

from __future__ import annotations

from collections.abc import Sequence

from wsbind.log import get_logger
from wsbind.models.workspace import WorkspaceBinding, WorkspaceDeclaration
from wsbind.settings import get_settings
from wsbind.validation import (
    WorkspaceValidationError,
    validate_bindings,
    validate_only_one_pvc_is_used,
)


def admit_run(
    declarations: Sequence[WorkspaceDeclaration],
    bindings: Sequence[WorkspaceBinding],
    *,
    affinity_assistant_enabled: bool | None = None,
) -> None:
    """Validate a run's workspace bindings before it is created.

    Parameters
    ----------
    declarations:
        Workspaces declared by the task or pipeline definition.
    bindings:
        Workspaces bound by the run.
    affinity_assistant_enabled:
        Whether to enforce the single-claim rule.  ``None`` reads
        ``WsbindSettings.affinity_assistant_enabled``.

    Raises
    ------
    WorkspaceValidationError:
        The first violation found; the run must be rejected.
    """
    if affinity_assistant_enabled is None:
        affinity_assistant_enabled = get_settings().affinity_assistant_enabled

    log = get_logger(
        declared=[d.name for d in declarations],
        bound=[b.name for b in bindings],
        affinity_assistant=affinity_assistant_enabled,
    )

    try:
        validate_bindings(declarations, bindings)
        if affinity_assistant_enabled:
            validate_only_one_pvc_is_used(bindings)
    except WorkspaceValidationError as exc:
        log.warning("Rejected workspace bindings: {}", exc)
        raise

    log.debug(
        "Admitted {} workspace binding(s) (affinity assistant {})",
        len(bindings),
        "enabled" if affinity_assistant_enabled else "disabled",
    )
