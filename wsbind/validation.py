"""Workspace binding validation.

Two independent checks run before a run is admitted:

- ``validate_bindings``: every binding is well-formed and the bound names
  are set-equal to the declared names.
- ``validate_only_one_pvc_is_used``: the bindings use at most one distinct
  persistent volume claim, as required by the affinity assistant.

Both are pure functions.  They return ``None`` on success and raise a
``WorkspaceValidationError`` subclass on the first violation found.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from wsbind.models.enums import StorageSourceKind
from wsbind.models.workspace import WorkspaceBinding, WorkspaceDeclaration

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class WorkspaceValidationError(ValueError):
    """Base class for rejected workspace bindings."""


class BindingInvalidError(WorkspaceValidationError):
    """A single binding failed its own well-formedness check."""

    def __init__(self, name: str, cause: Exception) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f'binding "{name}" is invalid: {cause}')


class NameMismatchError(WorkspaceValidationError):
    """Bound workspace names differ from the declared ones."""

    def __init__(self, missing: list[str], unexpected: list[str]) -> None:
        self.missing = missing
        self.unexpected = unexpected
        problems = []
        if missing:
            problems.append(f"didn't provide required values: [{', '.join(missing)}]")
        if unexpected:
            problems.append(f"provided extra values: [{', '.join(unexpected)}]")
        super().__init__(f"bound workspaces did not match declared workspaces: {'; '.join(problems)}")


class MultiplePVCError(WorkspaceValidationError):
    """More than one distinct persistent volume claim is bound."""

    def __init__(self) -> None:
        super().__init__("more than one PersistentVolumeClaim is bound")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_bindings(
    declarations: Sequence[WorkspaceDeclaration],
    bindings: Sequence[WorkspaceBinding],
) -> None:
    """Check that ``bindings`` satisfy the workspaces in ``declarations``.

    Order does not matter and duplicate names collapse: the comparison is on
    the two name *sets*.

    Raises
    ------
    BindingInvalidError:
        A binding failed ``WorkspaceBinding.check`` (the first one wins).
    NameMismatchError:
        A declared workspace is unbound, or a binding names an undeclared one.
    """
    for binding in bindings:
        try:
            binding.check()
        except ValueError as exc:
            raise BindingInvalidError(binding.name, exc) from exc

    declared_names = [d.name for d in declarations]
    bound_names = [b.name for b in bindings]

    missing = _difference(declared_names, bound_names)
    unexpected = _difference(bound_names, declared_names)
    if missing or unexpected:
        raise NameMismatchError(missing, unexpected)


def validate_only_one_pvc_is_used(bindings: Sequence[WorkspaceBinding]) -> None:
    """Check that ``bindings`` use at most one persistent volume claim.

    Only meaningful when the affinity assistant schedules the run.  A claim
    reference counts as its ``claim_name``; a volume claim template counts as
    the binding's own name, since the provisioned claim belongs to it.

    Raises
    ------
    MultiplePVCError:
        Two or more distinct claims are bound.
    """
    claims: set[str] = set()
    for binding in bindings:
        claims.update(_claim_identities(binding))

    if len(claims) > 1:
        raise MultiplePVCError()


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _difference(left: Iterable[str], right: Iterable[str]) -> list[str]:
    """Names in ``left`` but not in ``right``, once each, in ``left`` order."""
    exclude = set(right)
    return list(dict.fromkeys(name for name in left if name not in exclude))


def _claim_identities(binding: WorkspaceBinding) -> list[str]:
    identities = []
    for kind in binding.storage_sources():
        match kind:
            case StorageSourceKind.PERSISTENT_VOLUME_CLAIM:
                identities.append(binding.persistent_volume_claim.claim_name)  # type: ignore[union-attr]
            case StorageSourceKind.VOLUME_CLAIM_TEMPLATE:
                identities.append(binding.name)
            case StorageSourceKind.EMPTY_DIR | StorageSourceKind.CONFIG_MAP | StorageSourceKind.SECRET:
                pass
            case unknown:
                msg = f"unhandled storage source kind: {unknown}"
                raise AssertionError(msg)
    return identities
