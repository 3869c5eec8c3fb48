"""Workspace binding validation for run admission."""

from wsbind.admission import admit_run
from wsbind.validation import (
    BindingInvalidError,
    MultiplePVCError,
    NameMismatchError,
    WorkspaceValidationError,
    validate_bindings,
    validate_only_one_pvc_is_used,
)

__all__ = [
    "BindingInvalidError",
    "MultiplePVCError",
    "NameMismatchError",
    "WorkspaceValidationError",
    "admit_run",
    "validate_bindings",
    "validate_only_one_pvc_is_used",
]
