"""Data models for workspace declarations and bindings."""

from wsbind.models.enums import StorageSourceKind
from wsbind.models.workspace import (
    ConfigMapSource,
    EmptyDirSource,
    InvalidBindingSourceError,
    PersistentVolumeClaimSource,
    SecretSource,
    VolumeClaimTemplate,
    WorkspaceBinding,
    WorkspaceDeclaration,
)

__all__ = [
    # Storage sources
    "ConfigMapSource",
    "EmptyDirSource",
    # Errors
    "InvalidBindingSourceError",
    "PersistentVolumeClaimSource",
    "SecretSource",
    # Enums
    "StorageSourceKind",
    "VolumeClaimTemplate",
    # Workspaces
    "WorkspaceBinding",
    "WorkspaceDeclaration",
]
