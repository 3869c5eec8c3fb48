"""Workspace declaration and binding models.

A *declaration* names a storage slot that a task or pipeline needs; a
*binding* supplies the concrete storage for that slot at run time.  Both are
read-only inputs built by the caller from a run specification.

Fields accept either snake_case names or the manifest's camelCase aliases
(``claimName``, ``volumeClaimTemplate``, ...).  A binding with zero or several
storage sources can be built and is rejected later by
``WorkspaceBinding.check``; a binding with an unknown key cannot be built.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from wsbind.models.enums import StorageSourceKind


class InvalidBindingSourceError(ValueError):
    """A binding does not select exactly one well-formed storage source."""


def _missing_field(path: str) -> InvalidBindingSourceError:
    return InvalidBindingSourceError(f"missing field(s): {path}")


def _key_list(kinds: Iterable[StorageSourceKind]) -> str:
    return "[" + ", ".join(kind.manifest_key for kind in kinds) + "]"


class _ManifestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# -- Storage sources ---------------------------------------------------------


class PersistentVolumeClaimSource(_ManifestModel):
    """Reference to an existing persistent volume claim."""

    claim_name: str = ""
    read_only: bool = False


class VolumeClaimTemplate(_ManifestModel):
    """Inline template for a claim provisioned for a single binding.

    The template body is opaque here; only its presence matters.
    """

    metadata: dict[str, Any] = Field(default_factory=dict)
    spec: dict[str, Any] = Field(default_factory=dict)


class EmptyDirSource(_ManifestModel):
    medium: str | None = None
    size_limit: str | None = None


class ConfigMapSource(_ManifestModel):
    name: str = ""
    items: list[dict[str, Any]] = Field(default_factory=list)


class SecretSource(_ManifestModel):
    secret_name: str = ""
    items: list[dict[str, Any]] = Field(default_factory=list)


# -- Workspaces --------------------------------------------------------------


class WorkspaceDeclaration(_ManifestModel):
    """A named workspace declared by a task or pipeline definition.

    Only ``name`` takes part in validation; the other fields are descriptive.
    """

    name: str
    description: str | None = None
    mount_path: str | None = None
    read_only: bool = False


class WorkspaceBinding(_ManifestModel):
    """Concrete storage supplied for a declared workspace at run time.

    Exactly one of the storage source fields should be set; see ``check``.
    Unknown keys are rejected at construction, so an unsupported storage
    source can never hide behind a supported one.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    sub_path: str | None = None

    persistent_volume_claim: PersistentVolumeClaimSource | None = None
    volume_claim_template: VolumeClaimTemplate | None = None
    empty_dir: EmptyDirSource | None = None
    config_map: ConfigMapSource | None = None
    secret: SecretSource | None = None

    def storage_sources(self) -> list[StorageSourceKind]:
        """Return the kinds of every storage source set on this binding."""
        return [kind for kind in StorageSourceKind if getattr(self, kind.value) is not None]

    @property
    def source_kind(self) -> StorageSourceKind | None:
        """The selected storage source, or ``None`` unless exactly one is set."""
        sources = self.storage_sources()
        return sources[0] if len(sources) == 1 else None

    def check(self) -> None:
        """Verify the binding selects exactly one well-formed storage source.

        Raises
        ------
        InvalidBindingSourceError:
            No source is set, several are set, or the selected source lacks
            the field that identifies it.
        """
        sources = self.storage_sources()
        if not sources:
            msg = f"expected exactly one, got neither: {_key_list(StorageSourceKind)}"
            raise InvalidBindingSourceError(msg)
        if len(sources) > 1:
            msg = f"expected exactly one, got both: {_key_list(sources)}"
            raise InvalidBindingSourceError(msg)

        match sources[0]:
            case StorageSourceKind.PERSISTENT_VOLUME_CLAIM:
                if not self.persistent_volume_claim.claim_name:  # type: ignore[union-attr]
                    raise _missing_field("persistentVolumeClaim.claimName")
            case StorageSourceKind.CONFIG_MAP:
                if not self.config_map.name:  # type: ignore[union-attr]
                    raise _missing_field("configMap.name")
            case StorageSourceKind.SECRET:
                if not self.secret.secret_name:  # type: ignore[union-attr]
                    raise _missing_field("secret.secretName")
            case StorageSourceKind.VOLUME_CLAIM_TEMPLATE | StorageSourceKind.EMPTY_DIR:
                pass
            case unknown:
                msg = f"unhandled storage source kind: {unknown}"
                raise AssertionError(msg)
