"""Shared enumerations used across the workspace models."""

from __future__ import annotations

from enum import StrEnum

from pydantic.alias_generators import to_camel


class StorageSourceKind(StrEnum):
    """Closed set of storage sources a workspace binding can select.

    Values are the binding field names, in the order they are checked.
    """

    PERSISTENT_VOLUME_CLAIM = "persistent_volume_claim"
    VOLUME_CLAIM_TEMPLATE = "volume_claim_template"
    EMPTY_DIR = "empty_dir"
    CONFIG_MAP = "config_map"
    SECRET = "secret"

    @property
    def manifest_key(self) -> str:
        """Key as written in a manifest, e.g. ``persistentVolumeClaim``."""
        return to_camel(self.value)
