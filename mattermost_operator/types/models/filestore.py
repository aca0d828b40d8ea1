from typing import Any, Dict, Optional
from mattermost_operator.types.base import BaseModel
from mattermost_operator.types.settings import DEFAULTS, MattermostDefaults


class ExternalFileStore(BaseModel):
    """S3 compatible file store managed outside of the operator."""

    url: Optional[str] = None
    bucket: Optional[str] = None
    secret: Optional[str] = None


class ExternalVolumeFileStore(BaseModel):
    """Existing persistent volume claim used as file store."""

    volume_claim_name: Optional[str] = None
    bucket: Optional[str] = None


class OperatorManagedMinio(BaseModel):
    """Minio instance created and managed by the operator."""

    replicas: Optional[int] = None
    storage_size: Optional[str] = None
    resources: Optional[Dict[str, Any]] = None

    def set_defaults(self, defaults: MattermostDefaults = DEFAULTS) -> None:
        if not self.storage_size:
            self.storage_size = defaults.filestore_storage_size


class FileStore(BaseModel):
    """Mattermost file store. At most one variant is expected to be set."""

    external: Optional[ExternalFileStore] = None
    external_volume: Optional[ExternalVolumeFileStore] = None
    operator_managed: Optional[OperatorManagedMinio] = None

    def is_external(self) -> bool:
        return self.external is not None

    def is_external_volume(self) -> bool:
        return self.external_volume is not None

    def set_defaults(self, defaults: MattermostDefaults = DEFAULTS) -> None:
        """Fall back to an operator managed Minio when nothing external is set."""
        if self.is_external() or self.is_external_volume():
            return
        if self.operator_managed is None:
            self.operator_managed = OperatorManagedMinio()
        self.operator_managed.set_defaults(defaults)
