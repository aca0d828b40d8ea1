from marshmallow import fields
from mattermost_operator.types.base import BaseSchema
from mattermost_operator.types.models import (
    ExternalFileStore,
    ExternalVolumeFileStore,
    OperatorManagedMinio,
    FileStore,
)


class ExternalFileStoreSchema(BaseSchema):
    __model__ = ExternalFileStore

    url = fields.Str(data_key="url", allow_none=True, load_default=None)
    bucket = fields.Str(data_key="bucket", allow_none=True, load_default=None)
    secret = fields.Str(data_key="secret", allow_none=True, load_default=None)


class ExternalVolumeFileStoreSchema(BaseSchema):
    __model__ = ExternalVolumeFileStore

    volume_claim_name = fields.Str(
        data_key="volumeClaimName", allow_none=True, load_default=None
    )
    bucket = fields.Str(data_key="bucket", allow_none=True, load_default=None)


class OperatorManagedMinioSchema(BaseSchema):
    __model__ = OperatorManagedMinio

    replicas = fields.Int(data_key="replicas", allow_none=True, load_default=None)
    storage_size = fields.Str(
        data_key="storageSize", allow_none=True, load_default=None
    )
    resources = fields.Dict(
        keys=fields.String(),
        values=fields.Raw(),
        data_key="resources",
        allow_none=True,
        load_default=None,
    )


class FileStoreSchema(BaseSchema):
    """Mattermost file store configurations."""

    __model__ = FileStore

    external = fields.Nested(
        ExternalFileStoreSchema(),
        data_key="external",
        allow_none=True,
        load_default=None,
    )
    external_volume = fields.Nested(
        ExternalVolumeFileStoreSchema(),
        data_key="externalVolume",
        allow_none=True,
        load_default=None,
    )
    operator_managed = fields.Nested(
        OperatorManagedMinioSchema(),
        data_key="operatorManaged",
        allow_none=True,
        load_default=None,
    )
