from marshmallow import fields
from mattermost_operator.types.base import BaseSchema
from mattermost_operator.types.models import (
    ExternalDatabase,
    OperatorManagedDatabase,
    Database,
)


class ExternalDatabaseSchema(BaseSchema):
    __model__ = ExternalDatabase

    secret = fields.Str(data_key="secret", allow_none=True, load_default=None)


class OperatorManagedDatabaseSchema(BaseSchema):
    __model__ = OperatorManagedDatabase

    type = fields.Str(data_key="type", allow_none=True, load_default=None)
    version = fields.Str(data_key="version", allow_none=True, load_default=None)
    storage_size = fields.Str(
        data_key="storageSize", allow_none=True, load_default=None
    )
    replicas = fields.Int(data_key="replicas", allow_none=True, load_default=None)
    resources = fields.Dict(
        keys=fields.String(),
        values=fields.Raw(),
        data_key="resources",
        allow_none=True,
        load_default=None,
    )


class DatabaseSchema(BaseSchema):
    """Mattermost database configurations."""

    __model__ = Database

    external = fields.Nested(
        ExternalDatabaseSchema(),
        data_key="external",
        allow_none=True,
        load_default=None,
    )
    operator_managed = fields.Nested(
        OperatorManagedDatabaseSchema(),
        data_key="operatorManaged",
        allow_none=True,
        load_default=None,
    )
