from .filestore import (
    ExternalFileStoreSchema,
    ExternalVolumeFileStoreSchema,
    OperatorManagedMinioSchema,
    FileStoreSchema,
)
from .database import (
    ExternalDatabaseSchema,
    OperatorManagedDatabaseSchema,
    DatabaseSchema,
)
from .mattermost_spec import IngressSchema, MattermostSpecSchema

__all__ = [
    "ExternalFileStoreSchema",
    "ExternalVolumeFileStoreSchema",
    "OperatorManagedMinioSchema",
    "FileStoreSchema",
    "ExternalDatabaseSchema",
    "OperatorManagedDatabaseSchema",
    "DatabaseSchema",
    "IngressSchema",
    "MattermostSpecSchema",
]
