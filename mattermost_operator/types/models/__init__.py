from .filestore import (
    ExternalFileStore,
    ExternalVolumeFileStore,
    OperatorManagedMinio,
    FileStore,
)
from .database import ExternalDatabase, OperatorManagedDatabase, Database
from .mattermost_spec import Ingress, MattermostSpec

__all__ = [
    "ExternalFileStore",
    "ExternalVolumeFileStore",
    "OperatorManagedMinio",
    "FileStore",
    "ExternalDatabase",
    "OperatorManagedDatabase",
    "Database",
    "Ingress",
    "MattermostSpec",
]
