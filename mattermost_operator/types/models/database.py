from typing import Any, Dict, Optional
from mattermost_operator.types.base import BaseModel
from mattermost_operator.types.settings import DEFAULTS, MattermostDefaults


class ExternalDatabase(BaseModel):
    #: Secret holding the connection string of the external database.
    secret: Optional[str] = None


class OperatorManagedDatabase(BaseModel):
    """Database cluster created and managed by the operator."""

    type: Optional[str] = None
    version: Optional[str] = None
    storage_size: Optional[str] = None
    replicas: Optional[int] = None
    resources: Optional[Dict[str, Any]] = None

    def set_defaults(self, defaults: MattermostDefaults = DEFAULTS) -> None:
        if not self.type:
            self.type = defaults.database_type
        if not self.storage_size:
            self.storage_size = defaults.database_storage_size


class Database(BaseModel):
    external: Optional[ExternalDatabase] = None
    operator_managed: Optional[OperatorManagedDatabase] = None

    def is_external(self) -> bool:
        return self.external is not None

    def set_defaults(self, defaults: MattermostDefaults = DEFAULTS) -> None:
        if self.is_external():
            return
        if self.operator_managed is None:
            self.operator_managed = OperatorManagedDatabase()
        self.operator_managed.set_defaults(defaults)
