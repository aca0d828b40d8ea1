import os
from typing import Any, NamedTuple

_TRUE, _FALSE = {"True", "true", "yes", "1"}, {"False", "false", "no", "0"}


def _getenv(name: str, *default: Any) -> Any:
    try:
        v = os.environ[name]
        if v in _TRUE:
            return True
        elif v in _FALSE:
            return False
        else:
            return v
    except KeyError:
        pass
    if default:
        return default[0]
    raise KeyError(name)


def _getenv_str(name: str, default: str) -> str:
    """Read a string setting as is, without boolean conversion."""
    return os.environ.get(name, default)


# ------------------------------------------------
# ---- Defaults and environment variables ----
# ------------------------------------------------

#: Write resolved defaults back into the Mattermost resource spec
WRITE_BACK_DEFAULTS = bool(_getenv("WRITE_BACK_DEFAULTS", True))


class MattermostDefaults(NamedTuple):
    """Values applied to fields an installation leaves empty."""

    image: str
    version: str
    pull_policy: str
    filestore_storage_size: str
    database_type: str
    database_storage_size: str


def load_defaults() -> MattermostDefaults:
    """Read installation defaults from the environment.

    DEFAULT_MATTERMOST_IMAGE, DEFAULT_MATTERMOST_VERSION, DEFAULT_PULL_POLICY,
    DEFAULT_FILESTORE_STORAGE_SIZE, DEFAULT_DATABASE_TYPE and
    DEFAULT_DATABASE_STORAGE_SIZE override the built-in values.
    """
    return MattermostDefaults(
        image=_getenv_str(
            "DEFAULT_MATTERMOST_IMAGE", "mattermost/mattermost-enterprise-edition"
        ),
        version=_getenv_str("DEFAULT_MATTERMOST_VERSION", "5.37.1"),
        pull_policy=_getenv_str("DEFAULT_PULL_POLICY", "IfNotPresent"),
        filestore_storage_size=_getenv_str("DEFAULT_FILESTORE_STORAGE_SIZE", "50Gi"),
        database_type=_getenv_str("DEFAULT_DATABASE_TYPE", "mysql"),
        database_storage_size=_getenv_str("DEFAULT_DATABASE_STORAGE_SIZE", "50Gi"),
    )


DEFAULTS = load_defaults()


class Settings:
    """Operator settings"""

    defaults: MattermostDefaults = DEFAULTS
    write_back_defaults: bool = WRITE_BACK_DEFAULTS

    def __init__(
        self,
        *args,
        defaults: MattermostDefaults = None,
        write_back_defaults: bool = None,
        **kwargs,
    ):
        if defaults is not None:
            self.defaults = defaults

        if write_back_defaults is not None:
            self.write_back_defaults = write_back_defaults
