import kopf


class ConfigurationError(Exception):
    """Mattermost spec cannot be resolved into a valid configuration.

    Raised only by spec defaulting. It does not clear until the resource
    is edited, so it must not be retried.
    """


def convert_configuration_error(ex: ConfigurationError):
    """
    Convert a ConfigurationError to a Kopf-friendly exception.

    Raises:
        kopf.PermanentError so Kopf does not retry the handler.
    """
    if not isinstance(ex, ConfigurationError):
        raise ex
    raise kopf.PermanentError(f"Invalid Mattermost configuration: {ex}") from ex
