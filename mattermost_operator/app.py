import kopf
import logging
import mattermost_operator.handlers.mattermost as mattermost
from mattermost_operator import __version__
from mattermost_operator.types.settings import Settings
from mattermost_operator.resources import Mattermost


# Configure Kopf settings
@kopf.on.startup()
async def setup(
    settings: kopf.OperatorSettings, memo: kopf.Memo, logger: logging.Logger, **kwargs
):
    memo.conf = Settings()
    Mattermost.conf = memo.conf
    defaults = memo.conf.defaults
    logger.info(
        f"Starting {Mattermost.OPERATOR_NAME} {__version__} with defaults: image={defaults.image}:{defaults.version}, "
        f"pullPolicy={defaults.pull_policy}, database={defaults.database_type}"
    )

    if not memo.conf.write_back_defaults:
        logger.warning(
            "Writing resolved defaults back to Mattermost resources is disabled."
        )

    # Limit the number of concurrent workers to prevent flooding the API
    settings.batching.worker_limit = 2

    # Post events to the Kubernetes API for logging >= Warning
    settings.posting.enabled = True
    settings.posting.level = logging.WARNING


@kopf.on.cleanup()
async def cleanup(logger: logging.Logger, **kwargs):
    """Cleanup handler for operator shutdown."""
    logger.info("Operator shutdown complete")


__all__ = [
    "mattermost",
]
