import kopf
from kopf import Patch
from logging import Logger
from typing import Mapping
from mattermost_operator.types.schemas import MattermostSpecSchema
from mattermost_operator.types.models import MattermostSpec
from mattermost_operator.resources import Mattermost
from mattermost_operator.utils.errors import (
    ConfigurationError,
    convert_configuration_error,
)
from mattermost_operator.utils.helpers import upsert_condition

KIND = Mattermost.KIND

INVALID_CONFIGURATION = "InvalidConfiguration"
SPEC_RESOLVED = "SpecResolved"


def on_error(error: str, meta: Mapping, status: Mapping, patch: Patch):
    """Report a spec that cannot be resolved on the resource status."""
    gen = meta.get("generation", 0)
    conds = upsert_condition(
        (status or {}).get("conditions", []),
        {
            "type": "Ready",
            "status": "False",
            "reason": INVALID_CONFIGURATION,
            "message": error,
            "observedGeneration": gen,
        },
    )
    patch.status["conditions"] = conds
    patch.status["error"] = error
    patch.status["observedGeneration"] = gen


def on_resolved(mattermost: Mattermost, meta: Mapping, status: Mapping, patch: Patch):
    gen = meta.get("generation", 0)
    conds = upsert_condition(
        (status or {}).get("conditions", []),
        {
            "type": "Ready",
            "status": "True",
            "reason": SPEC_RESOLVED,
            "message": f"Mattermost {mattermost.name} spec resolved",
            "observedGeneration": gen,
        },
    )
    patch.status.update(mattermost.prepare_status())
    patch.status["conditions"] = conds
    patch.status["error"] = None
    patch.status["observedGeneration"] = gen


@kopf.on.resume(kind=KIND)
@kopf.on.create(kind=KIND)
@kopf.on.update(kind=KIND)
def reconciliation(
    spec, name, namespace, meta, status, patch, logger: Logger, **kwargs
):
    """Resolve Mattermost spec defaults and publish the resolved state."""
    spec_model: MattermostSpec = MattermostSpecSchema().load(spec)
    mattermost = Mattermost.from_spec(name, namespace, spec_model, logger=logger)
    try:
        mattermost.set_defaults()
    except ConfigurationError as ex:
        logger.error(f"Mattermost {name} has an invalid spec: {ex}")
        on_error(str(ex), meta, status, patch)
        convert_configuration_error(ex)

    if Mattermost.conf.write_back_defaults:
        spec_patch = mattermost.prepare_spec_patch()
        if spec_patch:
            logger.info(
                f"Writing defaults for {', '.join(sorted(spec_patch))} to Mattermost {name}"
            )
            patch.spec.update(spec_patch)

    on_resolved(mattermost, meta, status, patch)
