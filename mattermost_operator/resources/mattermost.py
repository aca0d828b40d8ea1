import mmh3
import hashlib
import logging
from logging import Logger
from typing import Dict, List, NamedTuple, Optional
from kubernetes_asyncio.client import V1Container, V1Deployment

from mattermost_operator.common.models.labels import Labels
from mattermost_operator.types.settings import DEFAULTS, MattermostDefaults, Settings
from mattermost_operator.types.models import MattermostSpec, FileStore, Database
from mattermost_operator.types.schemas import MattermostSpecSchema
from mattermost_operator.utils.containers import (
    find_container,
    find_container_in_deployment,
)
from mattermost_operator.utils.errors import ConfigurationError
from mattermost_operator.utils.helpers import canonicalize_dict, drop_nulls, image_name

TLS_SECRET_SUFFIX = "-tls-cert"


class IngressView(NamedTuple):
    """Ingress settings of an installation after legacy fallback."""

    enabled: bool
    host: str
    annotations: Dict[str, str]
    tls_secret: str


def default_tls_secret(host: str) -> str:
    return host.replace(".", "-") + TLS_SECRET_SUFFIX


def resolve_ingress(spec: MattermostSpec) -> IngressView:
    """Resolve ingress settings from the `ingress` object or the legacy fields.

    When `ingress` is set it is authoritative and the legacy fields are
    ignored. Otherwise ingress is enabled and host and annotations come from
    `ingressName` and `ingressAnnotations`, with a TLS secret named after the
    host only if `useIngressTLS` is set.
    """
    ingress = spec.ingress
    if ingress is not None:
        return IngressView(
            enabled=bool(ingress.enabled),
            host=ingress.host or "",
            annotations=dict(ingress.annotations or {}),
            tls_secret=ingress.tls_secret or "",
        )
    host = spec.ingress_name or ""
    return IngressView(
        enabled=True,
        host=host,
        annotations=dict(spec.ingress_annotations or {}),
        tls_secret=default_tls_secret(host) if spec.use_ingress_tls else "",
    )


def set_defaults(
    spec: MattermostSpec, defaults: MattermostDefaults = DEFAULTS
) -> MattermostSpec:
    """Fill missing values of the spec in place and return it.

    Raises:
        ConfigurationError: ingress is enabled but no host is set.
    """
    ingress = resolve_ingress(spec)
    if ingress.enabled and not ingress.host:
        raise ConfigurationError("ingress.host required, but not set")
    if not spec.image:
        spec.image = defaults.image
    if not spec.version:
        spec.version = defaults.version
    if not spec.image_pull_policy:
        spec.image_pull_policy = defaults.pull_policy

    if spec.file_store is None:
        spec.file_store = FileStore()
    if spec.database is None:
        spec.database = Database()
    spec.file_store.set_defaults(defaults)
    spec.database.set_defaults(defaults)
    return spec


class Mattermost:
    """Mattermost installation resource."""

    logger: Logger
    conf: Settings = Settings()

    KIND = "Mattermost"
    OPERATOR_NAME = "mattermost-operator"
    APP_CONTAINER_NAME = Labels.MATTERMOST_APP_CONTAINER_NAME

    name: str
    namespace: str
    spec: MattermostSpec
    #: Top level wire fields changed by the last `set_defaults` call.
    defaulted: Dict = {}

    def __init__(
        self,
        name: str,
        namespace: str,
        spec: MattermostSpec,
        logger: Logger = None,
    ):
        self.name = name
        self.namespace = namespace
        self.spec = spec
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_spec(
        cls,
        name: str,
        namespace: str,
        spec: MattermostSpec,
        logger: Logger = None,
    ) -> "Mattermost":
        return Mattermost(name, namespace, spec, logger=logger)

    def set_defaults(self) -> MattermostSpec:
        """Set the missing values in the spec to the configured defaults."""
        before = self.dump_spec()
        set_defaults(self.spec, self.conf.defaults)
        self.defaulted = {
            key: value
            for key, value in self.dump_spec().items()
            if before.get(key) != value
        }
        if self.defaulted:
            self.logger.debug(
                f"Defaulted {', '.join(sorted(self.defaulted))} for Mattermost {self.name}"
            )
        return self.spec

    def dump_spec(self) -> Dict:
        """Spec in its wire (camelCase) form, without unset fields."""
        return drop_nulls(MattermostSpecSchema().dump(self.spec))

    @property
    def ingress(self) -> IngressView:
        return resolve_ingress(self.spec)

    @property
    def ingress_enabled(self) -> bool:
        return self.ingress.enabled

    @property
    def ingress_host(self) -> str:
        return self.ingress.host

    @property
    def ingress_annotations(self) -> Dict[str, str]:
        return self.ingress.annotations

    @property
    def ingress_tls_secret(self) -> str:
        return self.ingress.tls_secret

    @property
    def image_name(self) -> str:
        """Container image matching the spec."""
        return image_name(self.spec.image, self.spec.version)

    @property
    def production_deployment_name(self) -> str:
        """Name of the deployment currently designated as production."""
        return self.name

    @property
    def resource_labels(self) -> Labels:
        return Labels.generate_resource_labels(self.name)

    @property
    def selector_labels(self) -> Labels:
        return Labels.generate_selector_labels(self.name)

    @property
    def labels(self) -> Labels:
        return Labels.generate_mattermost_labels(self.spec, self.name)

    @classmethod
    def app_container(cls, containers: List[V1Container]) -> Optional[V1Container]:
        """Container running the Mattermost application."""
        return find_container(containers, cls.APP_CONTAINER_NAME)

    @classmethod
    def app_container_from_deployment(
        cls, deployment: V1Deployment
    ) -> Optional[V1Container]:
        return find_container_in_deployment(deployment, cls.APP_CONTAINER_NAME)

    def compute_hash(self, data: Dict) -> str:
        """Compute a murmur3 hash."""
        mumur_str = str(mmh3.hash128(canonicalize_dict(data)))
        return hashlib.sha256(mumur_str.encode("utf-8")).hexdigest()[:16]

    @property
    def spec_hash(self) -> str:
        return self.compute_hash(self.dump_spec())

    def prepare_spec_patch(self) -> Dict:
        """Merge patch with the top level fields changed by `set_defaults`.

        Nested values are merged by the API server, so fields the schema
        does not model are left in place.
        """
        return dict(self.defaulted)

    def prepare_status(self) -> Dict:
        return {
            "image": self.spec.image,
            "version": self.spec.version,
            "endpoint": self.ingress_host if self.ingress_enabled else "",
            "selector": self.selector_labels.as_str(),
            "specHash": self.spec_hash,
        }
