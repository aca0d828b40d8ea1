from typing import Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from mattermost_operator.types.models import MattermostSpec


class ResourceLabels:
    MATTERMOST_DOMAIN: str = "installation.mattermost.com/"

    #: Applied to a Mattermost and every resource created to support it.
    MATTERMOST_RESOURCE_LABEL = MATTERMOST_DOMAIN + "resource"

    #: Applied across all components of an installation.
    MATTERMOST_CLUSTER_LABEL = MATTERMOST_DOMAIN + "installation"


class Labels(ResourceLabels):
    APP_LABEL = "app"

    #: Name of the container running the Mattermost application
    MATTERMOST_APP_CONTAINER_NAME = "mattermost"

    _labels: Dict[str, str]

    def __init__(self, labels: Dict[str, str] = None) -> None:
        self._labels = labels if labels else dict()

    def update(self, labels: Dict[str, str]) -> "Labels":
        self._labels.update(labels.copy())
        return self

    def as_dict(self) -> Dict[str, str]:
        """Return labels are dictionary."""
        return self._labels.copy()

    def as_str(self):
        """Return labels as comma separated string."""
        return ",".join([f"{k}={v}" for k, v in self._labels.items()])

    def include(self, label: str, value: str) -> "Labels":
        self.update({label: value})
        return self

    def include_mattermost_resource(self, name: str) -> "Labels":
        return self.include(self.MATTERMOST_RESOURCE_LABEL, name)

    def include_mattermost_cluster(self, name: str) -> "Labels":
        return self.include(self.MATTERMOST_CLUSTER_LABEL, name)

    def include_app(self, app: str) -> "Labels":
        return self.include(self.APP_LABEL, app)

    def contains(self, other: "Labels"):
        """Returns True if all labels in `other` are contained."""
        return all(
            key in self._labels and self._labels[key] == value
            for key, value in other.as_dict().items()
        )

    def __len__(self) -> int:
        return len(self._labels)

    def __str__(self):
        return f"Labels<{self._labels}>"

    @classmethod
    def generate_resource_labels(cls, name: str) -> "Labels":
        """Labels for selecting a given Mattermost as well as any external
        dependency resources that were created for the installation."""
        return Labels().include_mattermost_resource(name)

    @classmethod
    def generate_selector_labels(cls, name: str) -> "Labels":
        """Labels for selecting the pods belonging to the given Mattermost.

        Deployment selectors are immutable, so this set must stay stable
        across reconciles.
        """
        return (
            cls.generate_resource_labels(name)
            .include_mattermost_cluster(name)
            .include_app(cls.MATTERMOST_APP_CONTAINER_NAME)
        )

    @classmethod
    def generate_mattermost_labels(cls, spec: "MattermostSpec", name: str) -> "Labels":
        """Selector labels with the installation's custom resource labels on top.

        Custom labels are applied last and win over the reserved keys.
        """
        return cls.generate_selector_labels(name).update(spec.resource_labels or {})
