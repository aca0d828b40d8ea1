from typing import Iterable, Optional
from kubernetes_asyncio.client import V1Container, V1Deployment


def find_container(
    containers: Optional[Iterable[V1Container]], name: str
) -> Optional[V1Container]:
    """Return the first container named `name`, or None."""
    for container in containers or []:
        if container.name == name:
            return container
    return None


def find_container_in_deployment(
    deployment: V1Deployment, name: str
) -> Optional[V1Container]:
    """Look up a container by name in the pod template of a deployment."""
    spec = deployment.spec
    if spec is None or spec.template is None or spec.template.spec is None:
        return None
    return find_container(spec.template.spec.containers, name)
