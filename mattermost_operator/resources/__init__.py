from .mattermost import Mattermost, IngressView, resolve_ingress, set_defaults

__all__ = ["Mattermost", "IngressView", "resolve_ingress", "set_defaults"]
