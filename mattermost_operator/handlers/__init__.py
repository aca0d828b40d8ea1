from . import mattermost

__all__ = ["mattermost"]
