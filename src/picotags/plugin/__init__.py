from .tags_plugin import TagsPlugin
from .types import PagePlugin, PagesLoadedResult, RequestState, TagsPluginConfig

__all__ = [
    "PagePlugin",
    "PagesLoadedResult",
    "RequestState",
    "TagsPlugin",
    "TagsPluginConfig",
]
