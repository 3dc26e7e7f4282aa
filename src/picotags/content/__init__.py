from .pipeline import PagePipeline
from .repository import ContentRepository
from .types import ContentRepositoryConfig, RenderResult

__all__ = [
    "ContentRepository",
    "ContentRepositoryConfig",
    "PagePipeline",
    "RenderResult",
]
