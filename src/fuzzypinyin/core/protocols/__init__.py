from .index import IndexHandle

__all__ = ["IndexHandle"]
