from .library import LibraryView
from .detail import DetailPane

__all__ = ["LibraryView", "DetailPane"]
