from .catalog import Catalog, CatalogEntry
from .view_state import RunState, ViewState

__all__ = ["Catalog", "CatalogEntry", "RunState", "ViewState"]
