from .models import Application, Catalog, Keyword, Result
from .ranking import search

__all__ = ["Application", "Catalog", "Keyword", "Result", "search"]
__version__ = "0.1.0"
