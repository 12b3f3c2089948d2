"""Public interface definitions for the lookup service's collaborators.

The lookup service talks to the image API, the cache and the alias table
only through the abstract base classes in this package.  Concrete adapters
live in ``src/providers/`` and are wired together in ``src/main.py``; tests
inject in-memory fakes instead.

CONCRETE PROVIDER MAP:
    Interface                  ->  Concrete implementations (in src/providers/)
    ---------------------------------------------------------------------
    IStockPhotoProvider        ->  StockPhotoAPIClient
    ICacheProvider             ->  MemoryCacheProvider
    ICategoryAliasProvider     ->  StaticCategoryAliasProvider,
                                   YamlCategoryAliasProvider
"""

from src.interfaces.cache_provider import ICacheProvider
from src.interfaces.category_alias_provider import ICategoryAliasProvider
from src.interfaces.stock_photo_provider import IStockPhotoProvider

__all__ = [
    "ICacheProvider",
    "ICategoryAliasProvider",
    "IStockPhotoProvider",
]
