"""Stock photo API providers."""

from src.providers.stock_photo.api_client import StockPhotoAPIClient

__all__ = ["StockPhotoAPIClient"]
