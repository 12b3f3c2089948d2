"""Configuration module: exports Settings, StockPhotoAPIConfig and load_config."""

from src.config.loader import load_config
from src.config.settings import Settings, StockPhotoAPIConfig

__all__ = ["Settings", "StockPhotoAPIConfig", "load_config"]
