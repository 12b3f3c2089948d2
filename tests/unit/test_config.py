"""Unit tests for Settings, StockPhotoAPIConfig and load_config."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.config.loader import _deep_merge, load_config
from src.config.settings import Settings, StockPhotoAPIConfig
from src.utils.errors import ConfigurationError


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)  # keep a developer .env out of the way
        s = Settings()
        assert s.stock_photo_base_url == "https://d3.godaddy.com/api/v1/"
        assert s.image_cache_ttl == 3600
        assert s.category_cache_ttl == 86400
        assert s.max_parent_hops == 10
        assert s.image_cache_prefix == "wpem_image_api_"
        assert s.category_cache_key == "wpem_image_api_d3_categories"

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("STOCK_PHOTO_TOKEN", "from-env")
        monkeypatch.setenv("MAX_PARENT_HOPS", "4")

        s = Settings()

        assert s.stock_photo_token == "from-env"
        assert s.max_parent_hops == 4


class TestStockPhotoAPIConfig:
    def test_from_config_section(self) -> None:
        section = {
            "base_url": "https://api.example/v2/",
            "image_endpoint": "stock_photos/",
            "category_endpoint": "categories/",
            "timeout": 2,
        }

        config = StockPhotoAPIConfig.from_config(section, token="t0k")

        assert config.token == "t0k"
        assert config.timeout == 2.0
        assert config.category_url == "https://api.example/v2/categories/"
        assert config.image_category_url("flowers") == (
            "https://api.example/v2/stock_photos/category/flowers/"
        )

    def test_category_id_is_one_path_segment(self, api_config: StockPhotoAPIConfig) -> None:
        url = api_config.image_category_url("food/../admin?x=1")

        assert url == (
            "https://photos.example/api/v1/stock_photos/category/"
            "food%2F..%2Fadmin%3Fx%3D1/"
        )

    def test_is_frozen(self, api_config: StockPhotoAPIConfig) -> None:
        with pytest.raises(AttributeError):
            api_config.token = "other"  # type: ignore[misc]


class TestLoadConfig:
    def test_missing_yaml_uses_settings(self, tmp_path: Path) -> None:
        config = load_config(
            str(tmp_path / "absent.yaml"),
            settings=Settings(max_parent_hops=7, stock_photo_token="x"),
        )

        assert config["lookup"]["max_parent_hops"] == 7
        assert config["stock_photo"]["token_configured"] is True

    def test_yaml_values_kept_where_not_overridden(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            "app:\n  name: stock-photo-lookup\ncache:\n  image_ttl: 10\n",
            encoding="utf-8",
        )

        config = load_config(str(path), settings=Settings(image_cache_ttl=120))

        assert config["app"]["name"] == "stock-photo-lookup"
        assert config["cache"]["image_ttl"] == 120

    def test_yaml_beats_untouched_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            "cache:\n  image_prefix: 'img:'\nlookup:\n  max_parent_hops: 3\n",
            encoding="utf-8",
        )

        config = load_config(str(path), settings=Settings(app_env="test"))

        assert config["cache"]["image_prefix"] == "img:"
        assert config["lookup"]["max_parent_hops"] == 3
        # Keys the YAML leaves out still fall back to the built-in defaults.
        assert config["cache"]["category_ttl"] == 86400
        assert config["app"]["env"] == "test"

    def test_environment_beats_yaml(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MAX_PARENT_HOPS", "6")
        path = tmp_path / "config.yaml"
        path.write_text("lookup:\n  max_parent_hops: 3\n", encoding="utf-8")

        config = load_config(str(path), settings=Settings())

        assert config["lookup"]["max_parent_hops"] == 6

    def test_empty_section_is_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("cache:\nlookup:\n  max_parent_hops: 2\n", encoding="utf-8")

        config = load_config(str(path), settings=Settings(app_env="test"))

        assert config["cache"]["image_ttl"] == 3600
        assert config["lookup"]["max_parent_hops"] == 2

    def test_non_mapping_section_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("cache: 5\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(str(path), settings=Settings(app_env="test"))

    def test_shipped_config_file(self, project_root: Path) -> None:
        config = load_config(
            str(project_root / "config" / "config.yaml"), settings=Settings(app_env="test")
        )

        assert config["app"]["name"] == "stock-photo-lookup"
        assert config["stock_photo"]["base_url"] == "https://d3.godaddy.com/api/v1/"
        assert config["lookup"]["category_aliases_path"] == "config/industries.yaml"

    def test_token_value_is_not_exposed(self, tmp_path: Path) -> None:
        config = load_config(
            str(tmp_path / "absent.yaml"), settings=Settings(stock_photo_token="secret")
        )
        assert "secret" not in repr(config)

    def test_deep_merge_nested(self) -> None:
        base = {"a": {"b": 1, "c": 2}, "d": 3}
        _deep_merge(base, {"a": {"c": 20, "e": 5}, "f": 6})
        assert base == {"a": {"b": 1, "c": 20, "e": 5}, "d": 3, "f": 6}
