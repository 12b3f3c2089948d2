"""Category alias providers.

StaticCategoryAliasProvider serves a mapping handed in by the caller;
YamlCategoryAliasProvider reads the site's industries file.
"""

from src.providers.alias.static_alias_provider import StaticCategoryAliasProvider
from src.providers.alias.yaml_alias_provider import YamlCategoryAliasProvider

__all__ = ["StaticCategoryAliasProvider", "YamlCategoryAliasProvider"]
