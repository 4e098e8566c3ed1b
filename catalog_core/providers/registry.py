"""
Provider Registry

Resolves the free-form provider names found in source rows and performer
service lists to normalized provider ids and display labels.

Name resolution strategies:
1. Parent provider name plus a link -> sub-provider whose URL pattern matches
2. Exact match against ids, stored names and localized aliases (case-insensitive)
3. Fallback: the lowercased name itself

The registry is loaded from config/providers.yaml.
"""

from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional

from ..common.config_loader import (
    get_provider_lookup_map,
    load_provider_settings,
    load_providers,
)
from ..common.constants import DEFAULT_LOCALE


class ProviderRegistry:
    """
    Case-insensitive provider lookups.

    Usage:
        registry = ProviderRegistry()
        registry.map_legacy_provider("DMM")        # 'fanza'
        registry.get_provider_label("mgs")         # 'MGS動画'
        registry.to_provider_ids(["FANZA", "一本道"])  # ['fanza', '1pondo']
    """

    def __init__(
        self,
        providers: Optional[List[Dict[str, Any]]] = None,
        settings: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the registry.

        Args:
            providers: Optional registry entries. If None, loads from config.
            settings: Optional provider settings (default_asp_name, redirects).
                      If None, loads from config.
        """
        self.providers = load_providers() if providers is None else providers
        settings = load_provider_settings() if settings is None else settings

        self.default_asp_name: str = settings.get('default_asp_name', '')
        self.redirects: Dict[str, str] = {
            name.lower(): template
            for name, template in (settings.get('redirects') or {}).items()
        }

        self.name_to_id = get_provider_lookup_map(self.providers)
        self.labels = {entry['id']: entry.get('label', entry['id']) for entry in self.providers}

        # Sub-providers identified from links, keyed by parent id
        self.url_patterns: Dict[str, List[tuple]] = {}
        for entry in self.providers:
            if entry.get('parent') and entry.get('url_pattern'):
                self.url_patterns.setdefault(entry['parent'], []).append(
                    (entry['url_pattern'], entry['id'])
                )

    def lookup(self, name: Optional[str]) -> Optional[str]:
        """
        Exact lookup of a provider name.

        Returns:
            Provider id, or None if the name is unknown
        """
        if not name or not isinstance(name, str):
            return None
        return self.name_to_id.get(name.strip().lower())

    def normalize_asp_name(self, name: Optional[str], url: Optional[str] = None) -> str:
        """
        Normalize a provider name.

        Args:
            name: Provider name as stored (any casing, localized aliases allowed)
            url: Optional product link, used to pick the sub-provider when the
                 name is a parent network

        Returns:
            Normalized provider id, or the lowercased name when unknown

        Example:
            >>> registry.normalize_asp_name('DTI', 'https://www.heyzo.com/moviepages/1234/')
            'heyzo'
            >>> registry.normalize_asp_name('カリビアンコム')
            'caribbeancom'
        """
        if not name or not isinstance(name, str):
            return ''

        provider_id = self.lookup(name)
        if provider_id and url and provider_id in self.url_patterns:
            for pattern, sub_id in self.url_patterns[provider_id]:
                if pattern in url:
                    return sub_id

        return provider_id or name.strip().lower()

    def map_legacy_provider(self, asp_name: str) -> str:
        """Provider id for a stored provider name."""
        return self.normalize_asp_name(asp_name)

    def get_provider_label(self, asp_name: str) -> str:
        """Display label for a stored provider name; unknown names are shown as-is."""
        provider_id = self.lookup(asp_name)
        if provider_id is None:
            return asp_name
        return self.labels.get(provider_id, asp_name)

    def is_known(self, name: Optional[str]) -> bool:
        return self.lookup(name) is not None

    def to_provider_ids(self, names: Optional[Iterable[Any]]) -> List[str]:
        """
        Map a free-form service list to provider ids.

        Unknown names are dropped, duplicates removed, order kept.
        """
        result: List[str] = []
        for name in names or []:
            provider_id = self.lookup(name)
            if provider_id and provider_id not in result:
                result.append(provider_id)
        return result

    def redirect_url(self, asp_name: str, product_id: Any, locale: str = DEFAULT_LOCALE) -> Optional[str]:
        """
        Canonical link for providers whose listings go through our own product page.

        Args:
            asp_name: Stored provider name
            product_id: Canonical product id
            locale: Locale; non-default locales add ?hl=<locale>

        Returns:
            Redirect link, or None if the provider's affiliate URL is used as-is
        """
        if not asp_name:
            return None
        template = self.redirects.get(asp_name.strip().lower())
        if template is None:
            return None
        url = template.format(product_id=product_id)
        if locale and locale != DEFAULT_LOCALE:
            url = f"{url}?hl={locale}"
        return url

    @property
    def provider_count(self) -> int:
        """Return the number of registered providers."""
        return len(self.providers)


@lru_cache(maxsize=1)
def get_provider_registry() -> ProviderRegistry:
    """Shared registry loaded from config."""
    return ProviderRegistry()
