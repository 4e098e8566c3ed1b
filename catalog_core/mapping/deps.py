"""
Mapper dependency bundles.

The mappers never hardcode language strings or provider labels; they call
the functions in these bundles. Every function has a default (locale
resolvers from catalog_core.mapping.localization, provider functions from the
shared ProviderRegistry), and callers replace any single one.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from ..providers import get_provider_registry
from . import localization, performers


def _registry_attr(name: str) -> Callable[[], Any]:
    """default_factory reading an attribute of the shared registry."""
    return lambda: getattr(get_provider_registry(), name)


@dataclass
class ProductMapperDeps:
    """Functions the product mappers depend on."""
    map_legacy_provider: Callable[[str], str] = field(default_factory=_registry_attr('map_legacy_provider'))
    get_provider_label: Callable[[str], str] = field(default_factory=_registry_attr('get_provider_label'))
    get_localized_performer_name: Callable[[Any, str], str] = localization.get_localized_performer_name
    get_localized_tag_name: Callable[[Any, str], str] = localization.get_localized_tag_name
    get_localized_title: Callable[[Any, str], str] = localization.get_localized_title
    get_localized_description: Callable[[Any, str], Optional[str]] = localization.get_localized_description
    is_valid_performer_name: Callable[[str], bool] = performers.is_valid_performer_name

    # Provider assumed for products that have no source row
    default_asp_name: str = field(default_factory=_registry_attr('default_asp_name'))


@dataclass
class BatchMapperDeps(ProductMapperDeps):
    """Product mapper deps plus the link rewrite for alternative sources."""
    redirect_url: Callable[[str, Any, str], Optional[str]] = field(default_factory=_registry_attr('redirect_url'))


@dataclass
class ActressMapperDeps:
    """Functions the performer mapper depends on."""
    get_localized_performer_name: Callable[[Any, str], str] = localization.get_localized_performer_name
    get_localized_performer_bio: Callable[[Any, str], Optional[str]] = localization.get_localized_performer_bio
    get_localized_ai_review: Callable[[Optional[str], str], Any] = localization.get_localized_ai_review
    to_provider_ids: Callable[[List[str]], List[str]] = field(default_factory=_registry_attr('to_provider_ids'))
