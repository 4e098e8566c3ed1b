"""
Image URL Utilities

Normalizes media URLs stored by the crawlers:
- Placeholder for missing or unusable URLs
- URL recovery from HTML fragments stored in URL columns
- Protocol-relative URL promotion (//host/path -> https://host/path)
- Thumbnail -> full-size rewrites, per provider (config/image_rules.yaml)
- Sub-provider detection from media domains

Every public function here is total: bad input never raises.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional, Sequence, Tuple
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from ..common.config_loader import load_image_rules, load_providers
from ..common.constants import PRODUCT_PLACEHOLDER

logger = logging.getLogger(__name__)

# Fallback when the fragment is too broken for the HTML parser to produce a tag
SRC_PATTERN = re.compile(r'src=["\']([^"\']+)["\']')


# ── Rewrite table ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RewriteRule:
    """One regex substitution; count=0 replaces every occurrence."""
    pattern: 're.Pattern[str]'
    replacement: str
    count: int = 1

    def apply(self, url: str) -> str:
        return self.pattern.sub(self.replacement, url, count=self.count)


@dataclass(frozen=True)
class ProviderRewrite:
    """Domain match plus the ordered rules that turn its thumbnails into full-size images."""
    name: str
    domains: Tuple[str, ...]
    exclude: Tuple[str, ...]
    rules: Tuple[RewriteRule, ...]

    def matches(self, url: str) -> bool:
        if any(marker in url for marker in self.exclude):
            return False
        return any(domain in url for domain in self.domains)

    def rewrite(self, url: str) -> str:
        for rule in self.rules:
            url = rule.apply(url)
        return url


def compile_rules(raw_rules: Sequence[Any]) -> Tuple[RewriteRule, ...]:
    """
    Compile rules from config.

    Args:
        raw_rules: Items of the form [pattern, replacement] or
                   {pattern, replace, all}

    Returns:
        Tuple of compiled rules in config order

    Raises:
        ValueError: If a rule is malformed or its pattern does not compile
    """
    compiled = []
    for raw in raw_rules or []:
        if isinstance(raw, dict):
            pattern, replacement = raw.get('pattern'), raw.get('replace', '')
            count = 0 if raw.get('all') else 1
        elif isinstance(raw, (list, tuple)) and len(raw) == 2:
            pattern, replacement = raw
            count = 1
        else:
            raise ValueError(f"Malformed image rewrite rule: {raw!r}")

        if not isinstance(pattern, str) or not isinstance(replacement, str):
            raise ValueError(f"Malformed image rewrite rule: {raw!r}")
        try:
            compiled.append(RewriteRule(re.compile(pattern), replacement, count))
        except re.error as e:
            raise ValueError(f"Invalid pattern in image rewrite rule {pattern!r}: {e}") from e

    return tuple(compiled)


def build_rewrite_table(config: dict) -> Tuple[Tuple[ProviderRewrite, ...], Tuple[RewriteRule, ...]]:
    """
    Build the provider rewrite table and the generic fallback chain.

    Args:
        config: Parsed image_rules.yaml

    Returns:
        (provider rewrites in evaluation order, fallback rules)
    """
    providers = tuple(
        ProviderRewrite(
            name=entry['name'],
            domains=tuple(entry.get('domains', [])),
            exclude=tuple(entry.get('exclude', [])),
            rules=compile_rules(entry.get('rules', [])),
        )
        for entry in config.get('providers', [])
    )
    return providers, compile_rules(config.get('fallback', []))


@lru_cache(maxsize=1)
def _rules_config() -> dict:
    return load_image_rules()


@lru_cache(maxsize=1)
def get_rewrite_table() -> Tuple[Tuple[ProviderRewrite, ...], Tuple[RewriteRule, ...]]:
    """The rewrite table loaded from config, compiled once per process."""
    return build_rewrite_table(_rules_config())


# ── URL normalization ───────────────────────────────────────────────────────

def get_fallback_image_url() -> str:
    """Placeholder image for product cards."""
    return PRODUCT_PLACEHOLDER


def _extract_src(fragment: str) -> Optional[str]:
    """Pull the first src attribute out of an HTML fragment."""
    soup = BeautifulSoup(fragment, 'html.parser')
    tag = soup.find(src=True)
    if tag is not None:
        src = tag.get('src')
        if isinstance(src, str) and src.strip():
            return src.strip()

    match = SRC_PATTERN.search(fragment)
    return match.group(1) if match else None


def _is_valid_url(url: str) -> bool:
    """Absolute (or protocol-relative) http(s) URL without markup."""
    if '<' in url or '>' in url:
        return False
    candidate = f"https:{url}" if url.startswith('//') else url
    try:
        parsed = urlparse(candidate)
    except ValueError:
        return False
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


def normalize_image_url(url: Optional[str]) -> str:
    """
    Normalize a stored image URL for display.

    Args:
        url: Stored URL; may be None, empty, protocol-relative,
             or an HTML fragment such as '<img src="...">'

    Returns:
        Absolute http(s) URL, or the placeholder image URL

    Example:
        >>> normalize_image_url('//pics.example.jp/a.jpg')
        'https://pics.example.jp/a.jpg'
        >>> normalize_image_url('<img src="https://pics.example.jp/a.jpg">')
        'https://pics.example.jp/a.jpg'
    """
    if not isinstance(url, str) or not url.strip():
        return PRODUCT_PLACEHOLDER

    processed = url.strip()

    # Crawler output sometimes stores the whole <img> tag
    if '<' in processed or '>' in processed:
        extracted = _extract_src(processed)
        if not extracted or not _is_valid_url(extracted):
            logger.debug("No usable image URL in HTML fragment: %.80s", url)
            return PRODUCT_PLACEHOLDER
        processed = extracted

    if not _is_valid_url(processed):
        logger.debug("Unusable image URL: %.80s", url)
        return PRODUCT_PLACEHOLDER

    if processed.startswith('//'):
        return f"https:{processed}"

    return processed


def is_placeholder_url(url: Optional[str]) -> bool:
    return url == PRODUCT_PLACEHOLDER


def get_full_size_image_url(thumbnail_url: Optional[str]) -> Optional[str]:
    """
    Convert a thumbnail URL to its full-size equivalent.

    The first provider whose domain appears in the URL owns it and its rules
    are applied in order. URLs no provider claims go through the generic
    fallback chain. Unknown URLs come back unchanged.

    Args:
        thumbnail_url: Thumbnail URL

    Returns:
        Full-size URL, or the input unchanged (falsy input stays falsy)

    Example:
        >>> get_full_size_image_url('https://pics.dmm.co.jp/digital/video/abc00001/abc00001ps.jpg')
        'https://pics.dmm.co.jp/digital/video/abc00001/abc00001pl.jpg'
    """
    if not thumbnail_url or not isinstance(thumbnail_url, str):
        return thumbnail_url

    providers, fallback = get_rewrite_table()

    for provider in providers:
        if provider.matches(thumbnail_url):
            return provider.rewrite(thumbnail_url)

    # Generic patterns as a last resort; untouched URLs fall through unchanged
    result = thumbnail_url
    for rule in fallback:
        result = rule.apply(result)

    return result


# ── Provider detection ──────────────────────────────────────────────────────

@lru_cache(maxsize=1)
def _dti_services() -> Tuple[Tuple[str, str], ...]:
    return tuple((domain, service) for domain, service in _rules_config().get('dti_services', []))


@lru_cache(maxsize=1)
def _uncensored_domains() -> Tuple[str, ...]:
    return tuple(_rules_config().get('uncensored_domains', []))


@lru_cache(maxsize=1)
def _subscription_providers() -> frozenset:
    return frozenset(entry['id'] for entry in load_providers() if entry.get('subscription'))


def get_dti_service_from_url(url: Optional[str]) -> Optional[str]:
    """
    Identify the subscription sub-service a media URL belongs to.

    Args:
        url: Thumbnail or sample URL

    Returns:
        Service id (e.g., 'caribbeancom', '1pondo', or 'dti' for shared
        network domains), or None if the URL is not from the network
    """
    if not url or not isinstance(url, str):
        return None
    for domain, service in _dti_services():
        if domain in url:
            return service
    return None


def is_dti_uncensored_site(url: Optional[str]) -> bool:
    """True if the URL is hosted by one of the subscription network's sites."""
    if not url or not isinstance(url, str):
        return False
    return any(domain in url for domain in _uncensored_domains())


def is_uncensored_thumbnail(url: Optional[str]) -> bool:
    """Thumbnail check used by cards that blur such images."""
    return is_dti_uncensored_site(url)


def is_subscription_site(provider: Optional[str]) -> bool:
    """True if the normalized provider id sells monthly subscriptions rather than titles."""
    if not provider:
        return False
    return provider in _subscription_providers()
