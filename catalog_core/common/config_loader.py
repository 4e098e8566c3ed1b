"""
Configuration Loader

Loads the YAML configuration files that hold provider-specific data:
the provider registry, media URL rewrite rules, and performer-name filters.
Code never hardcodes provider names or labels; it reads them from here.
"""

from pathlib import Path
from typing import Any, Dict, List

import yaml


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Data files shipped inside the package
    module_dir = Path(__file__).parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'providers.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_providers() -> List[Dict[str, Any]]:
    """
    Load the provider registry entries.

    Returns:
        List of provider entries in display order

    Example:
        [
            {'id': 'fanza', 'label': 'FANZA', 'db_names': ['FANZA', 'DMM'], ...},
            {'id': 'heyzo', 'label': 'HEYZO', 'parent': 'dti', 'url_pattern': 'heyzo.com', ...},
            ...
        ]
    """
    config = load_config('providers.yaml')
    return config.get('providers', [])


def load_provider_settings() -> Dict[str, Any]:
    """
    Load provider-wide settings.

    Returns:
        Dictionary with 'default_asp_name' (provider assumed when a product
        has no source) and 'redirects' (provider name -> link template)
    """
    config = load_config('providers.yaml')
    return {
        'default_asp_name': config.get('default_asp_name', ''),
        'redirects': config.get('redirects', {}),
    }


def load_image_rules() -> Dict[str, Any]:
    """
    Load media URL rules.

    Returns:
        Dictionary with keys:
          providers     - ordered list of {name, domains, exclude, rules}
          fallback      - generic rewrite chain applied when no provider matched
          dti_services  - ordered list of [domain substring, service id]
          uncensored_domains - domain substrings of subscription sites

    Subscription providers are not listed here; they are the
    `subscription` flags in providers.yaml.
    """
    return load_config('image_rules.yaml')


def load_performer_filters() -> Dict[str, List[str]]:
    """
    Load performer-name filters.

    Returns:
        Dictionary with 'invalid_names' (exact parser-garbage tokens)
        and 'separators' (glyphs that never occur in a real name)

    Example:
        {'invalid_names': ['デ', 'ラ', '他'], 'separators': ['→']}
    """
    config = load_config('performer_filters.yaml')
    return {
        'invalid_names': config.get('invalid_names', []),
        'separators': config.get('separators', []),
    }


def get_provider_lookup_map(providers: List[Dict[str, Any]]) -> Dict[str, str]:
    """
    Build a case-insensitive lookup from every known provider name to its id.

    Ids, stored names and localized aliases all map to the normalized id.

    Args:
        providers: Provider registry entries

    Returns:
        Dictionary mapping lowercase name to provider id

    Example:
        {'fanza': 'fanza', 'dmm': 'fanza', '一本道': '1pondo', ...}
    """
    lookup: Dict[str, str] = {}
    for entry in providers:
        provider_id = entry['id']
        names = [provider_id, *entry.get('db_names', []), *entry.get('aliases', [])]
        for name in names:
            lookup.setdefault(str(name).strip().lower(), provider_id)
    return lookup
