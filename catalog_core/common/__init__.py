# Common utilities
from .config_loader import (
    get_provider_lookup_map,
    load_config,
    load_image_rules,
    load_performer_filters,
    load_provider_settings,
    load_providers,
)
from .dates import parse_date, to_iso_string
from .log_config import setup_logging
