"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - QueryConfig: Root configuration object
    - PaginationConfig: Default page size and upper bounds
    - SortingConfig: Default sort field and direction
    - FilterConfig: Status vocabulary, search length, date range checks

Configuration is validated on load (fail fast) and supports profile
overlays stored in a profiles/ directory next to the config file.
"""

from agreement_query.config.loader import ConfigLoader, load_config
from agreement_query.config.models import (
    FilterConfig,
    PaginationConfig,
    QueryConfig,
    SortingConfig,
)

__all__ = [
    "ConfigLoader",
    "FilterConfig",
    "PaginationConfig",
    "QueryConfig",
    "SortingConfig",
    "load_config",
]
