"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with mocked dependencies.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_status_filter.py: Status filter logic
    - test_date_range_filter.py: Date range filter logic
    - test_search_filter.py: Search filter logic
    - test_apply_filters.py: Filter stages combined
    - test_sort_comparator.py: Ordering and stability
    - test_paginator.py: Page slicing and metadata
    - test_request_validator.py: Query validation and parameter parsing
    - test_config_loader.py: Configuration loading/validation
    - test_adapters.py: Provider, audit logger, metrics collector
"""
