"""
Test Fixtures - Shared Test Configurations.

    - sample_config.yaml: Sample configuration for testing
    - profiles/strict.yaml: Overlay for sample_config.yaml
"""
