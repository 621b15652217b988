"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test data:
    - sample_funds.json: 12 funds (1 baixo, 1 médio, 10 alto), one with
      unparsable values and no identifier list
    - sample_config.yaml: Page size 5, sorted by 12 meses descending
"""
