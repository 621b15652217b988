"""
Integration Tests - End-to-End Pipeline Tests.

These tests verify that loading, filtering, sorting, pagination and
facet extraction work together, and that query invariants hold over
randomly generated datasets.

Test Files:
    - test_fund_pipeline.py: Full pipeline workflow and properties
"""
