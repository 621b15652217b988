"""
Performance Tests.

Benchmarks for Fund Explorer pipeline runs:
    - 5,000 records, every sort column < 5 seconds
    - 50,000 records filtered < 10 seconds
"""
