"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation; the lookup client uses a stubbed
HTTP session. Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_sort_values.py: Text, currency and percentage normalization
    - test_filters.py: Name, risk and identifier filters
    - test_sorting.py / test_pagination.py: Ordering and page arithmetic
    - test_explorer_session.py: Session state transitions
    - test_cli.py: Command line front end
"""
