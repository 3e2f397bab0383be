import pytest

# Skipped unless pytest runs with --runslow, see tests/conftest.py.
slow = pytest.mark.slow
