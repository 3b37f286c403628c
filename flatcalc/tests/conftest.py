"""
Pytest configuration for flatcalc tests.
"""
from pathlib import Path
import sys


# Ensure the project root is on the Python path for all tests
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def pytest_make_parametrize_id(config, val, argname):
    # Avoid str() on huge ints when pytest builds test IDs (int->str digit limit).
    if isinstance(val, int) and not isinstance(val, bool) and val.bit_length() > 3000:
        return f"{argname}-bigint{val.bit_length()}bits"
    return None
