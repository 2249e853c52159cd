"""
Root conftest.py for all tests in the project.

Shared fixtures live in tests/conftest.py.
"""

import sys
from pathlib import Path

# Allow running the tests from a checkout without installing the package
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))
