"""
Pytest configuration for the subsonic-api test suite.

Adds the src directory to the Python path so the tests run against the
working tree whether or not the package is installed.
"""
import sys
from pathlib import Path

src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))
