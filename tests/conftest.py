"""
Pytest configuration for all tests.
"""

import os
import sys

# Add project root to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set up test environment variables before importing any modules
os.environ.setdefault('LOG_LEVEL', 'DEBUG')
os.environ.setdefault('STATIC_DIR', './does-not-exist')


