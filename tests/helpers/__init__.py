"""Test helper modules for the HostBridge test suite.

- sandbox: builds the reference workspace tree used by most tests
- recording: a publisher that records hub events
- cache_utils: cache reset utilities for test isolation
"""
from __future__ import annotations
