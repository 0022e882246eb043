"""Shared helpers for HostBridge core (file I/O primitives, dict merging)."""
