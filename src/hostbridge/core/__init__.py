"""Core services for HostBridge (path resolution, file access, codecs)."""
