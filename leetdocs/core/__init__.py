"""
Core application engine.

The `SyncManager` drives a run from login to the last written file.
"""
