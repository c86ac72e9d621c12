"""
Profile persistence.

A small repository layer: ProfileStore keeps profiles in any
KeyValueStore backend, upgrading old records on load.
"""

from .backends import KeyValueStore, MemoryStore, JsonFileStore
from .migrations import upgrade_profile_record
from .profiles import ProfileStore

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "ProfileStore",
    "upgrade_profile_record",
]
