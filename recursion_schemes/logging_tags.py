# recursion_schemes/logging_tags.py
"""
Logging subsystem tags, prefixed to log messages so output stays searchable.
"""

REGISTRY = "[REGISTRY]"
CONFIG = "[CONFIG]"
