# recursion_schemes/structures/plugins/__init__.py
"""
Built-in contract adapters.

Every module in this package is scanned by the default ContractRegistry.
Adapters are discovered by their ``plugin_name``, ``structure_type`` and
``unwrap`` attributes; nothing needs to be imported here.
"""
