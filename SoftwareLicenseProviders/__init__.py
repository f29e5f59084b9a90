"""
Software license provision providers.

Adapters that translate provisioning lifecycle operations into calls
against third-party license vendor APIs.
"""

__version__ = "1.0.0"
