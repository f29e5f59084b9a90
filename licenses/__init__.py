"""
Licenses module - Software license provider adapters.

This module handles:
- Lifecycle operation parameters and results
- The SoftwareLicenseProvider port
- Vendor adapters (cPanel) and the example provider
- HTTP transport to vendor APIs
"""
