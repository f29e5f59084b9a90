"""
Base settings for SoftwareLicenseProviders.

Values are read from the process environment once at import time.
Provider credentials are not settings; they are passed to each
provider through its configuration object.
"""
import os

# development, production or test
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

# Overrides the per-environment default level when set
LOG_LEVEL = os.environ.get("LOG_LEVEL")

# json, verbose or simple
LOG_FORMAT = os.environ.get("LOG_FORMAT", "json")

# Optional rotating log file
LOG_FILE = os.environ.get("LOG_FILE")
