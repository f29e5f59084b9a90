"""
Settings package.

This package contains environment-driven settings:
- base.py: Settings read from the process environment
- logging.py: Structured logging configuration
"""
