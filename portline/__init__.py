"""Portline - container port mappings over a small authenticated API."""

__version__ = "1.0.0"

# Version string shown in the web interface
APP_VERSION = f"v{__version__}"
