"""PocketDrive: browse, search, preview and download files under one root directory."""

__version__ = "0.1.0"
