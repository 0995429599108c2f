"""hostprep — bootstrap a fresh Linux host with a base set of CLI tools."""

__version__ = "0.1.0"
