"""Interactive linear regression playground."""
__version__ = "0.1.0"
