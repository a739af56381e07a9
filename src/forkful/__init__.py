"""
Forkful recipe-discovery client.

The package exposes the client-side search, suggestion, and filter/sort/pagination
engine together with HTTP clients for the remote recipe collection service.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
