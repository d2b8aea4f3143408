"""Base classes shared by provider implementations."""

from .connector import BaseConnector

__all__ = ["BaseConnector"]
