"""Outbound service clients."""

from .vyos_client import VyosClient

__all__ = ["VyosClient"]
