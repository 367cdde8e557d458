"""Farcaster integration."""

from crossrelay.infrastructure.farcaster.client import FarcasterClient

__all__ = ["FarcasterClient"]
