"""Bigcoin stats bot - keeps per-guild stat channels in sync with upstream metrics."""

__version__ = "0.1.0"
