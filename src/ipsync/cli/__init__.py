"""ipsync command line interface."""

from ipsync.cli.commands import app

__all__ = ["app"]
