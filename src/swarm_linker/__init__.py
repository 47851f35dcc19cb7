"""Slack bot that turns CL#<number> references into Swarm review links."""

__version__ = "0.1.0"
