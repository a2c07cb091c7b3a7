"""Relay between the Roblox Studio tree plugin and editor clients."""

__version__ = "1.0.0"
