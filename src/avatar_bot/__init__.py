"""Avatar Bot - an idle NPC for a virtual-world client."""

__version__ = "0.1.0"
