"""roastfetch - hardware specs, tiered and roasted."""

__version__ = "0.1.0"
