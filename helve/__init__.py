"""CNF, Horn and MODS formula machinery for checking planning certificates."""

__version__ = "0.1.0"