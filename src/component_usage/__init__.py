"""Component Usage Scanner - find how a module's exports are imported and used."""

__version__ = "1.0.0"
