"""Game Boy style memory bus and LCD model, with two console falling-block games."""

__version__ = "0.1.0"