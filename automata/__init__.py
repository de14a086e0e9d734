"""automata: a terminal menu that routes to full-screen views."""

__version__ = "0.1.0"
