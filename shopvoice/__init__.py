"""shopvoice - multilingual voice commands for shopping lists."""

__version__ = "0.1.0"
