"""DOCX template filling: placeholder substitution and table row growth."""

__version__ = "0.1.0"
