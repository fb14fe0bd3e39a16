"""formcheck - Page Object Model end-to-end suite for a contact form."""

__version__ = "0.1.0"
