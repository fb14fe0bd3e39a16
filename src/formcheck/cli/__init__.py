"""formcheck command-line interface."""
