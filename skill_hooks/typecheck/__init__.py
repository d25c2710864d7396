"""Post-edit type checking: backends, probing and reporting."""
