"""Built-in pattern catalog and the framework registry."""
