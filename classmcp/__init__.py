"""classmcp - semantic CSS class patterns with class-name minification."""

__version__ = "2.0.0"
