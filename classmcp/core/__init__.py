"""Core settings, logging, session state and the minification engine."""
