"""Tool implementations exposed over the message protocol."""
