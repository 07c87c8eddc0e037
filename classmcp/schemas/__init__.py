"""Pydantic schemas for tool arguments and protocol messages."""
