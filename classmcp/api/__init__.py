"""Message dispatch, resources and the stdio server loop."""
