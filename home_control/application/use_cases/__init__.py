"""Business use cases."""
