"""Ecosystem specific manifest readers and module resolvers."""
