"""Adapters – document store implementations."""
