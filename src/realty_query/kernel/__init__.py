"""Kernel – errors, specifications and value objects shared by every layer."""
