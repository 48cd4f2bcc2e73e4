"""Adapters binding civil values to storage and serialization libraries."""
