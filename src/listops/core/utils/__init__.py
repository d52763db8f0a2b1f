"""Shared helpers for ListOps core modules."""
