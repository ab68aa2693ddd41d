"""Bundled demo resources."""
