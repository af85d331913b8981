"""Artzy gallery backend."""
