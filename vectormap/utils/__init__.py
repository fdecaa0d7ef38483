"""Leaf-node helpers."""
