"""Shared domain primitives used by several validators."""
