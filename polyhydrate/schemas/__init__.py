"""Pydantic Schemas — declarative configuration attached to model types.

Invariants:
    - Schemas are immutable once constructed
"""
