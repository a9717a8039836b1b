"""Core Layer — pure hydration logic, no IO, no async.

Invariants:
    - No module in core/ imports from infrastructure/
    - Every traversal is synchronous and stateless between calls

Design Decisions:
    - Resolvers are plain functions; only the Hydrator holds configuration
"""
