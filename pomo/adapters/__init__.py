"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (filesystem and
    in-memory test doubles) used by use cases.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests.
"""
