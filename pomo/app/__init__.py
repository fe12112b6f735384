"""Application composition layer.

Modules in this package wire adapters, use cases, and view models into a
runnable command-line workflow without placing business logic in the entry
point.
"""
