"""ViewModel package for UI state and command surfaces.

Call context:
    ``pomo/app/main.py`` builds concrete viewmodels through the container and
    subscribes to their notifications to render state.

Dependencies:
    Modules in this package depend on domain types, use cases and the
    ``Command`` utility only. I/O adapters remain outside.
"""
