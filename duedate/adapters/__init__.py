"""External adapters for the duedate system.

This package contains the concrete implementations of the core port
interfaces.

Adapter Organization:

- logging/: Adapters for recording core diagnostics (stdlib logging, etc.)
"""
