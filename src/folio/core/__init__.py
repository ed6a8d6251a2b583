"""Core primitives: content units, ports, configuration and errors."""
