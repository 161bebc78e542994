"""Engine layer — tag parsing, rule registry, record access, validation.

The engine wires domain rules to records.  It may import from domain and
config; it must never import from services, commands, or output.
"""
