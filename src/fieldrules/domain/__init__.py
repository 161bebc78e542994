"""Domain layer — decimal parsing, rule parameters, verdicts, format checks.

This layer depends only on stdlib and the phonenumbers library.
It must never import from engine, services, commands, config, or output.
"""
