"""Service layer — rule checking operations returning ServiceResult.

Services may import from domain, engine, config and plugins.
They must never import from commands or output.
"""
