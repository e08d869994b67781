"""Service layer — business logic returning Outcome values.

Services may import from domain and infrastructure layers.
They must never import from commands, output, or api.
"""
