"""
Infrastructure layer.

Adapters between the lending domain and the outside world: record
schemas for persisted documents, mappers, repositories and the
dependency-injection container.
"""
