"""
Domain layer.

The domain layer contains the lending model: what a shareable item is,
which states it can be in, how a loan is opened and closed, and how a
waiting list resolves contention for a single item. It has no
dependencies on persistence, HTTP or any other infrastructure.

This layer contains:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects defined by attributes
- Factories: Construction of money totals and waiting lists
"""
