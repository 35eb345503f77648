"""Domain layer - Pure business logic.

This layer contains the core business entities, value objects, validators
and protocols (ports). The domain layer has NO dependencies on any framework
or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (mutable, have identity): Admin, Office, Theme
- value_objects/: Value objects (immutable, no identity): Account
- validators/: Field-level rules shared by construction and change operations
- protocols/: Domain protocols (repository interfaces, logger interface)

The domain layer defines WHAT the business does, not HOW it's implemented.
"""
