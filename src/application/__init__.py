"""Application layer - Use cases and orchestration.

This layer contains the write-side use cases:
- commands/: Command dataclasses
- commands/handlers/: One handler per command

Handlers orchestrate entities and repository ports, log through
LoggerProtocol and return Result types. Business rules stay in the
domain layer.
"""
