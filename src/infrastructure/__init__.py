"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Database repositories (SQLAlchemy async)
- Structured logging (structlog)

Structure:
- persistence/: Database adapters (models, repositories, session management)
- logging/: Logger adapters implementing LoggerProtocol
- errors/: Exceptions raised by the persistence adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
