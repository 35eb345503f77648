"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_create_theme_handler

The container is organized into modules:
- infrastructure: Logger, database manager, database sessions
- repositories: Repository factories (session-scoped)
- handlers: Command handler factories (session-scoped)
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
)

# Repositories
from src.core.container.repositories import (
    get_admin_repository,
    get_office_repository,
    get_theme_repository,
)

# Handlers
from src.core.container.handlers import (
    get_create_theme_handler,
    get_register_admin_handler,
    get_register_office_handler,
    get_update_admin_handler,
    get_update_office_handler,
    get_update_theme_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    # Repositories
    "get_admin_repository",
    "get_office_repository",
    "get_theme_repository",
    # Handlers
    "get_register_admin_handler",
    "get_update_admin_handler",
    "get_register_office_handler",
    "get_update_office_handler",
    "get_create_theme_handler",
    "get_update_theme_handler",
]
