"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import AdminRepository, LoggerProtocol
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol

# Repository protocols
from src.domain.protocols.admin_repository import AdminRepository
from src.domain.protocols.office_repository import OfficeRepository
from src.domain.protocols.theme_repository import ThemeRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    # Repository protocols
    "AdminRepository",
    "OfficeRepository",
    "ThemeRepository",
]
