"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RegisterAdmin, UpdateTheme).

Each command has a corresponding handler in handlers/ that orchestrates
the entity changes and persistence.
"""

from src.application.commands.admin_commands import RegisterAdmin, UpdateAdmin
from src.application.commands.office_commands import RegisterOffice, UpdateOffice
from src.application.commands.theme_commands import CreateTheme, UpdateTheme

__all__ = [
    # Admin commands
    "RegisterAdmin",
    "UpdateAdmin",
    # Office commands
    "RegisterOffice",
    "UpdateOffice",
    # Theme commands
    "CreateTheme",
    "UpdateTheme",
]
