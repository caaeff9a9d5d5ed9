"""Theme naming and rollback resolution."""

from icontree.naming.rollback import is_accessible, resolve_available_theme, rollback_order
from icontree.naming.themes import (
    NameBinding,
    binding_for,
    derive_bindings,
    identifier_for,
    kebab_name_for,
    to_pascal_case,
)

__all__ = [
    "NameBinding",
    "binding_for",
    "derive_bindings",
    "identifier_for",
    "kebab_name_for",
    "to_pascal_case",
    "is_accessible",
    "resolve_available_theme",
    "rollback_order",
]
