"""Utility functions for module generation."""
import keyword
import re

from scaffold.common.errors import InvalidResourceNameError
from scaffold.generators.module_gen.types import ResourceName

RESOURCE_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")
# PostgreSQL truncates identifiers beyond this length
MAX_RESOURCE_NAME_LENGTH = 63


def capitalize(name: str) -> str:
    """Upper-case the first character and leave the rest unchanged."""
    return name[:1].upper() + name[1:]


def validate_resource_name(name: str) -> str:
    """
    Check that ``name`` can be used as a path segment, Python identifier and table name.

    Raises:
        InvalidResourceNameError: if the name is empty or malformed
    """
    if not name:
        raise InvalidResourceNameError("Module name required")
    if len(name) > MAX_RESOURCE_NAME_LENGTH:
        raise InvalidResourceNameError(
            f"Module name '{name}' is longer than {MAX_RESOURCE_NAME_LENGTH} characters"
        )
    if not RESOURCE_NAME_PATTERN.match(name):
        raise InvalidResourceNameError(
            f"Module name '{name}' must start with a lowercase letter and contain only "
            "lowercase letters, digits and underscores"
        )
    if keyword.iskeyword(name):
        raise InvalidResourceNameError(f"Module name '{name}' is a reserved Python keyword")
    return name


def derive_resource_name(name: str) -> ResourceName:
    validate_resource_name(name)
    return ResourceName(name=name, capitalized=capitalize(name), upper=name.upper())
