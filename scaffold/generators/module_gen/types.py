"""Dataclasses for module generation."""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple


class TemplateRole(str, Enum):
    DOMAIN = "DOMAIN"
    CREATE_DTO = "CREATE_DTO"
    UPDATE_DTO = "UPDATE_DTO"
    FILTER_DTO = "FILTER_DTO"
    ENTITY = "ENTITY"
    REPOSITORY_PORT = "REPOSITORY_PORT"
    REPOSITORY_ADAPTER = "REPOSITORY_ADAPTER"
    MAPPER = "MAPPER"
    PROVIDERS = "PROVIDERS"
    SERVICE = "SERVICE"
    CONTROLLER = "CONTROLLER"
    MODULE = "MODULE"
    PACKAGE = "PACKAGE"


@dataclass(frozen=True)
class ResourceName:
    """The three spellings of a resource name used by the templates."""
    name: str  # as given: paths, routes, table name
    capitalized: str  # class names
    upper: str  # constants

    @property
    def table_name(self) -> str:
        return self.name

    @property
    def route(self) -> str:
        return f"/{self.name}"

    def context(self) -> Dict[str, str]:
        """Placeholder values for ``string.Template`` substitution."""
        return {
            "resource": self.name,
            "Resource": self.capitalized,
            "RESOURCE": self.upper,
        }


@dataclass(frozen=True)
class TemplateSpec:
    """One file of the module skeleton: its role, path template and renderer."""
    role: TemplateRole
    path: str  # Relative to the module root, with ${resource} placeholders
    render: Callable[[ResourceName], str]


@dataclass(frozen=True)
class GeneratedFile:
    """Represents a generated file."""
    path: str  # Relative path from output directory
    content: str  # File contents
    role: TemplateRole = TemplateRole.PACKAGE


@dataclass(frozen=True)
class ModuleDescriptor:
    """Everything one generator run produces, before anything is written."""
    resource: ResourceName
    root: str  # Relative module root, equal to the resource name
    directories: Tuple[str, ...]
    files: Tuple[GeneratedFile, ...]

    def paths(self) -> Tuple[str, ...]:
        return tuple(f.path for f in self.files)

    def by_role(self, role: TemplateRole) -> Tuple[GeneratedFile, ...]:
        return tuple(f for f in self.files if f.role == role)

    def file(self, role: TemplateRole) -> GeneratedFile:
        """Return the single file rendered for ``role``."""
        matches = self.by_role(role)
        if len(matches) != 1:
            raise KeyError(f"Expected exactly one {role.value} file, found {len(matches)}")
        return matches[0]
