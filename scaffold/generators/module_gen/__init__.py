"""CRUD module generator."""
from scaffold.generators.module_gen.generator import generate_module, plan_module
from scaffold.generators.module_gen.types import (
    GeneratedFile,
    ModuleDescriptor,
    ResourceName,
    TemplateRole,
)

__all__ = [
    "GeneratedFile",
    "ModuleDescriptor",
    "ResourceName",
    "TemplateRole",
    "generate_module",
    "plan_module",
]
