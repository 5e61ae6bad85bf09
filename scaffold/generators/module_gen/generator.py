"""Orchestrator for CRUD module generation."""
import logging
from functools import partial
from pathlib import Path
from string import Template
from typing import Tuple

from scaffold.generators.module_gen.render import (
    render_controller,
    render_create_dto,
    render_domain,
    render_entity,
    render_filter_dto,
    render_mapper,
    render_module,
    render_package,
    render_providers,
    render_repository_adapter,
    render_repository_port,
    render_service,
    render_update_dto,
)
from scaffold.generators.module_gen.types import (
    GeneratedFile,
    ModuleDescriptor,
    TemplateRole,
    TemplateSpec,
)
from scaffold.generators.module_gen.utils import derive_resource_name
from scaffold.generators.module_gen.writer import write_files

log = logging.getLogger(__name__)

MODULE_DIRECTORIES: Tuple[str, ...] = (
    "domain",
    "dto",
    "infrastructure",
    "infrastructure/entities",
    "infrastructure/repositories",
    "infrastructure/providers",
    "mappers",
)

TEMPLATES: Tuple[TemplateSpec, ...] = (
    TemplateSpec(TemplateRole.DOMAIN, "domain/${resource}_domain.py", render_domain),
    TemplateSpec(TemplateRole.CREATE_DTO, "dto/create_${resource}_dto.py", render_create_dto),
    TemplateSpec(TemplateRole.UPDATE_DTO, "dto/update_${resource}_dto.py", render_update_dto),
    TemplateSpec(TemplateRole.FILTER_DTO, "dto/filter_${resource}_dto.py", render_filter_dto),
    TemplateSpec(
        TemplateRole.ENTITY,
        "infrastructure/entities/${resource}_entity.py",
        render_entity,
    ),
    TemplateSpec(
        TemplateRole.REPOSITORY_PORT,
        "infrastructure/repositories/${resource}_repository.py",
        render_repository_port,
    ),
    TemplateSpec(
        TemplateRole.REPOSITORY_ADAPTER,
        "infrastructure/repositories/${resource}_repository_impl.py",
        render_repository_adapter,
    ),
    TemplateSpec(TemplateRole.MAPPER, "mappers/${resource}_mapper.py", render_mapper),
    TemplateSpec(
        TemplateRole.PROVIDERS,
        "infrastructure/providers/${resource}_providers.py",
        render_providers,
    ),
    TemplateSpec(TemplateRole.SERVICE, "${resource}_service.py", render_service),
    TemplateSpec(TemplateRole.CONTROLLER, "${resource}_controller.py", render_controller),
    TemplateSpec(TemplateRole.MODULE, "${resource}_module.py", render_module),
)

PACKAGE_LABELS = {
    "": "${Resource} CRUD module.",
    "domain": "${Resource} domain record.",
    "dto": "${Resource} request shapes.",
    "infrastructure": "${Resource} persistence adapters.",
    "infrastructure/entities": "${Resource} persistence entity.",
    "infrastructure/repositories": "${Resource} repository port and adapter.",
    "infrastructure/providers": "${Resource} explicit constructors.",
    "mappers": "${Resource} entity/domain mapping.",
}

PACKAGE_TEMPLATES: Tuple[TemplateSpec, ...] = tuple(
    TemplateSpec(
        TemplateRole.PACKAGE,
        f"{directory}/__init__.py" if directory else "__init__.py",
        partial(render_package, label=label),
    )
    for directory, label in PACKAGE_LABELS.items()
)


def plan_module(name: str) -> ModuleDescriptor:
    """
    Render every file of a CRUD module without touching the filesystem.

    Args:
        name: Lowercase resource name, e.g. "room"

    Returns:
        ModuleDescriptor with paths relative to the module root

    Raises:
        InvalidResourceNameError: if the name is missing or malformed
    """
    resource = derive_resource_name(name)
    context = resource.context()

    files = []
    for spec in PACKAGE_TEMPLATES + TEMPLATES:
        path = Template(spec.path).substitute(context)
        files.append(GeneratedFile(path=path, content=spec.render(resource), role=spec.role))
        log.debug("Rendered %s", path, extra={"resource": resource.name, "role": spec.role.value})

    return ModuleDescriptor(
        resource=resource,
        root=resource.name,
        directories=MODULE_DIRECTORIES,
        files=tuple(files),
    )


def generate_module(name: str, out_dir: Path) -> ModuleDescriptor:
    """
    Generate a CRUD module under ``out_dir/<name>``, overwriting existing files.

    Args:
        name: Lowercase resource name
        out_dir: Directory that holds generated modules

    Returns:
        The ModuleDescriptor that was written
    """
    descriptor = plan_module(name)
    module_dir = Path(out_dir) / descriptor.root

    log.info("Generating module in %s", module_dir, extra={"resource": descriptor.resource.name})
    write_files(descriptor.files, module_dir, descriptor.directories)
    log.info(
        "Generated %d files",
        len(descriptor.files),
        extra={"resource": descriptor.resource.name},
    )
    return descriptor
