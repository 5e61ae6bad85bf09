"""Templates for one CRUD module, with ${resource}/${Resource}/${RESOURCE} placeholders.

Every renderer takes a ``ResourceName`` and returns the file text; paths and
roles live in ``generator.TEMPLATES``.
"""
from string import Template

from scaffold.generators.module_gen.types import ResourceName


_DOMAIN = Template("""from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ${Resource}(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[str] = None
    name: Optional[str] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
""")


_CREATE_DTO = Template("""from pydantic import BaseModel, Field


class Create${Resource}Dto(BaseModel):
    name: str = Field(..., min_length=1)
""")


_UPDATE_DTO = Template("""from typing import Optional

from pydantic import BaseModel, Field


class Update${Resource}Dto(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
""")


_FILTER_DTO = Template("""from scaffold.common.pagination import FilterParams


class Filter${Resource}Dto(FilterParams):
    \"\"\"Listing filters for ${resource}: pagination, sort and free-text search.\"\"\"
""")


_ENTITY = Template("""import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from scaffold.db.session import Base, utcnow


class ${Resource}Entity(Base):
    __tablename__ = "${resource}"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt", DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        "deletedAt", DateTime(timezone=True), nullable=True
    )
""")


_REPOSITORY_PORT = Template("""from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from scaffold.common.pagination import FilterParams, PaginatedResult, PaginationParams

from ..entities.${resource}_entity import ${Resource}Entity


class ${Resource}Repository(ABC):
    @abstractmethod
    def create(self, data: Mapping[str, Any]) -> ${Resource}Entity:
        pass

    @abstractmethod
    def find_all(self, pagination: PaginationParams) -> PaginatedResult[${Resource}Entity]:
        pass

    @abstractmethod
    def find_by_id(self, id: str, include_deleted: bool = False) -> Optional[${Resource}Entity]:
        pass

    @abstractmethod
    def find_with_filter(self, filter: FilterParams) -> PaginatedResult[${Resource}Entity]:
        pass

    @abstractmethod
    def update(self, id: str, data: Mapping[str, Any]) -> ${Resource}Entity:
        pass

    @abstractmethod
    def delete(self, id: str) -> None:
        pass
""")


_REPOSITORY_ADAPTER = Template("""from scaffold.common.repository import SqlAlchemyRepository

from ..entities.${resource}_entity import ${Resource}Entity
from .${resource}_repository import ${Resource}Repository


class ${Resource}RepositoryImpl(SqlAlchemyRepository[${Resource}Entity], ${Resource}Repository):
    model = ${Resource}Entity
    resource_name = "${Resource}"
    search_fields = ("name",)
""")


_MAPPER = Template("""from typing import Any, Dict

from ..domain.${resource}_domain import ${Resource}
from ..infrastructure.entities.${resource}_entity import ${Resource}Entity


class ${Resource}Mapper:
    @staticmethod
    def to_domain(entity: ${Resource}Entity) -> ${Resource}:
        return ${Resource}(
            id=entity.id,
            name=entity.name,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            deleted_at=entity.deleted_at,
        )

    @staticmethod
    def to_entity(domain: ${Resource}) -> Dict[str, Any]:
        entity: Dict[str, Any] = {}
        if domain.id:
            entity["id"] = domain.id
        if domain.name is not None:
            entity["name"] = domain.name
        return entity
""")


_PROVIDERS = Template("""from sqlalchemy.orm import Session

from ...${resource}_service import ${Resource}Service
from ..repositories.${resource}_repository import ${Resource}Repository
from ..repositories.${resource}_repository_impl import ${Resource}RepositoryImpl


def provide_${resource}_repository(session: Session) -> ${Resource}Repository:
    return ${Resource}RepositoryImpl(session)


def provide_${resource}_service(session: Session) -> ${Resource}Service:
    return ${Resource}Service(provide_${resource}_repository(session))
""")


_SERVICE = Template("""from scaffold.common.errors import NotFoundError
from scaffold.common.pagination import Page, PaginationParams

from .dto.create_${resource}_dto import Create${Resource}Dto
from .dto.filter_${resource}_dto import Filter${Resource}Dto
from .dto.update_${resource}_dto import Update${Resource}Dto
from .infrastructure.entities.${resource}_entity import ${Resource}Entity
from .infrastructure.repositories.${resource}_repository import ${Resource}Repository


class ${Resource}Service:
    def __init__(self, repo: ${Resource}Repository):
        self.repo = repo

    def create(self, data: Create${Resource}Dto) -> ${Resource}Entity:
        return self.repo.create(data.model_dump())

    def find_all(self, pagination: PaginationParams) -> Page[${Resource}Entity]:
        return Page.from_result(self.repo.find_all(pagination))

    def find_with_filter(self, filter: Filter${Resource}Dto) -> Page[${Resource}Entity]:
        return Page.from_result(self.repo.find_with_filter(filter))

    def find_one(self, id: str) -> ${Resource}Entity:
        entity = self.repo.find_by_id(id)
        if entity is None:
            raise NotFoundError("${Resource}", id)
        return entity

    def update(self, id: str, data: Update${Resource}Dto) -> ${Resource}Entity:
        self.find_one(id)
        return self.repo.update(id, data.model_dump(exclude_unset=True))

    def delete(self, id: str) -> None:
        self.find_one(id)
        self.repo.delete(id)
""")


_CONTROLLER = Template("""from typing import Annotated, Callable

from fastapi import APIRouter, Depends, HTTPException, Query, status

from scaffold.common.errors import InvalidSortFieldError, NotFoundError
from scaffold.common.pagination import PaginatedResponse, PaginationParams

from .${resource}_service import ${Resource}Service
from .domain.${resource}_domain import ${Resource}
from .dto.create_${resource}_dto import Create${Resource}Dto
from .dto.filter_${resource}_dto import Filter${Resource}Dto
from .dto.update_${resource}_dto import Update${Resource}Dto
from .mappers.${resource}_mapper import ${Resource}Mapper


def build_${resource}_router(get_service: Callable[..., ${Resource}Service]) -> APIRouter:
    router = APIRouter(prefix="/${resource}", tags=["${Resource}"])

    @router.post(
        "",
        response_model=${Resource},
        status_code=status.HTTP_201_CREATED,
        response_description="Created successfully",
    )
    def create(body: Create${Resource}Dto, service: ${Resource}Service = Depends(get_service)):
        return ${Resource}Mapper.to_domain(service.create(body))

    @router.get(
        "",
        response_model=PaginatedResponse[${Resource}],
        response_description="Get all with pagination",
    )
    def find_all(
        pagination: Annotated[PaginationParams, Query()],
        service: ${Resource}Service = Depends(get_service),
    ):
        try:
            page = service.find_all(pagination)
        except InvalidSortFieldError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return PaginatedResponse[${Resource}].from_page(page.map(${Resource}Mapper.to_domain))

    @router.get(
        "/filter/search",
        response_model=PaginatedResponse[${Resource}],
        response_description="Get with filter and search",
    )
    def find_with_filter(
        filter: Annotated[Filter${Resource}Dto, Query()],
        service: ${Resource}Service = Depends(get_service),
    ):
        try:
            page = service.find_with_filter(filter)
        except InvalidSortFieldError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return PaginatedResponse[${Resource}].from_page(page.map(${Resource}Mapper.to_domain))

    @router.get("/{id}", response_model=${Resource}, response_description="Get by ID")
    def find_one(id: str, service: ${Resource}Service = Depends(get_service)):
        try:
            return ${Resource}Mapper.to_domain(service.find_one(id))
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    @router.patch("/{id}", response_model=${Resource}, response_description="Updated successfully")
    def update(id: str, body: Update${Resource}Dto, service: ${Resource}Service = Depends(get_service)):
        try:
            return ${Resource}Mapper.to_domain(service.update(id, body))
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    @router.delete(
        "/{id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_description="Deleted successfully",
    )
    def remove(id: str, service: ${Resource}Service = Depends(get_service)):
        try:
            service.delete(id)
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return router
""")


_MODULE = Template("""\"\"\"Wires the ${resource} module: session -> repository -> service -> router.\"\"\"
from typing import Any, Callable

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .${resource}_controller import build_${resource}_router
from .${resource}_service import ${Resource}Service
from .infrastructure.entities.${resource}_entity import ${Resource}Entity
from .infrastructure.providers.${resource}_providers import provide_${resource}_service

ENTITIES = [${Resource}Entity]


def create_${resource}_module(get_session: Callable[..., Any]) -> APIRouter:
    def get_service(session: Session = Depends(get_session)) -> ${Resource}Service:
        return provide_${resource}_service(session)

    return build_${resource}_router(get_service)
""")


_PACKAGE = Template("""\"\"\"${label}\"\"\"
""")


def render_domain(resource: ResourceName) -> str:
    return _DOMAIN.substitute(resource.context())


def render_create_dto(resource: ResourceName) -> str:
    return _CREATE_DTO.substitute(resource.context())


def render_update_dto(resource: ResourceName) -> str:
    return _UPDATE_DTO.substitute(resource.context())


def render_filter_dto(resource: ResourceName) -> str:
    return _FILTER_DTO.substitute(resource.context())


def render_entity(resource: ResourceName) -> str:
    return _ENTITY.substitute(resource.context())


def render_repository_port(resource: ResourceName) -> str:
    return _REPOSITORY_PORT.substitute(resource.context())


def render_repository_adapter(resource: ResourceName) -> str:
    return _REPOSITORY_ADAPTER.substitute(resource.context())


def render_mapper(resource: ResourceName) -> str:
    return _MAPPER.substitute(resource.context())


def render_providers(resource: ResourceName) -> str:
    return _PROVIDERS.substitute(resource.context())


def render_service(resource: ResourceName) -> str:
    return _SERVICE.substitute(resource.context())


def render_controller(resource: ResourceName) -> str:
    return _CONTROLLER.substitute(resource.context())


def render_module(resource: ResourceName) -> str:
    return _MODULE.substitute(resource.context())


def render_package(resource: ResourceName, label: str) -> str:
    """Generate an ``__init__.py`` package marker."""
    return _PACKAGE.substitute(resource.context(), label=Template(label).substitute(resource.context()))
