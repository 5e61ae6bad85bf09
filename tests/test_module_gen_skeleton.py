"""Tests for module generation skeleton."""
from pathlib import Path

import pytest

from scaffold.common.errors import InvalidResourceNameError
from scaffold.generators.module_gen import TemplateRole, generate_module, plan_module
from scaffold.generators.module_gen.generator import MODULE_DIRECTORIES

EXPECTED_ROOM_FILES = {
    TemplateRole.DOMAIN: "domain/room_domain.py",
    TemplateRole.CREATE_DTO: "dto/create_room_dto.py",
    TemplateRole.UPDATE_DTO: "dto/update_room_dto.py",
    TemplateRole.FILTER_DTO: "dto/filter_room_dto.py",
    TemplateRole.ENTITY: "infrastructure/entities/room_entity.py",
    TemplateRole.REPOSITORY_PORT: "infrastructure/repositories/room_repository.py",
    TemplateRole.REPOSITORY_ADAPTER: "infrastructure/repositories/room_repository_impl.py",
    TemplateRole.MAPPER: "mappers/room_mapper.py",
    TemplateRole.PROVIDERS: "infrastructure/providers/room_providers.py",
    TemplateRole.SERVICE: "room_service.py",
    TemplateRole.CONTROLLER: "room_controller.py",
    TemplateRole.MODULE: "room_module.py",
}


def _snapshot(root: Path) -> dict:
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def test_plan_module_describes_every_template():
    descriptor = plan_module("room")

    assert descriptor.root == "room"
    assert descriptor.resource.capitalized == "Room"
    for role, path in EXPECTED_ROOM_FILES.items():
        assert descriptor.file(role).path == path

    packages = {f.path for f in descriptor.by_role(TemplateRole.PACKAGE)}
    assert packages == {"__init__.py"} | {f"{d}/__init__.py" for d in MODULE_DIRECTORIES}
    assert len(descriptor.files) == len(EXPECTED_ROOM_FILES) + len(packages)


def test_plan_module_renders_names_into_templates():
    descriptor = plan_module("room")

    assert '__tablename__ = "room"' in descriptor.file(TemplateRole.ENTITY).content
    assert "class RoomEntity(Base):" in descriptor.file(TemplateRole.ENTITY).content
    assert "class RoomService:" in descriptor.file(TemplateRole.SERVICE).content
    assert 'APIRouter(prefix="/room"' in descriptor.file(TemplateRole.CONTROLLER).content
    assert "def create_room_module(" in descriptor.file(TemplateRole.MODULE).content
    assert "class FilterRoomDto(FilterParams):" in descriptor.file(TemplateRole.FILTER_DTO).content

    for generated in descriptor.files:
        assert "${" not in generated.content, f"{generated.path} has an unfilled placeholder"
        assert "TODO" not in generated.content, f"{generated.path} contains TODO note"


def test_plan_module_for_other_resource():
    descriptor = plan_module("booking")

    assert descriptor.file(TemplateRole.SERVICE).path == "booking_service.py"
    assert "class BookingRepositoryImpl(" in descriptor.file(TemplateRole.REPOSITORY_ADAPTER).content
    assert 'NotFoundError("Booking", id)' in descriptor.file(TemplateRole.SERVICE).content
    assert "room" not in "".join(f.content for f in descriptor.files).lower()


def test_generated_files_compile():
    for generated in plan_module("room").files:
        compile(generated.content, generated.path, "exec")


def test_generate_module_writes_skeleton(tmp_path):
    descriptor = generate_module("room", tmp_path)
    module_dir = tmp_path / "room"

    for directory in MODULE_DIRECTORIES:
        assert (module_dir / directory).is_dir(), f"{directory} was not created"
    for generated in descriptor.files:
        path = module_dir / generated.path
        assert path.is_file(), f"File {generated.path} was not created"
        assert path.read_text(encoding="utf-8") == generated.content


def test_generate_twice_is_byte_identical(tmp_path):
    generate_module("room", tmp_path / "first")
    first = _snapshot(tmp_path / "first" / "room")

    generate_module("room", tmp_path / "first")
    generate_module("room", tmp_path / "second")

    assert _snapshot(tmp_path / "first" / "room") == first
    assert _snapshot(tmp_path / "second" / "room") == first


def test_generate_overwrites_existing_files(tmp_path):
    generate_module("room", tmp_path)
    service_path = tmp_path / "room" / "room_service.py"
    service_path.write_text("# edited by hand\n", encoding="utf-8")

    generate_module("room", tmp_path)

    assert "class RoomService:" in service_path.read_text(encoding="utf-8")


@pytest.mark.parametrize("name", ["", "Room", "room type", "room/x"])
def test_invalid_name_writes_nothing(tmp_path, name):
    out_dir = tmp_path / "modules"

    with pytest.raises(InvalidResourceNameError):
        generate_module(name, out_dir)

    assert not out_dir.exists()
