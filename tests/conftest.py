"""Fixtures that generate the "room" module once and serve it from in-memory SQLite."""
import importlib
import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from scaffold.api.app import create_app
from scaffold.db.session import Base, build_engine, build_session_factory, session_dependency
from scaffold.generators.module_gen import generate_module


@pytest.fixture(scope="session")
def room_module(tmp_path_factory):
    """Generate the room module into a temp dir and import its wiring module."""
    modules_dir = tmp_path_factory.mktemp("modules")
    generate_module("room", modules_dir)
    sys.path.insert(0, str(modules_dir))
    try:
        yield importlib.import_module("room.room_module")
    finally:
        sys.path.remove(str(modules_dir))


@pytest.fixture
def room_repository_cls(room_module):
    module = importlib.import_module("room.infrastructure.repositories.room_repository_impl")
    return module.RoomRepositoryImpl


@pytest.fixture
def engine(room_module):
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(engine, tables=[entity.__table__ for entity in room_module.ENTITIES])
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def client(room_module, session_factory):
    router = room_module.create_room_module(session_dependency(session_factory))
    with TestClient(create_app([router])) as client:
        yield client
