import os

# The app's own engine must not touch a real database during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.core.database import Base, get_db
from app.models.file import File
from app.models.folder import Folder
from app.utils.sample_data import seed_sample_data

# In-memory SQLite database for testing; foreign keys are switched on by
# the connect listener in app.core.database so cascades behave like production
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Fresh schema and session for every test"""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Test client whose requests share the test session"""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_data(db_session):
    """Seed the demo hierarchy and return folders and files keyed by path"""
    seed_sample_data(db_session)
    folders = {folder.path: folder for folder in db_session.query(Folder).all()}
    files = {file.path: file for file in db_session.query(File).all()}
    return folders, files


@pytest.fixture
def create_folder(db_session):
    """Factory fixture to insert a folder directly"""
    def _create_folder(name, path=None, parent=None):
        folder = Folder(
            name=name,
            path=path or f"/{name}",
            parent_id=parent.id if parent else None,
        )
        db_session.add(folder)
        db_session.commit()
        db_session.refresh(folder)
        return folder

    return _create_folder


@pytest.fixture
def create_file(db_session):
    """Factory fixture to insert a file directly"""
    def _create_file(name, folder=None, extension=None, size=0, mime_type=None, path=None):
        file = File(
            name=name,
            path=path or (f"{folder.path}/{name}" if folder else name),
            folder_id=folder.id if folder else None,
            extension=extension,
            size=size,
            mime_type=mime_type,
        )
        db_session.add(file)
        db_session.commit()
        db_session.refresh(file)
        return file

    return _create_file
