"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from resource_hub.database.schema import Base, Catalog, Resource, ResourceVersion, Tag
from resource_hub.database.sqlite_client import register_unicode_lower

CATALOG_URL = "https://github.com/tektoncd/catalog"


def _version(id, version, resource_id, path, description=None, updated_at=None):
    return ResourceVersion(
        id=id,
        version=version,
        description=description or f"{path} {version}",
        display_name=path.split("/")[-1].title(),
        min_pipelines_version="0.12.1",
        url=f"{CATALOG_URL}/tree/main/{path}/{version}/{path.split('/')[-1]}.yaml",
        updated_at=updated_at or datetime(2020, 1, 1, 12, 0, 0),
        resource_id=resource_id,
    )


def seed_catalog(session):
    """Insert a small catalog.

    Listing order (rating desc, name asc): buildah, golang-build, kaniko,
    foobar, barbaz. "orphan" has no versions.
    """
    catalog = Catalog(id=1, name="tekton", type="official", url=CATALOG_URL)
    cli = Tag(id=1, name="cli")
    image_build = Tag(id=2, name="image-build")
    build_tool = Tag(id=3, name="build-tool")

    resources = [
        Resource(id=1, name="buildah", type="task", rating=4.5, catalog_id=1, tags=[image_build, cli]),
        Resource(id=2, name="kaniko", type="Task", rating=3.0, catalog_id=1, tags=[image_build]),
        Resource(id=3, name="golang-build", type="task", rating=4.5, catalog_id=1, tags=[build_tool]),
        Resource(id=4, name="foobar", type="pipeline", rating=2.0, catalog_id=1),
        Resource(id=5, name="barbaz", type="pipeline", rating=1.0, catalog_id=1),
        Resource(id=6, name="orphan", type="task", rating=5.0, catalog_id=1),
    ]
    versions = [
        _version(1, "0.1", 1, "task/buildah", updated_at=datetime(2020, 1, 1, 12, 0, 0)),
        _version(2, "0.2", 1, "task/buildah", updated_at=datetime(2020, 2, 1, 12, 30, 5, 250000)),
        _version(3, "0.1", 2, "task/kaniko"),
        # inserted out of version order on purpose
        _version(4, "1.0", 3, "task/golang-build"),
        _version(5, "1.10", 3, "task/golang-build"),
        _version(6, "1.2", 3, "task/golang-build"),
        # duplicate rows for the same version
        _version(7, "0.1", 4, "pipeline/foobar", description="first row"),
        _version(8, "0.1", 4, "pipeline/foobar", description="second row"),
        _version(9, "0.3", 5, "pipeline/barbaz"),
    ]

    session.add(catalog)
    session.add_all(resources)
    session.add_all(versions)
    session.commit()


@pytest.fixture
def session():
    """Create a temporary in-memory database session for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    register_unicode_lower(engine)
    Base.metadata.create_all(engine)

    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_session(session):
    """In-memory session with the sample catalog loaded."""
    seed_catalog(session)
    session.expunge_all()
    return session
