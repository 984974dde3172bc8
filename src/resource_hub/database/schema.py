from sqlalchemy import (
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


resource_tags = Table(
    "resource_tags",
    Base.metadata,
    Column("resource_id", Integer, ForeignKey("resources.id"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id"), primary_key=True),
)


class Catalog(Base):
    __tablename__ = "catalogs"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)  # official, community
    url = Column(String, nullable=True)

    resources = relationship("Resource", back_populates="catalog")


class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, unique=True)


class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, index=True)
    type = Column(String, nullable=False)  # task, pipeline (free text)
    rating = Column(Float, nullable=False, default=0)
    catalog_id = Column(Integer, ForeignKey("catalogs.id"), nullable=False)

    catalog = relationship("Catalog", back_populates="resources")
    # Load order of versions is primary key order; version ordering happens in the repo
    versions = relationship(
        "ResourceVersion",
        back_populates="resource",
        order_by="ResourceVersion.id",
    )
    tags = relationship("Tag", secondary=resource_tags, order_by="Tag.name")


class ResourceVersion(Base):
    __tablename__ = "resource_versions"

    id = Column(Integer, primary_key=True)
    version = Column(String, nullable=False)  # dot-separated integers, e.g. 1.10.2
    description = Column(Text, nullable=True)
    display_name = Column(String, nullable=True)
    min_pipelines_version = Column(String, nullable=True)
    url = Column(String, nullable=False)  # web URL of the source repository
    updated_at = Column(DateTime, nullable=False)
    resource_id = Column(Integer, ForeignKey("resources.id"), nullable=False, index=True)

    resource = relationship("Resource", back_populates="versions")
