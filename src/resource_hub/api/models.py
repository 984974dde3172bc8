"""Response models for the resource API.

Collection items embed the latest version in the resource; single-version
items embed the resource in the version.
"""

from typing import List, Optional

from pydantic import BaseModel


class Catalog(BaseModel):
    id: int
    type: str


class Tag(BaseModel):
    id: int
    name: str


class LatestVersion(BaseModel):
    """Latest version of a resource, as shown in collections."""
    id: int
    version: str
    description: Optional[str] = None
    display_name: Optional[str] = None
    min_pipelines_version: Optional[str] = None
    web_url: str
    raw_url: str
    updated_at: str  # UTC, e.g. "2020-01-02 03:04:05 +0000 UTC"


class Resource(BaseModel):
    id: int
    name: str
    catalog: Catalog
    type: str
    rating: float
    latest_version: Optional[LatestVersion] = None  # None when embedded in a Version
    tags: List[Tag] = []


class Version(BaseModel):
    """A resource version.

    Minimal form (version lists) carries only id, version and URLs; the full
    form also carries descriptive fields and the owning resource.
    """
    id: int
    version: str
    description: Optional[str] = None
    display_name: Optional[str] = None
    min_pipelines_version: Optional[str] = None
    web_url: str
    raw_url: str
    updated_at: Optional[str] = None
    resource: Optional[Resource] = None


class Versions(BaseModel):
    """All versions of a resource, ascending, plus the latest one."""
    latest: Version
    versions: List[Version]
