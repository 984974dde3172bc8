"""Convert fetched store rows into API response models."""

from typing import TYPE_CHECKING, List

from ..utils.time import to_utc_string
from ..utils.urls import raw_url
from ..versioning import latest
from .models import Catalog, LatestVersion, Resource, Tag, Version, Versions

if TYPE_CHECKING:
    from ..database.resource_repo import ResourceRow
    from ..database.schema import ResourceVersion
    from ..database.schema import Tag as TagRow


def _tags(tag_rows: List["TagRow"]) -> List[Tag]:
    return [Tag(id=tag.id, name=tag.name) for tag in tag_rows]


def init_resource(row: "ResourceRow") -> Resource:
    """Build a collection item: resource + catalog + tags + latest version."""
    lv = latest(row.versions)
    return Resource(
        id=row.resource.id,
        name=row.resource.name,
        catalog=Catalog(id=row.catalog.id, type=row.catalog.type),
        type=row.resource.type,
        rating=row.resource.rating,
        latest_version=LatestVersion(
            id=lv.id,
            version=lv.version,
            description=lv.description,
            display_name=lv.display_name,
            min_pipelines_version=lv.min_pipelines_version,
            web_url=lv.url,
            raw_url=raw_url(lv.url),
            updated_at=to_utc_string(lv.updated_at),
        ),
        tags=_tags(row.tags),
    )


def min_version_info(v: "ResourceVersion") -> Version:
    """Build a version-list item (id, version and URLs only)."""
    return Version(
        id=v.id,
        version=v.version,
        web_url=v.url,
        raw_url=raw_url(v.url),
    )


def versions_info(versions: List["ResourceVersion"]) -> Versions:
    """Build the version list of a resource; versions must be ascending."""
    return Versions(
        latest=min_version_info(latest(versions)),
        versions=[min_version_info(v) for v in versions],
    )


def complete_version_info(row: "ResourceRow") -> Version:
    """Build a single-version item embedding its resource.

    Uses the first loaded version of the row.
    """
    resource = Resource(
        id=row.resource.id,
        name=row.resource.name,
        type=row.resource.type,
        rating=row.resource.rating,
        tags=_tags(row.tags),
        catalog=Catalog(id=row.catalog.id, type=row.catalog.type),
    )

    v = row.versions[0]
    return Version(
        id=v.id,
        version=v.version,
        description=v.description,
        display_name=v.display_name,
        min_pipelines_version=v.min_pipelines_version,
        web_url=v.url,
        raw_url=raw_url(v.url),
        updated_at=to_utc_string(v.updated_at),
        resource=resource,
    )
