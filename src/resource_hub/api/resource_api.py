"""Resource API: canonical query surface for resource data."""

from dataclasses import replace
from typing import List

from sqlalchemy.orm import Session

from ..database.resource_repo import (
    RecordNotFoundError,
    ResourceRow,
    StoreError,
    build_fetch_spec,
    by_name_exact,
    by_name_substring,
    by_resource_id,
    by_type,
    fetch_resource,
    fetch_resources,
    fetch_versions,
    limit as limit_to,
    with_details,
    with_specific_version,
)
from ..utils.logging import get_logger
from .assembler import complete_version_info, init_resource, versions_info
from .errors import InternalError, NotFoundError
from .models import Resource, Version, Versions

logger = get_logger(__name__)

DEFAULT_LIMIT = 100


def _resources_for_spec(session: Session, spec) -> List[Resource]:
    try:
        rows = fetch_resources(session, spec)
    except StoreError as e:
        logger.error(f"Failed to fetch resources: {e}", exc_info=True)
        raise InternalError() from e

    if not rows:
        raise NotFoundError()

    return [init_resource(row) for row in rows]


def query_resources(
    session: Session,
    name: str = "",
    type: str = "",
    limit: int = DEFAULT_LIMIT,
) -> List[Resource]:
    """
    Find resources by name, type or both.

    Args:
        session: SQLAlchemy session
        name: Case-insensitive substring of the resource name ("" matches all)
        type: Case-insensitive resource type ("" matches all)
        limit: Maximum number of resources to return

    Returns:
        Resources sorted by rating (descending) then name

    Raises:
        NotFoundError: If nothing matches
        InternalError: If the store fails
    """
    spec = build_fetch_spec(
        with_details,
        by_type(type),
        by_name_substring(name),
        limit_to(limit),
    )
    return _resources_for_spec(session, spec)


def list_resources(session: Session, limit: int = DEFAULT_LIMIT) -> List[Resource]:
    """List all resources sorted by rating (descending) then name."""
    spec = build_fetch_spec(with_details, limit_to(limit))
    return _resources_for_spec(session, spec)


def versions_by_id(session: Session, resource_id: int) -> Versions:
    """
    Get all versions of a resource given its id.

    Returns:
        Versions in ascending order, with the highest as `latest`

    Raises:
        NotFoundError: If the resource has no versions (or does not exist)
        InternalError: If the store fails
    """
    spec = build_fetch_spec(by_resource_id(resource_id))
    try:
        all_versions = fetch_versions(session, spec)
    except StoreError as e:
        logger.error(f"Failed to fetch versions of resource {resource_id}: {e}", exc_info=True)
        raise InternalError() from e

    if not all_versions:
        raise NotFoundError()

    return versions_info(all_versions)


def by_type_name_version(session: Session, type: str, name: str, version: str) -> Version:
    """
    Get one version of a resource by resource type, name and version.

    Duplicate rows for the same version are tolerated: a warning is logged
    and the first loaded row is returned.

    Raises:
        NotFoundError: If no resource or no such version matches
        InternalError: If the store fails
    """
    spec = build_fetch_spec(
        with_specific_version(version),
        by_type(type),
        by_name_exact(name),
    )
    try:
        row: ResourceRow = fetch_resource(session, spec)
    except RecordNotFoundError as e:
        raise NotFoundError() from e
    except StoreError as e:
        logger.error(f"Failed to fetch {type}/{name}@{version}: {e}", exc_info=True)
        raise InternalError() from e

    count = len(row.versions)
    if count == 0:
        raise NotFoundError()
    if count > 1:
        logger.warning(f"expected to find one version but found {count}")
        row = replace(row, versions=row.versions[:1])

    return complete_version_info(row)
