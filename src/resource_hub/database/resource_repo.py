"""Repository functions for resource queries.

Queries are described by an immutable FetchSpec built from composable rules
(`build_fetch_spec(with_details, by_type("task"), limit(10))`). The fetch
functions below are the only place a spec is turned into SQL.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Query, Session, selectinload

from resource_hub.database.schema import Catalog, Resource, ResourceVersion, Tag
from resource_hub.utils.logging import get_logger
from resource_hub.versioning import MalformedVersionError, sort_versions

logger = get_logger(__name__)


class StoreError(Exception):
    """Raised when the store fails to answer a fetch."""


class RecordNotFoundError(StoreError):
    """Raised when a single-row fetch matches nothing."""


@dataclass(frozen=True)
class Filter:
    """One predicate: `field` of the queried model compared with `value`."""
    field: str
    op: str  # eq | ieq | icontains
    value: Any


@dataclass(frozen=True)
class FetchSpec:
    """What to fetch: predicates (ANDed), ordering, eager loading and limit."""
    filters: Tuple[Filter, ...] = ()
    order_by_rating: bool = False
    with_details: bool = False
    version: Optional[str] = None  # restricts the loaded versions when set
    limit: Optional[int] = None


@dataclass(frozen=True)
class ResourceRow:
    """A resource with its catalog, tags and versions resolved."""
    resource: Resource
    catalog: Catalog
    tags: List[Tag] = field(default_factory=list)  # name ascending
    versions: List[ResourceVersion] = field(default_factory=list)  # version ascending


Rule = Callable[[FetchSpec], FetchSpec]


def build_fetch_spec(*rules: Rule) -> FetchSpec:
    """Apply rules in order to an empty FetchSpec."""
    spec = FetchSpec()
    for rule in rules:
        spec = rule(spec)
    return spec


def noop(spec: FetchSpec) -> FetchSpec:
    return spec


def _add_filter(spec: FetchSpec, f: Filter) -> FetchSpec:
    return replace(spec, filters=spec.filters + (f,))


def by_type(t: str) -> Rule:
    """Case-insensitive type equality; no-op for an empty type."""
    if not t:
        return noop
    f = Filter("type", "ieq", t.lower())
    return lambda spec: _add_filter(spec, f)


def by_name_exact(name: str) -> Rule:
    """Case-insensitive name equality; no-op for an empty name."""
    if not name:
        return noop
    f = Filter("name", "ieq", name.lower())
    return lambda spec: _add_filter(spec, f)


def by_name_substring(name: str) -> Rule:
    """Case-insensitive 'name contains'; no-op for an empty name."""
    if not name:
        return noop
    f = Filter("name", "icontains", name.lower())
    return lambda spec: _add_filter(spec, f)


def by_resource_id(resource_id: int) -> Rule:
    f = Filter("resource_id", "eq", resource_id)
    return lambda spec: _add_filter(spec, f)


def order_by_rating(spec: FetchSpec) -> FetchSpec:
    return replace(spec, order_by_rating=True)


def with_details(spec: FetchSpec) -> FetchSpec:
    """Load catalog, tags and all versions; sort by rating then name."""
    return replace(order_by_rating(spec), with_details=True)


def with_specific_version(version: str) -> Rule:
    """Like with_details, but only load versions equal to `version`."""
    return lambda spec: replace(with_details(spec), version=version)


def limit(n: Optional[int]) -> Rule:
    """Cap the number of rows; no-op for None."""
    if n is None:
        return noop
    return lambda spec: replace(spec, limit=n)


def _criterion(model, f: Filter):
    column = getattr(model, f.field)
    if f.op == "eq":
        return column == f.value
    if f.op == "ieq":
        return func.lower(column) == f.value
    if f.op == "icontains":
        return func.lower(column).like(f"%{f.value}%")
    raise ValueError(f"Unknown filter op: {f.op}")


def _resource_query(session: Session, spec: FetchSpec) -> Query:
    query = session.query(Resource)
    for f in spec.filters:
        query = query.filter(_criterion(Resource, f))

    if spec.with_details:
        versions = Resource.versions
        if spec.version is not None:
            versions = versions.and_(ResourceVersion.version == spec.version)
        else:
            # A resource without versions is treated as absent
            query = query.filter(Resource.versions.any())
        query = query.options(
            selectinload(Resource.catalog),
            selectinload(Resource.tags),
            selectinload(versions),
        ).populate_existing()

    if spec.order_by_rating:
        query = query.order_by(Resource.rating.desc(), Resource.name.asc())
    if spec.limit is not None:
        query = query.limit(spec.limit)
    return query


def _to_row(resource: Resource) -> ResourceRow:
    return ResourceRow(
        resource=resource,
        catalog=resource.catalog,
        tags=list(resource.tags),
        versions=sort_versions(resource.versions),
    )


def fetch_resources(session: Session, spec: FetchSpec) -> List[ResourceRow]:
    """
    Fetch all resources matching a spec.

    Args:
        session: SQLAlchemy session
        spec: FetchSpec describing filters, ordering and eager loading

    Returns:
        List of ResourceRow (possibly empty)

    Raises:
        StoreError: If the query fails or a version string is malformed
    """
    try:
        resources = _resource_query(session, spec).all()
        rows = [_to_row(r) for r in resources]
    except (SQLAlchemyError, MalformedVersionError) as e:
        raise StoreError(str(e)) from e

    logger.debug(f"Fetched {len(rows)} resources")
    return rows


def fetch_resource(session: Session, spec: FetchSpec) -> ResourceRow:
    """
    Fetch the first resource matching a spec.

    Raises:
        RecordNotFoundError: If no resource matches
        StoreError: If the query fails or a version string is malformed
    """
    try:
        resource = _resource_query(session, replace(spec, limit=1)).one()
        return _to_row(resource)
    except NoResultFound as e:
        raise RecordNotFoundError("record not found") from e
    except (SQLAlchemyError, MalformedVersionError) as e:
        raise StoreError(str(e)) from e


def fetch_versions(session: Session, spec: FetchSpec) -> List[ResourceVersion]:
    """
    Fetch resource versions matching a spec, ascending by version.

    Raises:
        StoreError: If the query fails or a version string is malformed
    """
    try:
        query = session.query(ResourceVersion)
        for f in spec.filters:
            query = query.filter(_criterion(ResourceVersion, f))
        if spec.version is not None:
            query = query.filter(ResourceVersion.version == spec.version)
        versions = sort_versions(query.order_by(ResourceVersion.id).all())
    except (SQLAlchemyError, MalformedVersionError) as e:
        raise StoreError(str(e)) from e

    logger.debug(f"Fetched {len(versions)} versions")
    if spec.limit is not None:
        return versions[: spec.limit]
    return versions
