"""API layer: canonical query/assembly surface for resource data.

Key rules:

1. No SQLAlchemy imports - only call repo functions
2. No filtering/ordering here - rules are composed into a FetchSpec for the repo
3. Return Pydantic models only
4. Store failures never leak: they become NotFoundError or InternalError
"""
