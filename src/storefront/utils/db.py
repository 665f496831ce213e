"""Schema management for the SQL-backed Protean providers.

Memory providers need no schema; only ``sqlite`` and ``postgresql``
providers get tables.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for name, provider in domain.providers.items():
        if provider.conn_info["provider"] in SQL_PROVIDERS:
            yield name, provider


def _register_tables(domain: Domain, provider_name: str) -> None:
    """Build the DAO of every aggregate and entity stored on the provider.

    Building a DAO declares its table on the provider's metadata. Entities
    (cart and order lines) are listed separately from their aggregates.
    """
    records = list(domain.registry.aggregates.values()) + list(domain.registry.entities.values())
    for record in records:
        if record.cls.meta_.provider == provider_name:
            domain.repository_for(record.cls)._dao  # noqa: B018

    # Outbox tables are registered as internal and have no repository_for entry
    outbox_repos = getattr(domain, "_outbox_repos", {})
    if provider_name in outbox_repos:
        outbox_repos[provider_name]._dao  # noqa: B018


def setup_db(domain: Domain) -> None:
    """Create tables for every aggregate and entity on SQL providers."""
    with domain.domain_context():
        for name, provider in _sql_providers(domain):
            _register_tables(domain, name)
            provider._metadata.create_all(create_engine(provider.conn_info["database_uri"]))


def drop_db(domain: Domain) -> None:
    """Drop every table on SQL providers."""
    with domain.domain_context():
        for _, provider in _sql_providers(domain):
            provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
