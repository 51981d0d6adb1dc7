"""Schema management for SQL-backed providers.

The in-memory provider used in development and tests needs no schema, so
both functions skip it.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

_SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    return [p for p in domain.providers.values() if p.conn_info["provider"] in _SQL_PROVIDERS]


def setup_db(domain: Domain):
    """Create tables for every aggregate and entity (users, products, carts, orders)"""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])

            # Touching the repository's DAO registers the model with SQLAlchemy
            for record in (*domain.registry.aggregates.values(), *domain.registry.entities.values()):
                if record.cls.meta_.provider == provider.name:
                    domain.repository_for(record.cls)._dao  # noqa: B018

            if hasattr(domain, "_outbox_repos") and provider.name in domain._outbox_repos:
                domain._outbox_repos[provider.name]._dao  # noqa: B018

            provider._metadata.create_all(engine)


def drop_db(domain: Domain):
    """Drop the tables created by setup_db"""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
