"""Site access table."""

from enum import StrEnum

SITE_ACCESS_DDL = """
CREATE TABLE IF NOT EXISTS site_access (
    login VARCHAR NOT NULL,
    site_id INTEGER NOT NULL,
    access VARCHAR NOT NULL,
    PRIMARY KEY (login, site_id)
)
"""


class AccessLevel(StrEnum):
    """Stored access levels; each one grants view access."""

    VIEW = "view"
    WRITE = "write"
    ADMIN = "admin"
