"""Numeric archive table - pre-aggregated metrics per site and period."""

ARCHIVE_NUMERIC_DDL = """
CREATE TABLE IF NOT EXISTS archive_numeric (
    site_id INTEGER NOT NULL,
    period VARCHAR NOT NULL,
    date1 DATE NOT NULL,
    date2 DATE NOT NULL,
    segment_hash VARCHAR NOT NULL DEFAULT '',
    name VARCHAR NOT NULL,
    value DOUBLE NOT NULL,
    PRIMARY KEY (site_id, period, date1, date2, segment_hash, name)
)
"""
