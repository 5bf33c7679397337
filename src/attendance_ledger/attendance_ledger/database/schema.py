"""Idempotent table definitions for the MySQL store."""

from __future__ import annotations

import logging

from .mysql_base import db_cursor

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS employees (
        employee_id VARCHAR(64) PRIMARY KEY,
        name VARCHAR(200) NOT NULL,
        gender VARCHAR(16) NOT NULL,
        position VARCHAR(200) NOT NULL,
        seq INT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS attendance_events (
        event_id VARCHAR(64) PRIMARY KEY,
        employee_id VARCHAR(64) NOT NULL,
        employee_name VARCHAR(200) NOT NULL,
        kind VARCHAR(16) NOT NULL,
        event_time DATETIME(6) NOT NULL,
        photo LONGBLOB NOT NULL,
        lat DOUBLE NOT NULL,
        lng DOUBLE NOT NULL,
        distance_m DOUBLE NOT NULL,
        status VARCHAR(16) NOT NULL,
        seq INT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS leave_records (
        leave_id VARCHAR(64) PRIMARY KEY,
        employee_id VARCHAR(64) NOT NULL,
        employee_name VARCHAR(200) NOT NULL,
        leave_date DATE NOT NULL,
        reason VARCHAR(500) NOT NULL,
        seq INT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS shift_policy (
        policy_id TINYINT PRIMARY KEY,
        work_start_time TIME NOT NULL,
        work_end_time TIME NOT NULL,
        office_lat DOUBLE NOT NULL,
        office_lng DOUBLE NOT NULL,
        geofence_radius_m DOUBLE NOT NULL
    )
    """,
)


def ensure_schema(conn_factory) -> None:
    with db_cursor(conn_factory) as (_, cur):
        for stmt in SCHEMA_STATEMENTS:
            cur.execute(stmt)
    logger.info("schema ready (%d tables)", len(SCHEMA_STATEMENTS))
