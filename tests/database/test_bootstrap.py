from __future__ import annotations

import mysql.connector

from src.staff_attendance.staff_attendance.database import bootstrap
from src.staff_attendance.staff_attendance.database.bootstrap import _iter_sql_statements, wait_for_database

DB_CONFIG = {"host": "db", "port": 3306, "user": "root", "password": "pw", "database": "staff_attendance"}


class _Conn:
    def close(self):
        pass


def test_wait_for_database_retries_until_connected(monkeypatch):
    attempts = []

    def connect(**kwargs):
        attempts.append(kwargs)
        if len(attempts) < 3:
            raise mysql.connector.Error(msg="Can't connect", errno=2003)
        return _Conn()

    sleeps = []
    monkeypatch.setattr(bootstrap.mysql.connector, "connect", connect)

    assert wait_for_database(DB_CONFIG, retries=5, delay=2.0, sleep=sleeps.append) is True
    assert len(attempts) == 3
    assert sleeps == [2.0, 2.0]
    assert "database" not in attempts[0]


def test_wait_for_database_gives_up(monkeypatch):
    def connect(**kwargs):
        raise mysql.connector.Error(msg="Can't connect", errno=2003)

    monkeypatch.setattr(bootstrap.mysql.connector, "connect", connect)

    assert wait_for_database(DB_CONFIG, retries=3, delay=0, sleep=lambda _: None) is False


def test_sql_splitter_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); CREATE TABLE x (id INT);\n"

    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "CREATE TABLE x (id INT)"]
