import pytest

from pgenum import ConnectionExecutor, EnumMigration, RecordingExecutor
from pgenum.errors import IrreversibleOperationError


class FakeCursor:
    def __init__(self, log):
        self.log = log
        self.closed = False

    def execute(self, sql):
        self.log.append(sql)

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self):
        self.executed = []
        self.cursors = []

    def cursor(self):
        cursor = FakeCursor(self.executed)
        self.cursors.append(cursor)
        return cursor


def test_recording_executor_rollback_in_reverse_order():
    executor = RecordingExecutor()
    migration = EnumMigration(executor)
    migration.create_type("status", ["a"])
    migration.rename_type("status", "state")

    assert executor.statements() == [
        "CREATE TYPE public.status AS ENUM ('a');",
        "ALTER TYPE public.status RENAME TO state;",
    ]
    assert executor.rollback_statements() == [
        "ALTER TYPE public.state RENAME TO status;",
        "DROP TYPE public.status;",
    ]


def test_recording_executor_rollback_stops_at_irreversible_step():
    executor = RecordingExecutor()
    migration = EnumMigration(executor)
    migration.create_type("status", ["a"])
    migration.add_value_to_type("status", "b")

    with pytest.raises(IrreversibleOperationError):
        executor.rollback_statements()


def test_recording_executor_clear():
    executor = RecordingExecutor()
    executor.execute("SELECT 1;")
    executor.clear()
    assert executor.statements() == []


def test_connection_executor_runs_forward_sql():
    connection = FakeConnection()
    executor = ConnectionExecutor(connection)
    EnumMigration(executor).rename_value("status", "a", "b")

    assert connection.executed == ["ALTER TYPE public.status RENAME VALUE 'a' TO 'b';"]
    assert executor.reverse_statements == ["ALTER TYPE public.status RENAME VALUE 'b' TO 'a';"]
    assert all(cursor.closed for cursor in connection.cursors)
