import pytest

from pgenum.errors import IrreversibleOperationError
from pgenum.schema import EnumSchemaBuilder, MigrationStep

builder = EnumSchemaBuilder()


def test_reversible_step():
    step = builder.rename_value("status", "a", "b")
    assert step.reversible
    assert step.rollback_sql() == step.reverse
    assert step.describe() == "rename_value: ALTER TYPE public.status RENAME VALUE 'a' TO 'b';"


def test_irreversible_step_raises_on_rollback():
    step = builder.drop_type("status")
    assert not step.reversible
    with pytest.raises(IrreversibleOperationError) as excinfo:
        step.rollback_sql()
    assert excinfo.value.operation == "drop_type"


def test_describe_flags():
    step = builder.add_value_to_type("status", "x")
    assert step.describe().endswith("[irreversible, non-transactional]")
    assert builder.drop_type("status").describe().endswith("[irreversible, destructive]")


def test_empty_reverse_is_distinct_from_none():
    step = MigrationStep(operation="execute", forward="SELECT 1;", reverse="")
    assert step.reversible
    assert step.rollback_sql() == ""
