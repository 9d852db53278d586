from pgenum.dialects import PostgresDialect
from pgenum.schema import EnumOptions, assemble
from pgenum.schema.clauses import exists_guard, not_exists_guard, placement_clause

dialect = PostgresDialect()


def test_assemble_skips_empty_fragments():
    assert assemble(["DROP TYPE", None, "", "public.status"]) == "DROP TYPE public.status;"


def test_assemble_preserves_order():
    assert assemble(["c", "a", "b"]) == "c a b;"


def test_exists_guard():
    assert exists_guard(EnumOptions(if_exists=True)) == "IF EXISTS"
    assert exists_guard(EnumOptions()) is None


def test_not_exists_guard():
    assert not_exists_guard(EnumOptions(if_not_exists=True)) == "IF NOT EXISTS"
    assert not_exists_guard(EnumOptions()) is None


def test_placement_clause_precedence():
    assert placement_clause(EnumOptions(before="a", after="b"), dialect) == "BEFORE 'a'"
    assert placement_clause(EnumOptions(after="b"), dialect) == "AFTER 'b'"
    assert placement_clause(EnumOptions(), dialect) is None
