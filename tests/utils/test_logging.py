import logging

from pgenum.schema import EnumSchemaBuilder
from pgenum.utils.logging import configure_logging, get_correlation_id, get_logger, set_correlation_id


def test_correlation_id_round_trip():
    token = set_correlation_id("test-token")
    assert token == "test-token"
    assert get_correlation_id() == "test-token"


def test_get_logger_namespaced():
    logger = get_logger("tests.logging")
    assert logger.name == "pgenum.tests.logging"


def test_configure_logging_installs_single_handler():
    configure_logging()
    configure_logging()
    assert len(logging.getLogger("pgenum").handlers) == 1


def test_add_value_logs_transaction_note(caplog):
    caplog.set_level(logging.INFO, logger="pgenum.schema.builder")
    EnumSchemaBuilder().add_value_to_type("status", "finished")
    assert any("transaction disabled" in record.message for record in caplog.records)


def test_generated_sql_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="pgenum.schema.builder")
    EnumSchemaBuilder().create_type("status", ["a"])
    assert any("CREATE TYPE public.status" in record.message for record in caplog.records)
