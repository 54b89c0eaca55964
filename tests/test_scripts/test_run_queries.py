"""Tests for the run_queries script."""

import logging
import sys
from contextlib import nullcontext
from unittest.mock import patch

import mongomock
import pytest
from pymongo.errors import OperationFailure, PyMongoError

ARGV = ["run_queries.py", "--db", "shop", "--collection", "catalog"]


def test_success_runs_battery_on_configured_collection(run_queries):
    client = mongomock.MongoClient()
    with patch.object(sys, "argv", ARGV), patch.object(
        run_queries, "mongo_client", return_value=nullcontext(client)
    ) as opener, patch.object(run_queries, "run_query_battery") as battery:
        assert run_queries.main() == 0

    config = opener.call_args.args[0]
    assert config.namespace == "shop.catalog"
    collection = battery.call_args.args[0]
    assert collection.full_name == "shop.catalog"


@pytest.mark.parametrize(
    "error",
    [
        ConnectionError("Failed to connect to MongoDB"),
        PyMongoError("network error"),
        ValueError("Invalid MONGODB_URI"),
    ],
)
def test_connection_failures_return_one(run_queries, caplog, error):
    with patch.object(sys, "argv", ARGV), patch.object(
        run_queries, "mongo_client", side_effect=error
    ):
        with caplog.at_level(logging.ERROR):
            assert run_queries.main() == 1
    assert "Error during query run" in caplog.text


def test_operation_failure_returns_one(run_queries, caplog):
    client = mongomock.MongoClient()
    with patch.object(sys, "argv", ARGV), patch.object(
        run_queries, "mongo_client", return_value=nullcontext(client)
    ), patch.object(
        run_queries, "run_query_battery", side_effect=OperationFailure("bad pipeline")
    ):
        with caplog.at_level(logging.ERROR):
            assert run_queries.main() == 1
    assert "Error during query run" in caplog.text


def test_unexpected_errors_propagate(run_queries):
    with patch.object(sys, "argv", ARGV), patch.object(
        run_queries, "mongo_client", side_effect=KeyError("bug")
    ):
        with pytest.raises(KeyError):
            run_queries.main()
