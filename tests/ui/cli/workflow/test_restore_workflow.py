"""Tests for the interactive restore workflow."""

from __future__ import annotations

from io import StringIO
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from dbrestore.features.restoration import (
    ConfigurationError,
    RestoreError,
    RestoreParameters,
)
from dbrestore.ui.cli.workflow.restore import RestoreWorkflow, join_storage_path
from restore_fakes import FakeDatabaseRegistry, FakeFilesystemRegistry, RecordingOperation

PROMPT_TARGET = "dbrestore.ui.cli.workflow.restore.Prompt.ask"
CONFIRM_TARGET = "dbrestore.ui.cli.workflow.restore.Confirm.ask"


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def workflow(
    filesystems: FakeFilesystemRegistry,
    databases: FakeDatabaseRegistry,
    operation: RecordingOperation,
    output: StringIO,
) -> RestoreWorkflow:
    console = Console(file=output, width=200)
    return RestoreWorkflow(
        filesystems=filesystems,
        databases=databases,
        operation=operation,
        console=console,
    )


def _questions(prompt: MagicMock) -> list[str]:
    return [call.args[0] for call in prompt.call_args_list]


def test_fully_specified_parameters_go_straight_to_confirmation(
    workflow: RestoreWorkflow,
    operation: RecordingOperation,
    output: StringIO,
    mocker: MockerFixture,
) -> None:
    prompt = mocker.patch(PROMPT_TARGET)
    confirm = mocker.patch(CONFIRM_TARGET, return_value=True)

    initial = RestoreParameters(
        source="s3",
        source_path="/backups/dump.sql.gz",
        database="default",
        compression="gzip",
    )
    result = workflow.run(initial)

    prompt.assert_not_called()
    confirm.assert_called_once()
    assert operation.calls == [("s3", "/backups/dump.sql.gz", "default", "gzip")]
    assert result == initial
    rendered = output.getvalue()
    assert (
        'Backup "dump.sql.gz" from service "s3" has been successfully restored to "default".'
        in rendered
    )
    assert "haven't been filled yet" not in rendered


def test_missing_fields_are_prompted_in_priority_order(
    workflow: RestoreWorkflow,
    operation: RecordingOperation,
    mocker: MockerFixture,
) -> None:
    prompt = mocker.patch(
        PROMPT_TARGET,
        side_effect=["s3", "/backups", "dump.sql", "reporting", "gzip"],
    )
    _ = mocker.patch(CONFIRM_TARGET, return_value=True)

    result = workflow.run(RestoreParameters())

    assert _questions(prompt) == [
        "From which storage service do you want to choose?",
        "From which path do you want to select?",
        "Which database dump do you want to restore?",
        "Into which database connection do you want to restore?",
        "Which compression type was used for the backup?",
    ]
    assert result.source_path == "/backups/dump.sql"
    assert operation.calls == [("s3", "/backups/dump.sql", "reporting", "gzip")]


def test_prompt_defaults_propose_first_candidates(
    workflow: RestoreWorkflow,
    mocker: MockerFixture,
) -> None:
    prompt = mocker.patch(
        PROMPT_TARGET,
        side_effect=["s3", "/backups", "dump.sql", "default", "none"],
    )
    _ = mocker.patch(CONFIRM_TARGET, return_value=True)

    _ = workflow.run(RestoreParameters())

    source_call, path_call, file_call, database_call, compression_call = prompt.call_args_list
    assert source_call.kwargs["choices"] == ["s3", "local"]
    assert source_call.kwargs["default"] == "s3"
    assert path_call.kwargs["default"] == "/"
    assert file_call.kwargs["choices"] == ["dump.sql", "dump.sql.gz"]
    assert database_call.kwargs["default"] == "default"
    assert compression_call.kwargs["choices"] == ["none", "gzip"]
    assert compression_call.kwargs["default"] == "none"


def test_only_missing_fields_are_prompted(
    workflow: RestoreWorkflow,
    operation: RecordingOperation,
    output: StringIO,
    mocker: MockerFixture,
) -> None:
    prompt = mocker.patch(PROMPT_TARGET, side_effect=["reporting", "none"])
    _ = mocker.patch(CONFIRM_TARGET, return_value=True)

    _ = workflow.run(RestoreParameters(source="s3", source_path="/backups/dump.sql"))

    assert _questions(prompt) == [
        "Into which database connection do you want to restore?",
        "Which compression type was used for the backup?",
    ]
    assert "--database, --compression" in output.getvalue()
    assert operation.calls == [("s3", "/backups/dump.sql", "reporting", "none")]


def test_every_field_is_filled_before_confirmation(
    workflow: RestoreWorkflow,
    mocker: MockerFixture,
) -> None:
    _ = mocker.patch(PROMPT_TARGET, side_effect=["local", "/", "nightly.sql", "default", "none"])
    confirm = mocker.patch(CONFIRM_TARGET, return_value=True)
    show_answers = mocker.spy(workflow._result, "show_answers")  # pyright: ignore[reportPrivateUsage]

    _ = workflow.run(RestoreParameters())

    confirm.assert_called_once()
    shown = show_answers.call_args.args[0]
    assert shown.source == "local"
    assert shown.source_path == "/nightly.sql"
    assert shown.database == "default"
    assert shown.compression == "none"


def test_rejected_confirmation_resets_and_asks_everything_again(
    workflow: RestoreWorkflow,
    operation: RecordingOperation,
    output: StringIO,
    mocker: MockerFixture,
) -> None:
    prompt = mocker.patch(
        PROMPT_TARGET,
        side_effect=["local", "/", "nightly.sql", "reporting", "none"],
    )
    confirm = mocker.patch(CONFIRM_TARGET, side_effect=[False, True])

    initial = RestoreParameters(
        source="s3",
        source_path="/backups/dump.sql.gz",
        database="default",
        compression="gzip",
    )
    result = workflow.run(initial)

    assert confirm.call_count == 2
    assert prompt.call_count == 5
    assert "Answers have been reset and re-asking questions." in output.getvalue()
    assert operation.calls == [("local", "/nightly.sql", "reporting", "none")]
    assert result.source == "local"
    assert initial.source == "s3"


def test_empty_listing_asks_for_the_path_again(
    workflow: RestoreWorkflow,
    operation: RecordingOperation,
    output: StringIO,
    mocker: MockerFixture,
) -> None:
    prompt = mocker.patch(PROMPT_TARGET, side_effect=["/empty", "/backups", "dump.sql"])
    confirm = mocker.patch(CONFIRM_TARGET, return_value=True)

    _ = workflow.run(RestoreParameters(source="s3", database="default", compression="none"))

    rendered = output.getvalue()
    assert "No backups were found at this path." in rendered
    assert "Some answers are still missing:" in rendered
    assert _questions(prompt) == [
        "From which path do you want to select?",
        "From which path do you want to select?",
        "Which database dump do you want to restore?",
    ]
    confirm.assert_called_once()
    assert operation.calls == [("s3", "/backups/dump.sql", "default", "none")]


def test_directories_are_excluded_from_the_dump_table(
    workflow: RestoreWorkflow,
    output: StringIO,
    mocker: MockerFixture,
) -> None:
    _ = mocker.patch(PROMPT_TARGET, side_effect=["/backups", "dump.sql"])
    _ = mocker.patch(CONFIRM_TARGET, return_value=True)

    _ = workflow.run(RestoreParameters(source="s3", database="default", compression="none"))

    rendered = output.getvalue()
    assert "Available database dumps:" in rendered
    assert "dump.sql.gz" in rendered
    assert "2 KB" in rendered
    assert "1.5 KB" in rendered
    table_section = rendered.split("Available database dumps:")[1].split("You've filled in")[0]
    assert "old" not in table_section


def test_invalid_flag_values_are_discarded_and_prompted(
    workflow: RestoreWorkflow,
    operation: RecordingOperation,
    output: StringIO,
    mocker: MockerFixture,
) -> None:
    prompt = mocker.patch(PROMPT_TARGET, side_effect=["s3", "default"])
    _ = mocker.patch(CONFIRM_TARGET, return_value=True)

    _ = workflow.run(
        RestoreParameters(
            source="ftp",
            source_path="/backups/dump.sql",
            database="missing",
            compression="NULL",
        )
    )

    rendered = output.getvalue()
    assert "Source 'ftp' is not a configured storage service" in rendered
    assert "Database 'missing' is not a configured database connection" in rendered
    assert _questions(prompt) == [
        "From which storage service do you want to choose?",
        "Into which database connection do you want to restore?",
    ]
    assert operation.calls == [("s3", "/backups/dump.sql", "default", "none")]


def test_unknown_backup_file_is_asked_again(
    workflow: RestoreWorkflow,
    operation: RecordingOperation,
    output: StringIO,
    mocker: MockerFixture,
) -> None:
    _ = mocker.patch(PROMPT_TARGET, side_effect=["/backups", "dump.sql.gz"])
    _ = mocker.patch(CONFIRM_TARGET, return_value=True)

    _ = workflow.run(
        RestoreParameters(
            source="s3",
            source_path="/backups/missing.sql",
            database="default",
            compression="gzip",
        )
    )

    assert "is not a backup file on storage service 's3'" in output.getvalue()
    assert operation.calls == [("s3", "/backups/dump.sql.gz", "default", "gzip")]


def test_no_storage_services_is_a_configuration_error(
    databases: FakeDatabaseRegistry,
    operation: RecordingOperation,
    mocker: MockerFixture,
) -> None:
    prompt = mocker.patch(PROMPT_TARGET)
    confirm = mocker.patch(CONFIRM_TARGET)
    workflow = RestoreWorkflow(
        filesystems=FakeFilesystemRegistry({}),
        databases=databases,
        operation=operation,
        console=Console(file=StringIO()),
    )

    with pytest.raises(ConfigurationError, match="No storage services"):
        _ = workflow.run(RestoreParameters())

    prompt.assert_not_called()
    confirm.assert_not_called()
    assert operation.calls == []


def test_no_database_connections_is_a_configuration_error(
    filesystems: FakeFilesystemRegistry,
    operation: RecordingOperation,
    mocker: MockerFixture,
) -> None:
    _ = mocker.patch(PROMPT_TARGET)
    workflow = RestoreWorkflow(
        filesystems=filesystems,
        databases=FakeDatabaseRegistry([]),
        operation=operation,
        console=Console(file=StringIO()),
    )

    with pytest.raises(ConfigurationError, match="No database connections"):
        _ = workflow.run(
            RestoreParameters(source="s3", source_path="/backups/dump.sql", compression="none")
        )

    assert operation.calls == []


def test_backend_failure_propagates_without_success_message(
    filesystems: FakeFilesystemRegistry,
    databases: FakeDatabaseRegistry,
    output: StringIO,
    mocker: MockerFixture,
) -> None:
    _ = mocker.patch(CONFIRM_TARGET, return_value=True)
    failing = RecordingOperation(error=RestoreError("mysql restore into 'app' failed: denied"))
    workflow = RestoreWorkflow(
        filesystems=filesystems,
        databases=databases,
        operation=failing,
        console=Console(file=output, width=200),
    )

    with pytest.raises(RestoreError, match="denied"):
        _ = workflow.run(
            RestoreParameters(
                source="s3",
                source_path="/backups/dump.sql",
                database="default",
                compression="none",
            )
        )

    assert len(failing.calls) == 1
    assert "successfully restored" not in output.getvalue()


@pytest.mark.parametrize(
    "directory, basename, expected",
    [
        ("/", "dump.sql", "/dump.sql"),
        ("/backups", "dump.sql", "/backups/dump.sql"),
        ("/backups/", "dump.sql", "/backups/dump.sql"),
    ],
)
def test_join_storage_path(directory: str, basename: str, expected: str) -> None:
    assert join_storage_path(directory, basename) == expected


def test_unsupported_compression_is_discarded_and_only_compression_is_asked(
    filesystems: FakeFilesystemRegistry,
    databases: FakeDatabaseRegistry,
    operation: RecordingOperation,
    output: StringIO,
    mocker: MockerFixture,
) -> None:
    prompt = mocker.patch(PROMPT_TARGET, side_effect=["gzip"])
    _ = mocker.patch(CONFIRM_TARGET, return_value=True)
    logger = mocker.Mock()
    workflow = RestoreWorkflow(
        filesystems=filesystems,
        databases=databases,
        operation=operation,
        console=Console(file=output, width=200),
        logger=logger,
    )

    result = workflow.run(
        RestoreParameters(
            source="s3",
            source_path="/backups/dump.sql.gz",
            database="default",
            compression="bzip2",
        )
    )

    rendered = output.getvalue()
    assert "Compression 'bzip2' is not a supported compression type; it will be asked again." in rendered
    assert rendered.count("bzip2") == 1
    assert _questions(prompt) == ["Which compression type was used for the backup?"]
    assert result.compression == "gzip"
    assert operation.calls == [("s3", "/backups/dump.sql.gz", "default", "gzip")]
    logger.warning.assert_not_called()
    assert any("bzip2" in call.args for call in logger.debug.call_args_list)
