"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from mbapi.ui.cli.args import ArgumentParser, IncludesArgs, LookupArgs, ShapeArgs

MBID = "94ed318a-fd7d-4abc-8491-a35e39f51dca"


@pytest.fixture(autouse=True)
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    """Keep the shared logger untouched while parsing."""

    return mocker.patch("mbapi.ui.cli.args.parser.setup_logger")


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    lookup_args: Namespace = parser.parse_args(["lookup", "artist", MBID])
    assert lookup_args.command == "lookup"
    assert lookup_args.entity_type == "artist"
    assert lookup_args.mbid == MBID
    assert lookup_args.inc == []

    shape_args: Namespace = parser.parse_args(["shape", "release", "--inc", "media", "--depth", "2"])
    assert shape_args.command == "shape"
    assert shape_args.inc == ["media"]
    assert shape_args.depth == 2


def test_unknown_entity_type_is_rejected() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.process_args(["lookup", "spaceship", MBID])


def test_missing_command_is_rejected() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.process_args([])


def test_process_lookup_args(mock_setup_logger: MagicMock) -> None:
    args = ArgumentParser.process_args(
        [
            "lookup",
            "release-group",
            MBID,
            "--inc",
            "aliases",
            "artist-credits",
            "--status",
            "official",
            "--type",
            "album",
            "ep",
            "--project",
            "--verbose",
        ]
    )

    assert args == LookupArgs(
        command="lookup",
        entity_type="release-group",
        mbid=MBID,
        includes=["aliases", "artist-credits"],
        statuses=["official"],
        release_types=["album", "ep"],
        project=True,
        verbose=True,
        quiet=False,
    )
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG


def test_quiet_lowers_console_level(mock_setup_logger: MagicMock) -> None:
    _ = ArgumentParser.process_args(["lookup", "artist", MBID, "--quiet"])

    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


def test_process_includes_args() -> None:
    assert ArgumentParser.process_args(["includes", "work"]) == IncludesArgs(command="includes", entity_type="work")


def test_process_shape_args() -> None:
    args = ArgumentParser.process_args(["shape", "artist"])

    assert args == ShapeArgs(command="shape", entity_type="artist", includes=[], depth=3)


def test_shape_depth_must_be_positive() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.process_args(["shape", "artist", "--depth", "0"])
