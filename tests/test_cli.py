"""
Tests for gigsheets.cli

Test Coverage:
- Exit codes for each command
- Argument mapping onto GenerateOptions
"""
import json
import logging

import pytest

from gigsheets import __version__
from gigsheets.cli import build_parser, main


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_version(caplog):
    caplog.set_level("INFO")

    assert main(["version"]) == 0
    assert __version__ in caplog.text


def test_generate_arguments():
    args = build_parser().parse_args(
        ["generate", "-c", "gig.yaml", "-s", "3.5", "-i", "acoustic", "-o", "out", "-a", "-d"]
    )

    assert str(args.config) == "gig.yaml"
    assert args.spacing == 3.5
    assert args.image == "acoustic"
    assert args.output == "out"
    assert args.all_songs is True
    assert args.debug is True
    assert args.watch is False


def test_generate_writes_pdfs(project):
    code = main(["generate", "-c", str(project / "config.yaml"), "-a"])

    assert code == 0
    assert (project / "output" / "friday.pdf").is_file()
    assert (project / "output" / "_all.pdf").is_file()


def test_generate_missing_config_fails(tmp_path):
    assert main(["generate", "-c", str(tmp_path / "config.yaml")]) == 1


def test_generate_negative_spacing_fails(project):
    assert main(["generate", "-c", str(project / "config.yaml"), "-s", "-1"]) == 1


def test_validate_ok(project):
    assert main(["validate-config", "-c", str(project / "config.yaml")]) == 0


def test_validate_missing_image_fails(project):
    (project / "images" / "ballad.png").unlink()

    assert main(["validate-config", "-c", str(project / "config.yaml")]) == 1


def test_validate_missing_image_with_add_missing_succeeds(project):
    (project / "images" / "ballad.png").unlink()

    assert main(["validate-config", "-c", str(project / "config.yaml"), "--add-missing"]) == 0


def test_generate_schema(project):
    target = project / "schema" / "gig-schema.json"

    code = main(["generate-schema", "-c", str(project / "config.yaml"), "-o", str(target)])

    assert code == 0
    schema = json.loads(target.read_text(encoding="utf-8"))
    assert "rocker#acoustic" in schema["properties"]["sets"]["items"]["properties"]["songs"]["items"]["enum"]


def test_generate_schema_missing_config_fails(tmp_path):
    assert main(["generate-schema", "-c", str(tmp_path / "nope.yaml"), "-o", str(tmp_path / "s.json")]) == 1


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def test_generate_debug_option_enables_debug_logging(project, restore_root_level):
    assert main(["generate", "-c", str(project / "config.yaml"), "-d"]) == 0

    assert restore_root_level.level == logging.DEBUG


def test_generate_without_debug_logs_at_info(project, restore_root_level):
    assert main(["generate", "-c", str(project / "config.yaml")]) == 0

    assert restore_root_level.level == logging.INFO
