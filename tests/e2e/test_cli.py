"""End-to-end tests driving the command line entry point."""
import json
import logging
from unittest.mock import patch

import pytest

from pattern_gallery.cli.main import EXIT_FAILURE, EXIT_OK, main


@pytest.fixture(autouse=True)
def quiet_environment(monkeypatch):
    """Keep log handlers off the captured streams and restore the root logger afterwards."""
    monkeypatch.setenv("PATTERN_GALLERY_LOGGING__DESTINATION", "none")
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestCatalogCommands:
    """Test browsing commands."""

    def test_list_patterns_json(self, capsys):
        exit_code = main(["--format", "json", "patterns", "list"])

        payload = json.loads(capsys.readouterr().out)
        assert exit_code == EXIT_OK
        assert len(payload["patterns"]) == 14
        assert payload["patterns"][0]["name"] == "adapter"

    def test_list_examples_for_pattern(self, capsys):
        exit_code = main(["--format", "json", "examples", "list", "--pattern", "facade"])

        payload = json.loads(capsys.readouterr().out)
        assert exit_code == EXIT_OK
        assert [e["slug"] for e in payload["examples"]] == ["home-cinema", "video-converter"]

    def test_show_example_yaml(self, capsys):
        exit_code = main(["--format", "yaml", "examples", "show", "proxy", "lazy-image"])

        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert "slug: lazy-image" in out

    def test_table_output(self, capsys):
        assert main(["--format", "table", "patterns", "list"]) == EXIT_OK
        assert "observer" in capsys.readouterr().out


class TestRunCommands:
    """Test running examples from the command line."""

    def test_run_prints_example_output(self, capsys):
        exit_code = main(["examples", "run", "builder", "pizza"])

        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert "----- Pizza -----" in out

    def test_run_json(self, capsys):
        exit_code = main(["--format", "json", "examples", "run", "singleton", "counter", "--variant", "basic"])

        result = json.loads(capsys.readouterr().out)["result"]
        assert exit_code == EXIT_OK
        assert result["variant"] == "basic"
        assert result["success"] is True

    def test_compare(self, capsys):
        exit_code = main(["examples", "compare", "strategy", "payment-processor"])

        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert "===== strategy/payment-processor - basic =====" in out
        assert "===== strategy/payment-processor - refactored =====" in out

    def test_run_all(self, capsys):
        exit_code = main(["examples", "run-all", "--pattern", "adapter"])

        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert out.strip().endswith("4/4 example runs succeeded")

    def test_color_setting_reaches_the_console(self, monkeypatch):
        monkeypatch.setenv("PATTERN_GALLERY_OUTPUT__COLOR", "off")

        with patch("pattern_gallery.cli.main.RichConsole") as console_class:
            exit_code = main(["patterns", "list"])

        assert exit_code == EXIT_OK
        console_class.assert_called_once_with(color=False)
        assert "adapter" in console_class.return_value.print.call_args.args[0]

    def test_output_file(self, tmp_path, capsys):
        target = tmp_path / "patterns.json"

        exit_code = main(["--format", "json", "--output", str(target), "patterns", "list"])

        assert exit_code == EXIT_OK
        assert json.loads(target.read_text(encoding="utf-8"))["patterns"]
        assert capsys.readouterr().out.strip() == f"Output written to {target}"


class TestCliErrors:
    """Test exit codes and error reporting."""

    def test_unknown_example(self, capsys):
        exit_code = main(["--format", "json", "examples", "run", "builder", "calzone"])

        error = json.loads(capsys.readouterr().err)
        assert exit_code == EXIT_FAILURE
        assert error["category"] == "not_found"

    def test_json_error_parses_with_default_logging(self, monkeypatch, capsys):
        monkeypatch.delenv("PATTERN_GALLERY_LOGGING__DESTINATION")

        exit_code = main(["--format", "json", "examples", "show", "builder", "calzone"])

        error = json.loads(capsys.readouterr().err)
        assert exit_code == EXIT_FAILURE
        assert error["category"] == "not_found"

    def test_unknown_example_text(self, capsys):
        assert main(["examples", "show", "builder", "calzone"]) == EXIT_FAILURE
        assert capsys.readouterr().err.startswith("Error: ")

    def test_missing_resource(self, capsys):
        assert main([]) == EXIT_FAILURE
        assert "No resource specified" in capsys.readouterr().err

    def test_missing_action(self, capsys):
        assert main(["examples"]) == EXIT_FAILURE
        assert "No action specified for examples" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path, capsys):
        exit_code = main(["--config", str(tmp_path / "absent.yml"), "patterns", "list"])

        assert exit_code == EXIT_FAILURE
        assert "Configuration file not found" in capsys.readouterr().err

    def test_invalid_pattern_choice(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["examples", "list", "--pattern", "visitor"])

        assert exc_info.value.code == 2
