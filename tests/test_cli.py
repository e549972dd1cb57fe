import json
import logging

from click.testing import CliRunner

from userstore.cli import cli, configure_logging
from userstore.utils.config import DEFAULT_CONFIG, get_config_path, get_log_dir


class TestCliCommands:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "--operation" in result.output
        assert "--fileName" in result.output
        assert "config" in result.output

    def test_add_then_find(self, temp_dir, isolated_config):
        path = str(temp_dir / "users.json")
        runner = CliRunner()

        result = runner.invoke(cli, [
            "--operation", "add", "--fileName", path,
            "--item", '{"id": "1", "email": "a@b.com", "age": 23}',
        ])
        assert result.exit_code == 0
        assert result.output == ""

        result = runner.invoke(cli, ["--operation", "findById", "--fileName", path, "--id", "1"])
        assert result.exit_code == 0
        assert result.output == '{"id":"1","email":"a@b.com","age":23}'

    def test_single_dash_flags(self, users_file, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ["-operation", "findById", "-fileName", str(users_file), "-id", "2"])
        assert result.exit_code == 0
        assert json.loads(result.output)["email"] == "c@d.com"

    def test_list_empty_file(self, temp_dir, isolated_config):
        path = temp_dir / "users.json"
        runner = CliRunner()
        result = runner.invoke(cli, ["--operation", "list", "--fileName", str(path)])
        assert result.exit_code == 0
        assert result.output == "[]"
        assert path.exists()

    def test_duplicate_exits_successfully(self, users_file, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, [
            "--operation", "add", "--fileName", str(users_file),
            "--item", '{"id": "2", "email": "x@y.com", "age": 1}',
        ])
        assert result.exit_code == 0
        assert result.output == "Item with id 2 already exists"

    def test_not_found_fails(self, users_file, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ["--operation", "remove", "--fileName", str(users_file), "--id", "99"])
        assert result.exit_code == 1
        assert "Item with id 99 not found" in result.output

    def test_missing_operation(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert "--operation flag has to be specified" in result.output

    def test_unknown_operation(self, users_file, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ["--operation", "update", "--fileName", str(users_file)])
        assert result.exit_code == 1
        assert "Operation update not allowed!" in result.output

    def test_missing_file_name(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ["--operation", "list"])
        assert result.exit_code == 1
        assert "--fileName flag has to be specified" in result.output

    def test_file_name_from_env(self, users_file, isolated_config, monkeypatch):
        monkeypatch.setenv("USERSTORE_FILE", str(users_file))
        runner = CliRunner()
        result = runner.invoke(cli, ["--operation", "list"])
        assert result.exit_code == 0
        assert len(json.loads(result.output)) == 2

    def test_file_name_from_config(self, users_file, isolated_config):
        path = get_config_path()
        path.parent.mkdir(parents=True)
        path.write_text(f'[store]\nfile_name = "{users_file}"\n')

        runner = CliRunner()
        result = runner.invoke(cli, ["--operation", "findById", "--id", "1"])
        assert result.exit_code == 0
        assert json.loads(result.output)["id"] == "1"

    def test_pretty(self, users_file, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ["--pretty", "--operation", "list", "--fileName", str(users_file)])
        assert result.exit_code == 0
        assert result.output.startswith("[\n  {")

    def test_log_dir_created(self, users_file, isolated_config):
        runner = CliRunner()
        runner.invoke(cli, ["--operation", "list", "--fileName", str(users_file)])
        assert get_log_dir().is_dir()


    def test_unusable_log_dir(self, users_file, isolated_config, monkeypatch):
        cache_file = isolated_config["cache"] / "not-a-dir"
        cache_file.write_text("")
        monkeypatch.setenv("XDG_CACHE_HOME", str(cache_file))

        runner = CliRunner()
        result = runner.invoke(cli, ["--operation", "findById", "--fileName", str(users_file), "--id", "1"])
        assert result.exit_code == 0
        assert json.loads(result.output)["id"] == "1"


class TestConfigureLogging:
    def test_keeps_existing_handlers(self, isolated_config, monkeypatch):
        root = logging.getLogger()
        existing = logging.NullHandler()
        monkeypatch.setattr(root, "handlers", [existing])

        configure_logging(DEFAULT_CONFIG)

        assert root.handlers == [existing]
        assert not (get_log_dir() / "userstore.log").exists()

    def test_adds_file_handler(self, isolated_config, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)

        configure_logging(DEFAULT_CONFIG)

        try:
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0], logging.FileHandler)
            assert (get_log_dir() / "userstore.log").exists()
        finally:
            for handler in root.handlers:
                handler.close()


class TestConfigCommand:
    def test_config_without_file(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ["config"])
        assert result.exit_code == 0
        assert "Config file:" in result.output
        assert "using defaults" in result.output

    def test_config_init(self, isolated_config):
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "--init"])
        assert result.exit_code == 0
        assert "Wrote default config" in result.output
        assert get_config_path().exists()

        result = runner.invoke(cli, ["config"])
        assert "[store]" in result.output

    def test_config_init_existing(self, isolated_config):
        runner = CliRunner()
        runner.invoke(cli, ["config", "--init"])
        result = runner.invoke(cli, ["config", "--init"])
        assert result.exit_code == 0
        assert "already exists" in result.output
