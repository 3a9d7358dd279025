"""Tests for interactive input validation."""
from pathlib import Path

import pytest
from unittest.mock import patch

from vhost.config import Settings
from vhost.errors import CollisionError, ValidationError
from vhost import prompts
from vhost.project import Project


@pytest.fixture
def settings(tmp_path):
    sites = tmp_path / "sites-available"
    sites.mkdir()
    hosts = tmp_path / "hosts"
    hosts.write_text("127.0.0.1   localhost\n# 127.0.0.1   commented.test\n127.0.0.1   shop.test  shop\n")
    return Settings(sites_available_dir=sites, hosts_file=hosts)


class TestValidateProjectName:
    """Tests for project name rules."""

    def test_accepts_valid_name(self, settings):
        assert prompts.validate_project_name("blog", settings) == "blog"

    def test_rejects_empty_name(self, settings):
        with pytest.raises(ValidationError, match="empty"):
            prompts.validate_project_name("", settings)

    @pytest.mark.parametrize("name", ["my blog", " blog", "blog\t", "my\nblog"])
    def test_rejects_whitespace(self, settings, name):
        with pytest.raises(ValidationError, match="spaces"):
            prompts.validate_project_name(name, settings)

    def test_rejects_existing_vhost(self, settings):
        (settings.sites_available_dir / "blog.conf").write_text("<VirtualHost *:80>\n")

        with pytest.raises(CollisionError, match="already exists"):
            prompts.validate_project_name("blog", settings)

    def test_rejects_registered_hostname(self, settings):
        with pytest.raises(CollisionError, match="shop.test"):
            prompts.validate_project_name("shop", settings)

    def test_ignores_commented_hostname(self, settings):
        assert prompts.validate_project_name("commented", settings) == "commented"

    def test_hostname_must_match_exactly(self, settings):
        # "hop.test" is only a substring of the registered "shop.test".
        assert prompts.validate_project_name("hop", settings) == "hop"

    def test_whitespace_checked_before_collisions(self, settings):
        (settings.sites_available_dir / "my blog.conf").write_text("")

        with pytest.raises(ValidationError) as excinfo:
            prompts.validate_project_name("my blog", settings)

        assert not isinstance(excinfo.value, CollisionError)


def test_hostname_registered_missing_hosts_file(tmp_path):
    assert prompts.hostname_registered("blog.test", tmp_path / "nope") is False


class TestPromptProjectName:
    """Tests for reading the project name."""

    @patch('vhost.prompts.typer.prompt')
    def test_validates_raw_answer(self, mock_prompt, settings):
        mock_prompt.return_value = "my blog"

        with pytest.raises(ValidationError):
            prompts.prompt_project_name(settings)

    @patch('vhost.prompts.typer.prompt')
    def test_returns_valid_name(self, mock_prompt, settings):
        mock_prompt.return_value = "blog"

        assert prompts.prompt_project_name(settings) == "blog"


class TestPromptExistingPath:
    """Tests for the bounded path retry loop."""

    @patch('vhost.prompts.ask')
    def test_returns_existing_directory(self, mock_ask, tmp_path, settings):
        mock_ask.return_value = str(tmp_path)

        assert prompts.prompt_existing_path(settings) == tmp_path
        mock_ask.assert_called_once()

    @patch('vhost.prompts.log_info')
    @patch('vhost.prompts.ask')
    def test_retries_until_valid(self, mock_ask, mock_log_info, tmp_path, settings):
        mock_ask.side_effect = [str(tmp_path / "missing"), "", str(tmp_path)]

        assert prompts.prompt_existing_path(settings) == tmp_path
        assert mock_ask.call_count == 3
        mock_log_info.assert_called_with("The specified path does not exist. Please enter a valid path.")

    @patch('vhost.prompts.ask')
    def test_gives_up_after_max_attempts(self, mock_ask, tmp_path, settings):
        mock_ask.return_value = str(tmp_path / "missing")

        with pytest.raises(ValidationError, match="3 attempts"):
            prompts.prompt_existing_path(settings)

        assert mock_ask.call_count == settings.max_path_attempts

    @patch('vhost.prompts.ask')
    def test_file_is_not_a_directory(self, mock_ask, tmp_path):
        some_file = tmp_path / "file.txt"
        some_file.write_text("")
        mock_ask.return_value = str(some_file)

        with pytest.raises(ValidationError):
            prompts.prompt_existing_path(Settings(max_path_attempts=1))

    @patch('vhost.utils.get_real_home')
    @patch('vhost.prompts.ask')
    def test_expands_home(self, mock_ask, mock_home, tmp_path, settings):
        (tmp_path / "Projects").mkdir()
        mock_home.return_value = str(tmp_path)
        mock_ask.return_value = "~/Projects"

        assert prompts.prompt_existing_path(settings) == tmp_path / "Projects"


class TestPromptRepositoryUrl:
    """Tests for reading the repository URL."""

    @patch('vhost.prompts.ask')
    def test_returns_url(self, mock_ask):
        mock_ask.return_value = "git@example.com:team/blog.git"

        assert prompts.prompt_repository_url() == "git@example.com:team/blog.git"

    @patch('vhost.prompts.ask')
    def test_empty_url_is_fatal(self, mock_ask):
        mock_ask.return_value = ""

        with pytest.raises(ValidationError, match="cannot be empty"):
            prompts.prompt_repository_url()


class TestPromptCloneDestination:
    """Tests for choosing where to clone."""

    @patch('vhost.prompts.ask')
    def test_existing_directory(self, mock_ask, tmp_path):
        mock_ask.return_value = str(tmp_path)

        assert prompts.prompt_clone_destination() == tmp_path

    @patch('vhost.prompts.ask')
    def test_creates_missing_directory(self, mock_ask, tmp_path):
        target = tmp_path / "Projects" / "laravel"
        mock_ask.return_value = str(target)

        assert prompts.prompt_clone_destination() == target
        assert target.is_dir()

    @patch('vhost.prompts.ask')
    def test_dry_run_does_not_create(self, mock_ask, tmp_path, capsys):
        target = tmp_path / "Projects"
        mock_ask.return_value = str(target)

        assert prompts.prompt_clone_destination(dry_run=True) == target
        assert not target.exists()
        assert "[DRY RUN] Would create" in capsys.readouterr().out

    @patch('vhost.prompts.ask')
    def test_creation_failure_is_fatal(self, mock_ask, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        mock_ask.return_value = str(blocker / "Projects")

        with pytest.raises(ValidationError, match="Could not create"):
            prompts.prompt_clone_destination()

    @patch('vhost.prompts.ask')
    def test_empty_destination(self, mock_ask):
        mock_ask.return_value = ""

        with pytest.raises(ValidationError):
            prompts.prompt_clone_destination()


@patch('vhost.prompts.typer.prompt')
def test_ask_strips_answer(mock_prompt):
    mock_prompt.return_value = "  /var/www/blog  "

    assert prompts.ask("Path") == "/var/www/blog"
    mock_prompt.assert_called_once_with("Path", default="", show_default=False)


class TestRelativeAnswers:
    """Relative answers are made absolute against the working directory."""

    @patch('vhost.prompts.ask')
    def test_existing_path_is_absolute(self, mock_ask, tmp_path, monkeypatch):
        www = tmp_path / "www"
        (www / "blog").mkdir(parents=True)
        monkeypatch.chdir(www)
        mock_ask.return_value = "blog"

        settings = Settings(default_root=str(www))

        path = prompts.prompt_existing_path(settings)

        assert path.is_absolute()
        assert path == www / "blog"
        assert Project.build("blog", path, settings).inside_default_root is True

    @patch('vhost.prompts.ask')
    def test_clone_destination_is_absolute(self, mock_ask, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        mock_ask.return_value = "Projects"

        destination = prompts.prompt_clone_destination()

        assert destination == tmp_path / "Projects"
        assert destination.is_dir()
