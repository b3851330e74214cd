"""Tests for the command-line entry point."""
from unittest.mock import MagicMock, patch

import pytest

from bookmark_launcher.app.config import Settings
from bookmark_launcher.cli.main import build_parser, main


@pytest.fixture()
def cli_settings(tmp_settings):
    """Route every get_settings the CLI touches to the temp settings."""
    with patch("bookmark_launcher.cli.main.get_settings", return_value=tmp_settings), \
            patch("bookmark_launcher.app.paths.get_settings", return_value=tmp_settings), \
            patch("bookmark_launcher.cli.main.setup_logging"):
        yield tmp_settings


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_browse_defaults(self):
        args = build_parser().parse_args(["browse"])
        assert args.browser is None
        assert args.root is None
        assert args.refresh_favicons is False

    def test_rejects_unsupported_browser(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["browse", "--browser", "Firefox"])

    def test_help_names_configured_browser_default(self, capsys, tmp_path):
        settings = Settings(browser_kind="Vivaldi", browser_profile="Work", data_dir=tmp_path)
        with patch("bookmark_launcher.cli.main.get_settings", return_value=settings):
            with pytest.raises(SystemExit):
                build_parser().parse_args(["browse", "--help"])

        out = " ".join(capsys.readouterr().out.split())
        assert "default: Vivaldi, from BOOKMARKS_BROWSER_KIND" in out
        assert "default: Work, from BOOKMARKS_BROWSER_PROFILE" in out


class TestMain:
    """Test command dispatch and startup errors."""

    @patch("bookmark_launcher.cli.main.get_browser_files")
    def test_paths(self, mock_files, cli_settings, capsys, tmp_path):
        mock_files.return_value = MagicMock(
            bookmarks_json=tmp_path / "Bookmarks", favicons_db=tmp_path / "Favicons",
        )

        main(["paths", "--browser", "Vivaldi"])

        out = capsys.readouterr().out
        assert str(tmp_path / "Bookmarks") in out
        assert str(tmp_path / "Favicons") in out
        mock_files.assert_called_once_with("Vivaldi", "Default")

    @patch("bookmark_launcher.app.browsers.Path.home")
    def test_missing_install_exits_with_message(self, mock_home, cli_settings, capsys, tmp_path):
        mock_home.return_value = tmp_path / "nobody"

        with pytest.raises(SystemExit) as exc_info:
            main(["paths", "--browser", "Chrome"])

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Chrome" in err
        assert "Is Chrome installed?" in err

    @patch("bookmark_launcher.cli.main.get_browser_files")
    def test_favicons_refresh(self, mock_files, cli_settings, capsys, make_favicon_db):
        db_path = make_favicon_db({"http://x": b"img"})
        mock_files.return_value = MagicMock(favicons_db=db_path)

        main(["favicons", "refresh"])

        captured = capsys.readouterr()
        assert "1 favicons" in captured.out
        assert "Loading Favicons..." in captured.err

    @patch("bookmark_launcher.cli.main.get_browser_files")
    def test_favicons_clear(self, mock_files, cli_settings, capsys, tmp_path):
        mock_files.return_value = MagicMock(favicons_db=tmp_path / "Favicons")

        main(["favicons", "clear"])

        assert "already empty" in capsys.readouterr().out

    @patch("bookmark_launcher.session.loop.run_session")
    @patch("bookmark_launcher.cli.main.get_browser_files")
    def test_browse_reads_configured_root(
        self, mock_files, mock_run, cli_settings, write_bookmarks, tmp_path, capsys,
    ):
        path = write_bookmarks(other=[{"name": "O", "url": "http://o"}])
        mock_files.return_value = MagicMock(bookmarks_json=path, favicons_db=tmp_path / "Favicons")
        mock_run.return_value = None

        main(["browse", "--root", "other"])

        navigator = mock_run.call_args.args[0]
        assert [c.name for c in navigator.current] == ["O"]
        assert mock_run.call_args.kwargs == {"refresh_first": False}
