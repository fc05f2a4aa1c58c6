"""Unit tests for the command-line interface - mocked fetcher, no internet."""

import json
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from qiitafetch import __version__
from qiitafetch.cli import app
from qiitafetch.exceptions import HttpStatusError, TransportError
from qiitafetch.models.result import Failure, Success


runner = CliRunner()

BODY = (
    '{"description":"hi","followees_count":1,"followers_count":2,'
    '"items_count":3,"permanent_id":42,"team_only":false,"name":"Yuri"}'
)


class TestVersion:
    """Test --version flag."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestProfileCommand:
    """Test the profile command."""

    def test_table_output(self):
        with patch("qiitafetch.core.orchestrator.fetch_profile_body", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = Success(BODY)
            result = runner.invoke(app, ["profile", "Yuritani", "--token", "abc123"])

        assert result.exit_code == 0
        assert "Yuri" in result.stdout
        assert "Followers" in result.stdout
        assert "42" in result.stdout
        mock_fetch.assert_called_once()
        assert mock_fetch.call_args.args == ("Yuritani", "abc123")

    def test_json_output(self):
        with patch("qiitafetch.core.orchestrator.fetch_profile_body", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = Success(BODY)
            result = runner.invoke(app, ["profile", "Yuritani", "--token", "abc123", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["permanent_id"] == 42
        assert data["team_only"] is False
        assert data["location"] is None

    def test_token_from_env(self):
        with patch("qiitafetch.core.orchestrator.fetch_profile_body", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = Success(BODY)
            result = runner.invoke(
                app, ["profile", "Yuritani"], env={"QIITA_ACCESS_TOKEN": "from-env"}
            )

        assert result.exit_code == 0
        assert mock_fetch.call_args.args == ("Yuritani", "from-env")

    def test_name_with_bracket_markup(self):
        body = BODY.replace('"name":"Yuri"', '"name":"[/]"')
        with patch("qiitafetch.core.orchestrator.fetch_profile_body", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = Success(body)
            result = runner.invoke(app, ["profile", "Yuritani", "--token", "abc123"])

        assert result.exit_code == 0
        assert "[/]" in result.stdout
        assert "Followers" in result.stdout

    def test_transport_failure_exits_nonzero(self):
        with patch("qiitafetch.core.orchestrator.fetch_profile_body", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = Failure(TransportError("Connection refused"))
            result = runner.invoke(app, ["profile", "Yuritani", "--token", "abc123"])

        assert result.exit_code == 1

    def test_status_failure_exits_nonzero(self):
        with patch("qiitafetch.core.orchestrator.fetch_profile_body", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = Failure(HttpStatusError(401, "HTTP 401: Unauthorized"))
            result = runner.invoke(app, ["profile", "Yuritani", "--token", "abc123"])

        assert result.exit_code == 1

    def test_decode_failure_exits_nonzero(self):
        with patch("qiitafetch.core.orchestrator.fetch_profile_body", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = Success('{"followees_count":1}')
            result = runner.invoke(app, ["profile", "Yuritani", "--token", "abc123"])

        assert result.exit_code == 1

    def test_missing_token(self):
        result = runner.invoke(app, ["profile", "Yuritani"], env={"QIITA_ACCESS_TOKEN": ""})
        assert result.exit_code != 0
