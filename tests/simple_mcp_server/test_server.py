"""Tests for server.py."""

import logging
from unittest.mock import MagicMock, patch

import pytest
from fastmcp import Client

from simple_mcp_server.config import Settings
from simple_mcp_server.server import create_server, main


@pytest.mark.asyncio
async def test_create_server_registers_tools_and_resources():
    """Test that the server exposes exactly two tools and one resource."""
    mcp = create_server(Settings(sample_env="hello"))

    async with Client(mcp) as client:
        tools = await client.list_tools()
        resources = await client.list_resources()

    assert sorted(tool.name for tool in tools) == ["echo_message", "get_current_time"]
    assert len(resources) == 1


def test_create_server_uses_server_name():
    mcp = create_server(Settings(sample_env="hello"))

    assert mcp.name == "simple-mcp-server"


@patch("simple_mcp_server.server.create_server")
def test_main_exits_with_code_1_when_sample_env_missing(mock_create_server, monkeypatch):
    """Test that startup aborts before serving when SAMPLE_ENV is not set."""
    monkeypatch.delenv("SAMPLE_ENV", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
    mock_create_server.assert_not_called()


@patch("simple_mcp_server.server.create_server")
def test_main_exits_with_code_1_when_sample_env_empty(mock_create_server, monkeypatch):
    """Test that an empty SAMPLE_ENV is treated as missing."""
    monkeypatch.setenv("SAMPLE_ENV", "")

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
    mock_create_server.assert_not_called()


@patch("simple_mcp_server.server.create_server")
def test_main_runs_server_when_sample_env_set(mock_create_server, monkeypatch, caplog):
    """Test that main logs the startup message, then builds the server from the environment and runs it."""
    monkeypatch.setenv("SAMPLE_ENV", "hello")
    caplog.set_level(logging.INFO, logger="simple_mcp_server.server")
    logged_before_run = []
    mock_mcp = MagicMock()
    mock_mcp.run.side_effect = lambda: logged_before_run.append(
        "Starting simple MCP server..." in caplog.text
    )
    mock_create_server.return_value = mock_mcp

    main()

    settings = mock_create_server.call_args[0][0]
    assert settings.sample_env == "hello"
    mock_mcp.run.assert_called_once_with()
    assert logged_before_run == [True]


@patch("simple_mcp_server.server.create_server")
def test_main_exits_with_code_1_when_transport_fails(mock_create_server, monkeypatch, caplog):
    """Test that errors while serving are logged and exit with code 1."""
    monkeypatch.setenv("SAMPLE_ENV", "hello")
    mock_create_server.return_value.run.side_effect = RuntimeError("stdio closed")

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
    assert "Server initialization error" in caplog.text
