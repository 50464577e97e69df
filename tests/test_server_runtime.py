"""Regression tests for server port binding and startup failure handling."""

from __future__ import annotations

import socket
import threading
from pathlib import Path

import httpx
import pytest
from fastapi import FastAPI

from course_portal.api import NOT_FOUND_BODY
from course_portal.bootstrap import bootstrap_create_application
from course_portal.config import AppSettings
from course_portal.main import main
from course_portal.server import ContentServer, ServerBindError, ServerState, server_bind_socket

STATIC_DIRECTORY = Path(__file__).resolve().parents[1] / "static"


def test_server_bind_socket_rejects_port_already_in_use() -> None:
    """Fail the second bind on a port held by an active listener.

    Returns:
        None: Assertions validate bind failure behavior.

    Raises:
        AssertionError: Raised when the port is bound twice.
    """

    first_listener = server_bind_socket("127.0.0.1", 0)
    try:
        occupied_port = first_listener.getsockname()[1]
        with pytest.raises(ServerBindError, match=f"127.0.0.1:{occupied_port}"):
            server_bind_socket("127.0.0.1", occupied_port)
    finally:
        first_listener.close()


def test_server_content_server_moves_to_serving_after_bind() -> None:
    """Transition from starting to serving once the socket is bound.

    Returns:
        None: Assertions validate lifecycle state.

    Raises:
        AssertionError: Raised when state does not change.
    """

    server = ContentServer(application=FastAPI(), host="127.0.0.1", port=0)
    assert server.state is ServerState.STARTING

    listener = server.server_bind()
    try:
        assert server.state is ServerState.SERVING
        assert listener.getsockname()[1] > 0
        assert server.server_bind() is listener
    finally:
        listener.close()


def test_server_content_server_stays_starting_when_bind_fails() -> None:
    """Keep the starting state when the port is unavailable.

    Returns:
        None: Assertions validate lifecycle state.

    Raises:
        AssertionError: Raised when state changes on failure.
    """

    blocker = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    blocker.bind(("127.0.0.1", 0))
    blocker.listen(1)
    try:
        server = ContentServer(application=FastAPI(), host="127.0.0.1", port=blocker.getsockname()[1])
        with pytest.raises(ServerBindError):
            server.server_bind()
        assert server.state is ServerState.STARTING
    finally:
        blocker.close()


def test_server_main_exits_non_zero_when_port_is_in_use(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """Exit with status 1 when a second instance targets an occupied port.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate process exit status.

    Raises:
        AssertionError: Raised when startup does not fail.
    """

    first_listener = server_bind_socket("127.0.0.1", 0)
    try:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("APPLICATION_HOST", "127.0.0.1")
        monkeypatch.setenv("APPLICATION_PORT", str(first_listener.getsockname()[1]))
        monkeypatch.setenv("STATIC_DIRECTORY", str(STATIC_DIRECTORY))

        with pytest.raises(SystemExit) as exit_info:
            main(["serve"])

        assert exit_info.value.code == 1
    finally:
        first_listener.close()


def test_server_main_exits_non_zero_when_assets_are_missing(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """Exit with status 1 before binding when the asset directory is absent.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate process exit status.

    Raises:
        AssertionError: Raised when startup does not fail.
    """

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STATIC_DIRECTORY", str(tmp_path / "absent"))

    with pytest.raises(SystemExit) as exit_info:
        main([])

    assert exit_info.value.code == 1


def test_server_run_serves_pages_on_bound_socket() -> None:
    """Serve real HTTP requests through uvicorn on the pre-bound socket.

    Returns:
        None: Assertions validate end-to-end responses.

    Raises:
        AssertionError: Raised when the running server responds incorrectly.
    """

    settings = AppSettings(environment_name="test", static_directory=str(STATIC_DIRECTORY), log_level="WARNING")
    server = ContentServer(
        application=bootstrap_create_application(settings),
        host="127.0.0.1",
        port=0,
        log_level=settings.log_level,
    )
    port = server.server_bind().getsockname()[1]
    server_thread = threading.Thread(target=server.server_run, daemon=True)
    server_thread.start()

    try:
        with httpx.Client(base_url=f"http://127.0.0.1:{port}", timeout=10.0, trust_env=False) as client:
            landing_response = client.get("/")
            courses_response = client.get("/courses")
            missing_response = client.get("/nonexistent")
    finally:
        server.server_stop()
        server_thread.join(timeout=10.0)

    assert landing_response.status_code == 200
    assert "DevOps" in landing_response.text
    assert courses_response.status_code == 200
    assert 'class="course-list"' in courses_response.text
    assert missing_response.status_code == 404
    assert missing_response.text == NOT_FOUND_BODY
    assert not server_thread.is_alive()


def test_server_run_closes_socket_when_runtime_config_fails() -> None:
    """Close the bound listener when uvicorn rejects the runtime configuration.

    Returns:
        None: Assertions validate socket cleanup.

    Raises:
        AssertionError: Raised when the listener stays open.
    """

    server = ContentServer(application=FastAPI(), host="127.0.0.1", port=0, log_level="warn")
    listener = server.server_bind()

    with pytest.raises(KeyError):
        server.server_run()

    assert listener.fileno() == -1
