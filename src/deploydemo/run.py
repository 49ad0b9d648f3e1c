#!/usr/bin/env python3
"""
deploydemo run script.

Modes:
- serve:  run the API server in this process
- client: run the console client against a running server
- demo:   start the server as a subprocess, wait until it is healthy,
          run the console client, then shut the server down
"""

from __future__ import annotations

import argparse
import os
import signal
import subprocess
import sys
import time
from dataclasses import dataclass
from typing import Optional

import requests

from deploydemo import __version__
from deploydemo.config import get_server_settings
from deploydemo.logging_config import get_logger, setup_logging

logger = get_logger("deploydemo.runner")


@dataclass(frozen=True)
class ChildProcess:
    """A named command the runner starts and later stops."""
    name: str
    cmd: list[str]


def _popen(child: ChildProcess) -> subprocess.Popen:
    """
    Start `child` with unbuffered Python output; stdout/stderr are inherited
    so server logs interleave with the client's.
    """
    logger.info("Starting %s: %s", child.name, " ".join(child.cmd))
    return subprocess.Popen(child.cmd, env={**os.environ, "PYTHONUNBUFFERED": "1"})


def _http_ok(url: str, timeout_s: float = 1.5) -> bool:
    """
    True if url answers with 2xx/3xx within timeout_s.
    """
    try:
        resp = requests.get(url, timeout=timeout_s)
    except requests.RequestException:
        return False
    return 200 <= resp.status_code < 400


def _wait_for_http(url: str, deadline_s: float = 20.0, poll_s: float = 0.25) -> None:
    """
    Wait for an HTTP endpoint to become reachable.

    Raises:
        TimeoutError: if deadline_s expires first.
    """
    start = time.monotonic()
    while time.monotonic() - start < deadline_s:
        if _http_ok(url):
            return
        time.sleep(poll_s)
    raise TimeoutError(f"Timed out waiting for {url}")


def _terminate_process(proc: subprocess.Popen, name: str, grace_s: float = 6.0) -> None:
    """
    Terminate a process gracefully, then force kill if needed.
    """
    if proc.poll() is not None:
        return

    logger.info("Stopping %s (pid=%d)", name, proc.pid)
    try:
        if os.name == "nt":
            proc.terminate()
        else:
            proc.send_signal(signal.SIGTERM)
    except ProcessLookupError:
        return

    try:
        proc.wait(timeout=grace_s)
    except subprocess.TimeoutExpired:
        logger.warning("%s did not exit after %.1fs; killing", name, grace_s)
        proc.kill()
        proc.wait()


def _run_serve(host: Optional[str], port: Optional[int]) -> int:
    from deploydemo.server.run import PortUnavailableError, serve

    try:
        serve(host=host, port=port)
    except PortUnavailableError as e:
        logger.error("%s", e)
        return 1
    return 0


def _run_client(api_url: Optional[str]) -> int:
    from deploydemo.client.console import build_app, run_console

    with build_app(api_url) as app:
        try:
            run_console(app)
        except KeyboardInterrupt:
            pass
    return 0


def _run_demo(port: int) -> int:
    """
    Start the server subprocess, wait for /api/health, then run the console client.
    """
    base_url = f"http://127.0.0.1:{port}"
    child = ChildProcess(
        name="server",
        cmd=[sys.executable, "-m", "deploydemo.run", "serve", "--host", "127.0.0.1", "--port", str(port)],
    )
    server = _popen(child)

    try:
        _wait_for_http(f"{base_url}/api/health", deadline_s=30.0)
    except TimeoutError as e:
        logger.error("Server failed to become healthy: %s", e)
        if server.poll() is not None:
            logger.error("Server process exited early with code %s", server.returncode)
        _terminate_process(server, child.name)
        return 1

    try:
        return _run_client(base_url)
    finally:
        _terminate_process(server, child.name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="deploydemo", description="Deployment demo app runner")
    parser.add_argument("--version", action="version", version=f"deploydemo {__version__}")
    sub = parser.add_subparsers(dest="command")

    serve_p = sub.add_parser("serve", help="Run the API server")
    serve_p.add_argument("--host", type=str, default=None, help="Listen host (default: $HOST or 0.0.0.0)")
    serve_p.add_argument("--port", type=int, default=None, help="Listen port (default: $PORT or 3001)")

    client_p = sub.add_parser("client", help="Run the console client")
    client_p.add_argument("--api-url", type=str, default=None, help="API base URL (default: $API_URL)")

    demo_p = sub.add_parser("demo", help="Run server and console client together")
    demo_p.add_argument("--port", type=int, default=None, help="Server port (default: $PORT or 3001)")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if args.command is None:
        print("Please specify a command (serve, client, demo). Use --help for more information.")
        raise SystemExit(2)

    setup_logging(get_server_settings().log_level)

    if args.command == "serve":
        raise SystemExit(_run_serve(args.host, args.port))
    if args.command == "client":
        raise SystemExit(_run_client(args.api_url))
    raise SystemExit(_run_demo(args.port or get_server_settings().port))


if __name__ == "__main__":
    main()
