"""
Line-oriented console front end for ClientApp.
"""

from __future__ import annotations

import sys
from concurrent.futures import wait
from typing import Optional, TextIO

from ..config import ClientSettings, resolve_api_url
from ..logging_config import get_logger
from .app import ClientApp
from .requests import ApiClient

logger = get_logger(__name__)

QUIT = "q"


def build_app(api_url: Optional[str] = None) -> ClientApp:
    """
    Resolve the base URL once and bind a ClientApp to it.
    """
    settings = ClientSettings()
    base_url = resolve_api_url(api_url)
    logger.info("Using API at %s", base_url)
    return ClientApp(ApiClient(base_url, timeout_s=settings.api_timeout))


def run_console(app: ClientApp, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
    """
    Load both sections, then submit each input line as a message until "q" or EOF.
    """
    print(app.render(), file=stdout)
    wait(app.load())
    print(app.render(), file=stdout)

    print(f"Type a message and press Enter ({QUIT} to quit).", file=stdout)
    for line in stdin:
        text = line.rstrip("\n")
        if text.strip() == QUIT:
            break
        app.draft = text
        future = app.submit()
        if future is None:
            continue
        future.result()
        print(app.render(), file=stdout)
