"""
Client application model.

Holds the three UI sections (backend status, sample data, message response)
and drives them from background futures so a slow or failing request never
blocks the others.
"""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Tuple

import requests

from ..logging_config import get_logger
from .requests import ApiClient, ApiError, Dataset, Health, MessageResult
from .state import SectionState

logger = get_logger(__name__)

SEND_FAILED = "Failed to send message"

# Anything that can go wrong between issuing a request and having a parsed payload.
TRANSPORT_ERRORS = (requests.RequestException, ApiError, ValueError, KeyError, TypeError)


class ClientApp:
    """
    Attributes:
        client: ApiClient bound to the resolved base URL.
        health: state of the backend status section.
        data: state of the sample data section.
        response: last message submission outcome, None before the first one.
        draft: text currently typed into the message input.
    """

    def __init__(self, client: ApiClient, executor: Optional[ThreadPoolExecutor] = None) -> None:
        self.client = client
        self._executor = executor or ThreadPoolExecutor(
            max_workers=3, thread_name_prefix="deploydemo-client"
        )
        self._lock = threading.Lock()
        self._submitting = False

        self.health: SectionState[Health] = SectionState.pending()
        self.data: SectionState[Dataset] = SectionState.pending()
        self.response: Optional[MessageResult] = None
        self.draft = ""

    def __enter__(self) -> "ClientApp":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    # -------------------------
    # Initial load
    # -------------------------

    def load(self) -> Tuple[Future, Future]:
        """
        Start the health and data fetches concurrently.

        Returns:
            (health_future, data_future); neither ever raises.
        """
        return (
            self._executor.submit(self._load_health),
            self._executor.submit(self._load_data),
        )

    def _load_health(self) -> None:
        try:
            self.health = SectionState.success(self.client.health())
        except TRANSPORT_ERRORS as e:
            logger.error("Health check failed: %s", e)
            self.health = SectionState.failure(str(e))

    def _load_data(self) -> None:
        try:
            self.data = SectionState.success(self.client.data())
        except TRANSPORT_ERRORS as e:
            logger.error("Data fetch failed: %s", e)
            self.data = SectionState.failure(str(e))

    # -------------------------
    # Message submission
    # -------------------------

    @property
    def submit_enabled(self) -> bool:
        return not self._submitting

    def submit(self, text: Optional[str] = None) -> Optional[Future]:
        """
        Send `text` (or the current draft) to the echo endpoint in the background.

        Returns:
            Future resolving to the MessageResult, or None when the text is blank
            or another submission is still in flight.
        """
        message = self.draft if text is None else text
        if not message.strip():
            logger.debug("Ignoring blank message")
            return None

        with self._lock:
            if self._submitting:
                logger.debug("Submission already in flight; ignoring")
                return None
            self._submitting = True

        try:
            return self._executor.submit(self._send, message)
        except RuntimeError:
            # Executor already shut down; nothing will run _send's finally.
            with self._lock:
                self._submitting = False
            raise

    def _send(self, message: str) -> MessageResult:
        try:
            try:
                result = self.client.send_message(message)
                self.draft = ""
            except TRANSPORT_ERRORS as e:
                logger.error("Message send failed: %s", e)
                result = MessageResult.failed(SEND_FAILED)
            self.response = result
            return result
        finally:
            with self._lock:
                self._submitting = False

    # -------------------------
    # Rendering
    # -------------------------

    def render(self) -> str:
        lines: List[str] = ["Backend Status"]
        if self.health.is_success:
            health = self.health.payload
            lines += [
                f"  Status: {health.status}",
                f"  Message: {health.message}",
                f"  Timestamp: {health.timestamp}",
            ]
        elif self.health.is_failure:
            lines.append("  Backend unreachable")
        else:
            lines.append("  Connecting to backend...")

        lines.append("Sample Data")
        if self.data.is_success:
            lines.append(f"  {self.data.payload.message}")
            lines += [f"  - {item.name}: {item.description}" for item in self.data.payload.items]
        elif self.data.is_pending:
            lines.append("  Loading data...")

        lines.append("Send a Message")
        lines.append("  [Send]" if self.submit_enabled else "  [Sending...]")
        if self.response is not None:
            lines.append(f"  Response: {self.response.echo or self.response.error}")
            if self.response.timestamp:
                lines.append(f"  Timestamp: {self.response.timestamp}")

        return "\n".join(lines)
