"""Fetching sentence records from the web service and acknowledging them."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from collections.abc import Callable
from typing import Any, Optional

from huaweiwall.data import _json_string

logger = logging.getLogger(__name__)

Opener = Callable[[urllib.request.Request], Any]


class APIManager:
    """Keeps queues of record ids and paths received from the service."""

    def __init__(
        self,
        get_data_link: str = "",
        post_data_link: str = "",
        opener: Optional[Opener] = None,
    ) -> None:
        self.get_data_link = get_data_link
        self.post_data_link = post_data_link
        self.id_array: list[str] = []
        self.path_array: list[str] = []
        self._opener: Opener = opener if opener is not None else urllib.request.urlopen

    def _send(self, request: urllib.request.Request) -> Optional[str]:
        """Perform ``request`` and return the body, or None if it failed."""
        try:
            with self._opener(request) as response:
                body = response.read()
        except urllib.error.HTTPError as error:
            body = error.read()
        except (urllib.error.URLError, OSError, ValueError):
            return None
        return body.decode("utf-8", errors="replace")

    def get_sentence_data(self) -> None:
        """Fetch the record list and queue the new entries."""
        if not self.get_data_link:
            return
        logger.info("getDataLink: %s", self.get_data_link)
        request = urllib.request.Request(self.get_data_link, method="GET")
        content = self._send(request)
        if content is None:
            logger.error("API Request failed")
            return
        logger.info("API Response: %s", content)
        self.load_json_data(content)

    def post_id_data(self) -> None:
        """Take the oldest queued id and post it to the acknowledgement link."""
        if not self.post_data_link or not self.id_array:
            return
        record_id = self.id_array.pop(0)
        request = urllib.request.Request(
            self.post_data_link + record_id,
            data=b"",
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        content = self._send(request)
        if content is None:
            logger.error("Request failed")
        else:
            logger.info("Response: %s", content)

    def load_json_data(self, json_content: str) -> None:
        """Queue the id and path of each record beyond those already held."""
        try:
            records = json.loads(json_content)
        except json.JSONDecodeError:
            logger.error("Failed to deserialize JSON array.")
            return
        if not isinstance(records, list):
            logger.error("Failed to deserialize JSON array.")
            return
        for position, record in enumerate(records, start=1):
            if len(self.path_array) >= position:
                continue
            if isinstance(record, dict):
                self.id_array.append(_json_string(record.get("id")) or "")
                self.path_array.append(_json_string(record.get("path")) or "")
        for index, (record_id, path) in enumerate(zip(self.id_array, self.path_array)):
            logger.info("Entry %d: ID = %s, Path = %s", index, record_id, path)