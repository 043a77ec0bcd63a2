"""
issue_source.py - Local issue list
Single responsibility: read the issue records the results panel filters.
"""
import json
import logging
import os

from filterdesk import config

logger = logging.getLogger(__name__)


def load_issues(path: str | None = None) -> list[dict]:
    """
    Read issues from a JSON file.

    Accepts a plain list or a paged response object with an ``items`` list.
    A missing or unreadable file yields an empty list.
    """
    path = path or config.ISSUES_PATH
    if not os.path.exists(path):
        logger.info("No issue file at %s", path)
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to read issues from %s: %s", path, e)
        return []

    if isinstance(data, dict):
        data = data.get("items", [])
    if not isinstance(data, list):
        logger.warning("Issue file %s does not hold a list", path)
        return []
    return [item for item in data if isinstance(item, dict)]
