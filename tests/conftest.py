"""Shared fixtures for clientdesk tests.

File handling in tests:
- Every test that touches the repositories gets its own config and data
  directory under tmp_path through the ``data_dir`` fixture.
- Repository singletons cache their collections, so the fixture drops those
  caches before and after each test.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from clientdesk import configuration, log
from clientdesk.initialize import initialize
from clientdesk.repository.client import CLIENT_REPO
from clientdesk.repository.configuration import CONFIGURATION_REPO
from clientdesk.repository.id_map import ID_MAP_REPO
from clientdesk.repository.notification import NOTIFICATION_REPO
from clientdesk.repository.payment import PAYMENT_REPO
from clientdesk.repository.task import TASK_REPO

_REPO_CACHES = [
    (CONFIGURATION_REPO, "_config"),
    (ID_MAP_REPO, "_id_map"),
    (CLIENT_REPO, "_clients"),
    (TASK_REPO, "_tasks"),
    (PAYMENT_REPO, "_payments"),
    (NOTIFICATION_REPO, "_notifications"),
]


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration and data files at tmp_path and initialize them."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_CLIENTS_PATH", data_path / "clients.yaml")
    monkeypatch.setattr(configuration, "DATA_TASKS_PATH", data_path / "tasks.yaml")
    monkeypatch.setattr(
        configuration, "DATA_PAYMENTS_PATH", data_path / "payments.yaml"
    )
    monkeypatch.setattr(
        configuration, "DATA_NOTIFICATIONS_PATH", data_path / "notifications.yaml"
    )
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", data_path / "id_map.yaml")

    for repository, attribute in _REPO_CACHES:
        monkeypatch.setattr(repository, attribute, None)
        monkeypatch.setattr(repository, "is_dirty", False)
    monkeypatch.setattr(log, "_verbose", False)

    initialize()
    return data_path
