import logging
import os
from typing import List

import pytest

from approval_chain.domain.approval import ApprovalChain, ChainBuilder, default_chain


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration environment variables out of every test."""
    monkeypatch.delenv("APPROVAL_CHAIN_CONFIG", raising=False)
    monkeypatch.delenv("APPROVAL_CHAIN_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def trace() -> List[str]:
    """Collects trace lines emitted by handlers."""
    return []


@pytest.fixture
def chain(trace) -> ApprovalChain:
    """The standard Manager -> Director -> CEO chain writing into `trace`."""
    return default_chain(sink=trace.append)


@pytest.fixture
def custom_chain(trace) -> ApprovalChain:
    return (
        ChainBuilder(sink=trace.append)
        .add("Team Lead", 0.5)
        .add("Head of Department", 5)
        .add("Board", 20, terminal=True)
        .build()
    )


@pytest.fixture
def config_dir(tmp_path):
    path = tmp_path / "config"
    os.makedirs(path)
    return path
