from __future__ import annotations

import os
from typing import Any, Callable, List, Optional, Tuple

import pytest

from gemini_gateway import create_app
from gemini_gateway.config import Config


class FakeLLM:
    """Records generate() calls; optionally raises or runs a hook."""

    def __init__(self, reply: str = "Hello test", error: Optional[BaseException] = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: List[Tuple[str, str, list]] = []
        self.hook: Optional[Callable[[], Any]] = None

    def generate(self, model_id: str, prompt: str, parts: Any = ()) -> str:
        self.calls.append((model_id, prompt, list(parts)))
        if self.hook is not None:
            self.hook()
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def upload_dir(tmp_path) -> str:
    return str(tmp_path / "uploads")


@pytest.fixture
def cfg(upload_dir):
    class TestConfig(Config):
        GEMINI_API_KEY = "test-key"
        GEMINI_MODEL = "gemini-test"
        UPLOAD_DIR = upload_dir
        MAX_UPLOAD_MB = 1

    return TestConfig


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def app(cfg, fake_llm):
    app = create_app(cfg, llm=fake_llm)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def staged_files(upload_dir: str) -> List[str]:
    if not os.path.isdir(upload_dir):
        return []
    return os.listdir(upload_dir)
