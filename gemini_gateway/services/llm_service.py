"""LLMService: thin binding around Gemini chat models.

Sends a prompt plus optional inline binary parts to a Gemini model via
langchain-google-genai and returns the generated text. Binary parts are
base64-encoded into data URLs, which is how the provider accepts
non-text content inline. Provider failures are translated into
``ProviderError``; anything else becomes ``InternalError``.
"""

from __future__ import annotations

import base64
import json
import logging
import threading
from http import HTTPStatus
from typing import Any, Dict, Iterable, List, Optional

from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from gemini_gateway.config import Config
from gemini_gateway.errors import GatewayError, InternalError, ProviderError
from gemini_gateway.schemas import Part

logger = logging.getLogger(__name__)

NO_RESPONSE = "(no response)"


def to_data_url(part: Part) -> str:
    b64 = base64.b64encode(part.data).decode("utf-8")
    return f"data:{part.mime_type};base64,{b64}"


def build_message(prompt: str, parts: Iterable[Part] = ()) -> HumanMessage:
    content: List[Dict[str, Any]] = [{"type": "text", "text": prompt}]
    for part in parts:
        content.append({"type": "image_url", "image_url": {"url": to_data_url(part)}})
    return HumanMessage(content=content)


def extract_text(response: Any) -> str:
    """Pull the generated text out of a chat response.

    Handles plain string content and lists of content blocks; returns
    ``NO_RESPONSE`` when the provider produced nothing textual.
    """
    content = getattr(response, "content", None)
    if isinstance(content, str):
        text = content
    elif isinstance(content, list):
        pieces = []
        for block in content:
            if isinstance(block, str):
                pieces.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                pieces.append(block.get("text") or "")
        text = "".join(pieces)
    else:
        text = ""
    return text or NO_RESPONSE


def _status_code(exc: BaseException) -> Optional[int]:
    code = getattr(exc, "code", None)
    if isinstance(code, int) and not isinstance(code, bool) and 400 <= code <= 599:
        return code
    return None


def _jsonable(detail: Any) -> Any:
    if detail is None:
        return None
    try:
        json.dumps(detail)
        return detail
    except (TypeError, ValueError):
        if isinstance(detail, (list, tuple)):
            return [str(d) for d in detail]
        return str(detail)


def translate_error(exc: BaseException) -> GatewayError:
    """Map an exception from the provider SDK onto the error taxonomy."""
    seen = set()
    cur: Optional[BaseException] = exc
    # langchain wraps Google API errors; the status lives somewhere on the chain
    while cur is not None and id(cur) not in seen:
        seen.add(id(cur))
        status = _status_code(cur)
        if status is not None:
            try:
                status_text = HTTPStatus(status).phrase
            except ValueError:
                status_text = getattr(cur, "message", None) or str(cur)
            detail = getattr(cur, "details", None) or getattr(cur, "message", None)
            return ProviderError(status, status_text, _jsonable(detail))
        cur = cur.__cause__ or cur.__context__
    return InternalError(str(exc) or "Unknown error")


class LLMService:
    def __init__(self, cfg: type[Config] = Config):
        self.cfg = cfg
        self.api_key = cfg.GEMINI_API_KEY
        self.temperature = float(getattr(cfg, "TEMPERATURE", 0.2))
        self._models: Dict[str, ChatGoogleGenerativeAI] = {}
        self._lock = threading.Lock()

    def _model(self, model_id: str) -> ChatGoogleGenerativeAI:
        with self._lock:
            llm = self._models.get(model_id)
            if llm is None:
                llm = ChatGoogleGenerativeAI(
                    model=model_id,
                    google_api_key=self.api_key,
                    temperature=self.temperature,
                )
                self._models[model_id] = llm
            return llm

    def generate(self, model_id: str, prompt: str, parts: Iterable[Part] = ()) -> str:
        parts = list(parts)
        logger.info("Calling %s with %d binary part(s)", model_id, len(parts))
        try:
            resp = self._model(model_id).invoke([build_message(prompt, parts)])
        except Exception as e:
            raise translate_error(e) from e
        return extract_text(resp)
