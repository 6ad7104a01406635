# ======================================================================================================================
# 📁 file        : zp_request.py — Источник данных формы (уже разобранный запрос)
# 🕒 created     : 21.10.2025 10:12
# 🎉 contains    : TRequest
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
import re
from typing import Any, Iterable, Mapping
from urllib.parse import parse_qsl, urlparse
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TRequest", "decode_pairs"]
# 💎 ... CONFIG / CONSTS ...
_BRACKET_RE = re.compile(r"^(.+)\[([^\[\]]*)\]$")
# 🍍 ... global utilities ...
def decode_pairs(pairs: Iterable[tuple[str, str]]) -> dict[str, Any]:
    """
    Собирает пары name=value в словарь формы:
    'ids[]=3&ids[]=7' → {'ids': ['3', '7']},
    'opts[0]=a&opts[2]=c' → {'opts': {'0': 'a', '2': 'c'}},
    повтор обычного ключа → побеждает последний.
    """
    data: dict[str, Any] = {}
    for name, value in pairs:
        m = _BRACKET_RE.match(name)
        if m is None:
            data[name] = value
            continue
        base, key = m.group(1), m.group(2)
        if key == "":
            bucket = data.get(base)
            if not isinstance(bucket, list):
                bucket = []
                data[base] = bucket
            bucket.append(value)
        else:
            bucket = data.get(base)
            if not isinstance(bucket, dict):
                bucket = {}
                data[base] = bucket
            bucket[key] = value
    return data
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TRequest — разобранный HTTP-запрос (GET / POST)
# ----------------------------------------------------------------------------------------------------------------------
class TRequest:
    # ⚡🛠️ ▸ __init__
    def __init__(
        self,
        url: str | None = None,
        method: str = "GET",
        body: str | bytes | None = None,
        post: Mapping[str, Any] | None = None,
    ):
        self.get: dict[str, Any] = {}
        self.post: dict[str, Any] = {}
        self.headers: dict[str, str] = {}
        self.cookies: dict[str, str] = {}
        self.path: str = "/"
        self.method: str = method.upper()

        if url:
            self.parse_url(url)
        if body:
            self.parse_body(body)
        if post:
            self.post.update(post)
            self.method = "POST"
        # ⚡🛠️ TRequest ▸ End of __init__
    # ---
    def parse_url(self, url: str):
        parsed = urlparse(url)
        self.path = parsed.path or "/"
        self.get = decode_pairs(parse_qsl(parsed.query, keep_blank_values=True))
    # ---
    def parse_body(self, body: str | bytes):
        """Тело application/x-www-form-urlencoded → self.post."""
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        self.post.update(decode_pairs(parse_qsl(body, keep_blank_values=True)))
        self.method = "POST"
    # ---
    def is_post(self) -> bool:
        return self.method == "POST"
    # ---
    def get_form_data(self, method: str = "post") -> dict[str, Any]:
        return self.post if method.lower() == "post" else self.get
    # ---
    def value(self, key: str, default: Any = None) -> Any:
        if key in self.post:
            return self.post[key]
        return self.get.get(key, default)
    # ---
    def __getitem__(self, key: str) -> Any:
        """Позволяет обращаться как к словарю: request['email']"""
        return self.value(key, "")
    # ---
    def __repr__(self):
        return f"<TRequest {self.method} path={self.path} get={self.get} post={self.post}>"
# 📁🌄 zp_request.py 🜂 The End — See You Next Session 2025
