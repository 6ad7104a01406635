# ======================================================================================================================
# 📁 file        : zp_message.py — Сообщения виджетов (валидация / уведомления)
# 🕒 created     : 18.10.2025 07:26
# 🎉 contains    : TMessageType, TMessage
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
import json
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ValidationError
from zp_sys import EZapError, zp_class
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TMessageType", "TMessage"]
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TMessageType — Серьёзность сообщения
# ----------------------------------------------------------------------------------------------------------------------
class TMessageType(str, Enum):
    NOTIFICATION = "notice"
    WARNING = "warning"
    ERROR = "error"
    SYSTEM_ERROR = "system-error"
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TMessage — накапливаемое сообщение виджета (никогда не исключение)
# ----------------------------------------------------------------------------------------------------------------------
class TMessage(BaseModel):
    primary_content: str
    type: TMessageType = TMessageType.NOTIFICATION
    secondary_content: Optional[str] = None
    content_type: str = "text/plain"

    @classmethod
    def create(
        cls,
        primary_content: str,
        message_type: TMessageType | str = TMessageType.NOTIFICATION,
        secondary_content: str | None = None,
        content_type: str = "text/plain",
    ) -> "TMessage":
        return cls(
            primary_content=primary_content,
            type=TMessageType(message_type),
            secondary_content=secondary_content,
            content_type=content_type,
        )

    @classmethod
    def error(cls, primary_content: str, content_type: str = "text/plain") -> "TMessage":
        return cls.create(primary_content, TMessageType.ERROR, content_type=content_type)

    def is_error(self) -> bool:
        return self.type in (TMessageType.ERROR, TMessageType.SYSTEM_ERROR)

    def get_css_class(self) -> str:
        # 'zap-message zap-message-error'
        return f"{zp_class('message')} {zp_class('message', self.type.value)}"

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, json_str: str) -> Optional["TMessage"]:
        try:
            data = json.loads(json_str)
        except ValueError:
            return None
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise EZapError(f"{cls.__name__}.from_json(): invalid message data: {exc.error_count()} error(s)") from exc
# 📁🌄 zp_message.py 🜂 The End — See You Next Session 2025
