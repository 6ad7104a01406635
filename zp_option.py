# ======================================================================================================================
# 📁 file        : zp_option.py — Опции и контрол с набором опций
# 🕒 created     : 25.10.2025 12:05
# 🎉 contains    : TOption, TFlydownDivider, TFlydownBlankOption, TOptionControl
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping
from zp_sys import *
from zp_tag import CONTENT_PLAIN
from zp_widget import TInputControl
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TOption", "TFlydownDivider", "TFlydownBlankOption", "TOptionControl", "DIVIDER_TITLE"]
# 💎 ... CONFIG / CONSTS ...
DIVIDER_TITLE = "—" * 6
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TOption — value / title / content_type
# ----------------------------------------------------------------------------------------------------------------------
@dataclass(eq=False)
class TOption:
    value: Any = None
    title: str | None = None
    content_type: str = CONTENT_PLAIN

    def is_selectable(self) -> bool:
        return True
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TFlydownDivider — разделитель (не выбирается)
# ----------------------------------------------------------------------------------------------------------------------
@dataclass(eq=False)
class TFlydownDivider(TOption):
    title: str | None = DIVIDER_TITLE

    def is_selectable(self) -> bool:
        return False
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TFlydownBlankOption — пустая опция-заглушка
# ----------------------------------------------------------------------------------------------------------------------
@dataclass(eq=False)
class TFlydownBlankOption(TOption):
    title: str | None = ""
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TOptionControl — контрол с упорядоченным набором опций
# ----------------------------------------------------------------------------------------------------------------------
class TOptionControl(TInputControl):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        """
        Контрол с опциями.
        💠 опции живут в арене: каждой при добавлении выдаётся слот (целое, не переиспользуется),
        метаданные лежат в боковой таблице по тому же слоту и создаются/удаляются вместе с опцией.
        Одинаковые value допустимы (метаданные привязаны к конкретной опции, а не к value).
        """
        super().__init__(id)
        self.f_arena: dict[int, TOption] = {}
        self.f_metadata: dict[int, dict[str, Any]] = {}
        self._next_slot: int = 0
        self.serialize_values: bool = False
        # ⚡🛠️ TOptionControl ▸ End of __init__
    # ..................................................................................................................
    # 🧱 Арена
    # ..................................................................................................................
    @property
    def options(self) -> list[TOption]:
        return list(self.f_arena.values())
    # ---
    @options.setter
    def options(self, options: list[TOption]):
        self.f_arena = {}
        self.f_metadata = {}
        for option in options:
            self.add_option(option)
    # ---
    def get_option_slot(self, option: TOption) -> int | None:
        for slot, arena_option in self.f_arena.items():
            if arena_option is option:
                return slot
        return None
    # ---
    def get_option(self, slot: int) -> TOption:
        if slot not in self.f_arena:
            self.fail("get_option", f"option slot {slot} not found", ENotFoundError)
        return self.f_arena[slot]
    # ..................................................................................................................
    # ➕ Добавление / удаление
    # ..................................................................................................................
    def add_option(self, value: Any, title: Any = "", content_type: str = CONTENT_PLAIN,
                   metadata: Mapping[str, Any] | None = None) -> TOption:
        """
        add_option('nz', 'New Zealand') или add_option(TOption(...), {'classes': ['big']}).
        """
        if isinstance(value, TOption):
            option = value
            if isinstance(title, Mapping):
                metadata = title
        else:
            option = TOption(value, title, content_type)
        slot = self._next_slot
        self._next_slot += 1
        self.f_arena[slot] = option
        self.f_metadata[slot] = dict(metadata or {})
        return option
    # ---
    def add_divider(self, title: str = DIVIDER_TITLE) -> TOption:
        return self.add_option(TFlydownDivider(None, title))
    # ---
    def add_options_by_array(self, options: Mapping[Any, str], content_type: str = CONTENT_PLAIN):
        for value, title in options.items():
            self.add_option(value, title, content_type)
    # ---
    def remove_option(self, option: TOption) -> TOption | None:
        removed = None
        for slot, arena_option in list(self.f_arena.items()):
            if arena_option is option:
                removed = arena_option
                del self.f_arena[slot]
                del self.f_metadata[slot]
        return removed
    # ---
    def remove_options_by_value(self, value: Any) -> list[TOption]:
        removed = []
        for slot, arena_option in list(self.f_arena.items()):
            if arena_option.value == value:
                removed.append(arena_option)
                del self.f_arena[slot]
                del self.f_metadata[slot]
        return removed
    # ..................................................................................................................
    # 🏷️ Метаданные
    # ..................................................................................................................
    def add_option_metadata(self, option: TOption, metadata: Any, value: Any = None):
        """
        add_option_metadata(opt, {'classes': [...]}) или add_option_metadata(opt, 'classes', [...]).
        """
        slot = self.get_option_slot(option)
        if slot is None:
            self.fail("add_option_metadata", f"option {option!r} does not belong to this control", ENotFoundError)
        if isinstance(metadata, Mapping):
            self.f_metadata[slot].update(metadata)
        else:
            self.f_metadata[slot][str(metadata)] = value
    # ---
    def get_option_metadata(self, option: TOption, key: str | None = None) -> Any:
        """Весь словарь метаданных или одно значение. Нет записи → None (без исключения)."""
        slot = self.get_option_slot(option)
        record = self.f_metadata.get(slot, {}) if slot is not None else {}
        if key is None:
            return dict(record)
        return record.get(key)
    # ..................................................................................................................
    # 🔍 Выборки
    # ..................................................................................................................
    def get_options(self, only_selectable: bool = False) -> list[TOption]:
        if only_selectable:
            return [option for option in self.f_arena.values() if option.is_selectable()]
        return self.options
    # ---
    def get_options_by_value(self, value: Any) -> list[TOption]:
        return [option for option in self.get_options() if option.value == value]
    # ---
    def has_duplicate_values(self) -> bool:
        seen: list[Any] = []
        for option in self.get_options():
            if not option.is_selectable():
                continue
            if option.value in seen:
                return True
            seen.append(option.value)
        return False
    # ---
    def get_option_classes(self, option: TOption) -> str | None:
        classes = self.get_option_metadata(option, "classes")
        if isinstance(classes, (list, tuple)):
            return " ".join(str(c) for c in classes) or None
        return str(classes) if classes else None
    # ..................................................................................................................
    # ♻️ Копирование
    # ..................................................................................................................
    def _copy_into(self, clone: "TOptionControl", id_suffix: str):
        super()._copy_into(clone, id_suffix)
        clone.f_arena = dict(self.f_arena)
        clone.f_metadata = {slot: dict(record) for slot, record in self.f_metadata.items()}
# 📁🌄 zp_option.py 🜂 The End — See You Next Session 2025
