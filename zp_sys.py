# ======================================================================================================================
# 📁 file        : zp_sys.py — базовые классы Zap Core 2025
# 🕒 created     : 11.10.2025 12:23
# 🎉 contains    : ENV-конфиг, css-хелперы, перевод, таксономия ошибок, TObject, TUIObject
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
import os
import traceback
import weakref
from copy import copy as shallow_copy
from datetime import datetime
from typing import Any, Callable, Iterator, MutableMapping
from zp_logger import LoggableComponent
from zp_tag import THtmlHeadEntry, THtmlHeadEntrySet, HEAD_STYLE, HEAD_SCRIPT, HEAD_COMMENT
# 💎 ... Переназначаемая ENV-мапа ...
_ENV: MutableMapping[str, str] = os.environ
# 🍍 ... global utilities ...
def set_env_mapping(mapping: MutableMapping[str, str] | None) -> None:
    global _ENV
    _ENV = os.environ if mapping is None else mapping
# ---
def get_env_mapping() -> MutableMapping[str, str]:
    return _ENV
# ---
def _s(v):
    return '' if v is None else str(v)
# ---
def _set_key(name: str, value: str) -> bool:
    if not name:
        return False
    _ENV[name] = '' if value is None else _s(value)
    return True
# ---
def _key(name: str | None, default: str = '') -> str | None:
    if not name:
        return None
    v = _ENV.get(name)
    if v is not None and v != '':
        return v
    _ENV[name] = str(default)
    return str(default)
# ---
def key_int(name: str, default: int = 0) -> int:
    """Возвращает параметр как int (мусор → default)."""
    raw = _key(name, str(default))
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default
# ---
def key_bool(name: str, default: bool = False) -> bool:
    """Возвращает параметр как bool: 1/true/yes/on → True."""
    raw = _key(name, '1' if default else '0')
    return str(raw).strip().lower() in ('1', 'true', 'yes', 'on')
# 💎 UI meta & utilities (глобально)
ZP_CSS_PREFIX = _key('ZP_CSS_PREFIX', 'zap')
ZP_PACKAGE_ID = _key('ZP_PACKAGE_ID', 'zap')
ZP_STYLE_SHEET = f"packages/{ZP_PACKAGE_ID}/styles/{ZP_PACKAGE_ID}.css"

def zp_class(*parts: str) -> str:
    # zp_class('entry') -> 'zap-entry'
    # zp_class('message','error') -> 'zap-message-error'
    return "-".join((ZP_CSS_PREFIX, *parts))

def zp_join_classes(*cls: str | None) -> str:
    return " ".join(c for c in cls if c)

def zp_script(name: str) -> str:
    # zp_script('check-all') -> 'packages/zap/javascript/zap-check-all.js'
    return f"packages/{ZP_PACKAGE_ID}/javascript/{ZP_CSS_PREFIX}-{name}.js"
# 💎 ... Перевод (внешний провайдер, по умолчанию identity) ...
_TRANSLATOR: Callable[[str], str] | None = None

def set_translator(fn: Callable[[str], str] | None) -> None:
    global _TRANSLATOR
    _TRANSLATOR = fn

def translate(text: str) -> str:
    return text if _TRANSLATOR is None else _TRANSLATOR(text)
# 💎 ... Подбор по виду (класс / кортеж классов / предикат) ...
def is_kind(obj: Any, kind: Any) -> bool:
    if kind is None:
        return True
    if isinstance(kind, (type, tuple)):
        return isinstance(obj, kind)
    return bool(kind(obj))
# 💎🧩⚙️ ... __ALL__ ...
__all__ = [
    'TObject', 'TUIObject',
    'EZapError', 'EConfigurationError', 'EDuplicateIdError', 'EInvalidClassError',
    'EInvalidPropertyError', 'EUndefinedStockTypeError', 'ENotFoundError', 'EWidgetNotFoundError',
    'set_env_mapping', 'get_env_mapping',
    '_s', '_set_key', '_key', 'key_int', 'key_bool',
    'zp_class', 'zp_join_classes', 'zp_script', 'ZP_CSS_PREFIX', 'ZP_PACKAGE_ID', 'ZP_STYLE_SHEET',
    'set_translator', 'translate', 'is_kind',
]
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 Таксономия ошибок
# ----------------------------------------------------------------------------------------------------------------------
class EZapError(Exception):
    """Корень всех жёстких ошибок Zap Core."""


class EConfigurationError(EZapError):
    """Ошибка сборки дерева / программиста. Летит наверх запроса без перехвата."""


class EDuplicateIdError(EConfigurationError):
    pass


class EInvalidClassError(EConfigurationError, TypeError):
    pass


class EInvalidPropertyError(EConfigurationError, AttributeError):
    pass


class EUndefinedStockTypeError(EConfigurationError):
    pass


class ENotFoundError(EZapError, LookupError):
    """Поиск по id / позиции / ключу не дал результата."""


class EWidgetNotFoundError(ENotFoundError):
    pass
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TObject — log / debug / fail для всех объектов ядра
# ----------------------------------------------------------------------------------------------------------------------
class TObject(LoggableComponent):
    # ..................................................................................................................
    # 📡 Log / Debug / Fail
    # ..................................................................................................................
    def log_name(self) -> str:
        ident = getattr(self, "id", None)
        return ident if isinstance(ident, str) and ident else self.__class__.__name__
    # ---
    def debug(self, func: str, *parts):
        """
        Унифицированный отладочный вывод (иконка 🔍). Включается только если ZP_DEBUG_MODE == '1'.
        """
        if _key("ZP_DEBUG_MODE", "0") != "1":
            return
        now = datetime.now().strftime('%H:%M:%S')
        msg = " ".join(str(p) for p in parts)
        self.route_log(f"🔍 [DEBUG][{now}][{self.__class__.__name__}.{func}] {msg}")
    # ---
    def fail(self, function: str, msg: str, exc_type: type = EConfigurationError):
        """
        Аварийный выход: лог + (если задан ZP_FAIL_LOG) стек в файл, затем raise exc_type.
        """
        cls_name = self.__class__.__name__
        self.log("fail", f"{function}(): {msg}")
        path = _key("ZP_FAIL_LOG", "")
        if path:
            stack = "".join(traceback.format_stack(limit=key_int("ZP_TRACE_LIMIT", 12)))
            owner = getattr(self, "Owner", None)
            owner_part = f"\n📦 owner: {owner.log_name()}" if owner is not None else ""
            text = (
                f"\n💥 {cls_name}.{function}() FAILED{owner_part}\n⚙️ message: {msg}"
                f"\n\n🧩 Traceback (most recent calls):\n{stack}"
            )
            folder = os.path.dirname(path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(path, "a", encoding="utf-8") as f:
                f.write(f"{text}\n{'-' * 80}\n")
        raise exc_type(f"{cls_name}.{function}(): {msg}")
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TUIObject — идентичность, владелец, видимость, css-классы, копирование
# ----------------------------------------------------------------------------------------------------------------------
class TUIObject(TObject):
    # ⚡🛠️ ▸ __init__
    def __init__(self):
        """
        Базовый узел UI-дерева Zap.
        💠 объект знает своего Owner (слабая ссылка: владеет родитель, ребёнок только ищет по ней предков),
        хранит свой id, флаг visible, упорядоченный набор css-классов
        и собственный набор head-записей (CSS/JS), который собирает страница.
        """
        self.f_owner: weakref.ref | None = None
        self.id: str | None = None
        self.visible: bool = True
        self.classes: list[str] = []
        self.html_head_entry_set = THtmlHeadEntrySet()
        # ⚡🛠️ TUIObject ▸ End of __init__
    # ..................................................................................................................
    # 👨‍👩‍👧‍👧 Владелец и родословная
    # ..................................................................................................................
    @property
    def Owner(self) -> "TUIObject | None":
        ref = self.f_owner
        return None if ref is None else ref()
    # ---
    @Owner.setter
    def Owner(self, value: "TUIObject | None"):
        if value is None:
            self.f_owner = None
            return
        p = value
        guard = 0
        while p is not None and guard < 1024:
            if p is self:
                self.fail("Owner", f"Ownership cycle detected via {value.log_name()}")
            p = p.Owner
            guard += 1
        if guard >= 1024:
            self.fail("Owner", "Ownership chain is too deep")
        self.f_owner = weakref.ref(value)
    # ---
    def get_first_ancestor(self, kind: Any) -> "TUIObject | None":
        """
        Идёт вверх по Owner и возвращает первого предка, подходящего под kind
        (класс, кортеж классов или предикат). Никого нет → None.
        """
        p = self.Owner
        while p is not None:
            if is_kind(p, kind):
                return p
            p = p.Owner
        return None
    # ---
    def get_root(self) -> "TUIObject":
        node = self
        while node.Owner is not None:
            node = node.Owner
        return node
    # ---
    def is_visible(self) -> bool:
        owner = self.Owner
        if owner is not None:
            return owner.is_visible() and self.visible
        return self.visible
    # ..................................................................................................................
    # 🔍 Обход
    # ..................................................................................................................
    def iter_children(self) -> Iterator["TUIObject"]:
        """Непосредственные дети (композиты, дети контейнера, рендереры). Базово — никого."""
        return iter(())
    # ---
    def iter_tree(self) -> Iterator["TUIObject"]:
        """
        Генератор обхода вниз по иерархии от текущего узла. Даёт self, затем рекурсивно всех детей.
        """
        yield self
        for child in self.iter_children():
            yield from child.iter_tree()
    # ---
    def _get_unique_id(self) -> str:
        """
        Id = ИмяКласса без ведущей 'T' + порядковый номер.
        Счётчики живут у корня дерева, занятые в дереве id пропускаются.
        TEntry → Entry1, TCheckboxCellRenderer → CheckboxCellRenderer1
        """
        raw_class = self.__class__.__name__
        human_name = raw_class[1:] if raw_class.startswith("T") and len(raw_class) > 1 else raw_class
        root = self.get_root()
        counters = root.__dict__.setdefault("_auto_counters", {})
        taken = {node.id for node in root.iter_tree() if node.id is not None}
        n = counters.get(human_name, 0) + 1
        candidate = f"{human_name}{n}"
        while candidate in taken:
            n += 1
            candidate = f"{human_name}{n}"
        counters[human_name] = n
        return candidate
    # ..................................................................................................................
    # 🎨 CSS-классы
    # ..................................................................................................................
    def add_class(self, *tokens):
        """
        Идемпотентное добавление css-классов: порядок сохраняется, дубликаты не добавляются,
        строки с пробелами режутся на токены.
        """
        for tok in tokens:
            if not tok:
                continue
            for t in str(tok).split():
                if t not in self.classes:
                    self.classes.append(t)
    # ---
    def remove_class(self, *tokens):
        """Удаляет css-классы, если они были навешены ранее."""
        for tok in tokens:
            if not tok:
                continue
            for t in str(tok).split():
                if t in self.classes:
                    self.classes.remove(t)
    # ---
    def get_css_class_names(self) -> list[str]:
        return list(self.classes)
    # ---
    def get_css_class_string(self) -> str | None:
        names = []
        for name in self.get_css_class_names():
            if name and name not in names:
                names.append(name)
        return " ".join(names) if names else None
    # ..................................................................................................................
    # 📦 Head-записи (CSS / JS)
    # ..................................................................................................................
    def add_style_sheet(self, uri: str, package_id: str | None = None):
        self.html_head_entry_set.add_entry(THtmlHeadEntry(uri, HEAD_STYLE, package_id))
    # ---
    def add_java_script(self, uri: str, package_id: str | None = None):
        self.html_head_entry_set.add_entry(THtmlHeadEntry(uri, HEAD_SCRIPT, package_id))
    # ---
    def add_comment(self, comment: str, package_id: str | None = None):
        self.html_head_entry_set.add_entry(THtmlHeadEntry(comment, HEAD_COMMENT, package_id))
    # ---
    def get_html_head_entry_set(self) -> THtmlHeadEntrySet:
        if self.is_visible():
            return THtmlHeadEntrySet(self.html_head_entry_set)
        return THtmlHeadEntrySet()
    # ---
    def get_inline_java_script(self) -> str:
        return ""
    # ..................................................................................................................
    # ♻️ Копирование
    # ..................................................................................................................
    def copy(self, id_suffix: str = "") -> "TUIObject":
        """
        Структурный клон без владельца. Непустой id_suffix дописывается к id,
        чтобы клон можно было повесить рядом с оригиналом.
        Потомки докладывают свои списки/словари/детей в _copy_into().
        """
        clone = shallow_copy(self)
        clone.f_owner = None
        clone.classes = list(self.classes)
        clone.html_head_entry_set = THtmlHeadEntrySet(self.html_head_entry_set)
        clone.__dict__.pop("_auto_counters", None)
        if id_suffix and clone.id is not None:
            clone.id = f"{clone.id}{id_suffix}"
        self._copy_into(clone, id_suffix)
        return clone
    # ---
    def _copy_into(self, clone: "TUIObject", id_suffix: str):
        pass
    # ---
    def __repr__(self):
        return f"<{self.__class__.__name__} id={self.id!r}>"
# 📁🌄 zp_sys.py 🜂 The End — See You Next Session 2025
