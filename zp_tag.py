# ======================================================================================================================
# 📁 file        : zp_tag.py — HTML-тег, контекст рендера и набор head-записей
# 🕒 created     : 14.10.2025 18:05
# 🎉 contains    : minimize_entities, THtmlTag, TRenderContext, THtmlHeadEntry, THtmlHeadEntrySet
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping
# 💎🧩⚙️ ... __ALL__ ...
__all__ = [
    "minimize_entities", "THtmlTag", "TRenderContext",
    "THtmlHeadEntry", "THtmlHeadEntrySet",
    "HEAD_STYLE", "HEAD_SCRIPT", "HEAD_COMMENT",
    "CONTENT_PLAIN", "CONTENT_XML",
]
# 💎 ... CONFIG / CONSTS ...
CONTENT_PLAIN = "text/plain"
CONTENT_XML = "text/xml"
# ---
HEAD_STYLE = "style"
HEAD_SCRIPT = "script"
HEAD_COMMENT = "comment"
# ---
# & который НЕ начинает уже готовую сущность (&amp; &#160; &#xA0;)
_AMP_RE = re.compile(r"&(?!(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);)")
# 🍍 ... global utilities ...
def minimize_entities(text: Any) -> str:
    """
    Экранирует &, <, >, " не трогая уже готовые сущности.
    'a & b' → 'a &amp; b', '&amp;' → '&amp;'
    """
    if text is None:
        return ""
    s = _AMP_RE.sub("&amp;", str(text))
    return s.replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TRenderContext — приёмник разметки одного прохода display()
# ----------------------------------------------------------------------------------------------------------------------
class TRenderContext:
    # ⚡🛠️ ▸ __init__
    def __init__(self, parent: "TRenderContext | None" = None):
        """
        Приёмник разметки одного прохода display().
        💠 Canvas — список строк (как у TCustomControl),
        emitted — маркеры «уже напечатано» (живут ровно один проход рендера),
        head — собранные head-записи (CSS/JS), которые отдаст страница.
        Дочерний контекст (child()) пишет в свой Canvas, но делит emitted и head с родителем.
        """
        self.Canvas: list[str] = []
        if parent is None:
            self.emitted: set[str] = set()
            self.head = THtmlHeadEntrySet()
        else:
            self.emitted = parent.emitted
            self.head = parent.head
        # ⚡🛠️ TRenderContext ▸ End of __init__
    # ..................................................................................................................
    # 🎨 Вывод
    # ..................................................................................................................
    def text(self, html: Any):
        self.Canvas.append(str(html))
    # ---
    def html(self) -> str:
        return "".join(self.Canvas)
    # ---
    def child(self) -> "TRenderContext":
        """Отдельный буфер (аналог ob_start) с общими флагами и head."""
        return TRenderContext(self)
    # ---
    def inline_java_script(self, code: str | None):
        if not code:
            return
        self.text(f'<script type="text/javascript">\n//<![CDATA[\n{code}\n//]]>\n</script>')
    # ..................................................................................................................
    # 🏁 Print-once флаги
    # ..................................................................................................................
    def once(self, marker: str) -> bool:
        """
        True только при первом вызове с этим маркером в пределах прохода.
        Пример: общие JS-строки CheckAll печатаются один раз на страницу.
        """
        if marker in self.emitted:
            return False
        self.emitted.add(marker)
        return True
    # ---
    def was_emitted(self, marker: str) -> bool:
        return marker in self.emitted
    # ---
    def __repr__(self):
        return f"<TRenderContext chunks={len(self.Canvas)} emitted={sorted(self.emitted)}>"
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 THtmlTag — мешок атрибутов + контент
# ----------------------------------------------------------------------------------------------------------------------
class THtmlTag:
    # ⚡🛠️ ▸ __init__
    def __init__(self, tag_name: str, attributes: Mapping[str, Any] | None = None):
        self.tag_name = tag_name
        self.attributes: dict[str, Any] = {}
        self.content: str | None = None
        self.content_type: str = CONTENT_PLAIN
        if attributes:
            self.add_attributes(attributes)
        # ⚡🛠️ THtmlTag ▸ End of __init__
    # ..................................................................................................................
    # 🏷️ Атрибуты
    # ..................................................................................................................
    def __getitem__(self, name: str) -> Any:
        return self.attributes.get(name)
    # ---
    def __setitem__(self, name: str, value: Any):
        self.attributes[name] = value
    # ---
    def __delitem__(self, name: str):
        self.remove_attribute(name)
    # ---
    def __contains__(self, name: str) -> bool:
        return self.attributes.get(name) is not None
    # ---
    def get(self, name: str, default: Any = None) -> Any:
        value = self.attributes.get(name)
        return default if value is None else value
    # ---
    def set(self, name: str, value: Any) -> "THtmlTag":
        self.attributes[name] = value
        return self
    # ---
    def add_attributes(self, attributes: Mapping[str, Any]):
        for name, value in attributes.items():
            self.attributes[name] = value
    # ---
    def remove_attribute(self, name: str):
        self.attributes.pop(name, None)
    # ---
    def set_content(self, content: Any, content_type: str = CONTENT_PLAIN):
        self.content = None if content is None else str(content)
        self.content_type = content_type
    # ..................................................................................................................
    # 🎨 Рендеринг
    # ..................................................................................................................
    def display(self, ctx: TRenderContext):
        if self.content is None:
            ctx.text(f"<{self.tag_name}{self._attribute_string()} />")
        else:
            self.open(ctx)
            self.display_content(ctx)
            self.close(ctx)
    # ---
    def display_content(self, ctx: TRenderContext):
        if self.content is None:
            return
        if self.content_type == CONTENT_PLAIN:
            ctx.text(minimize_entities(self.content))
        else:
            ctx.text(self.content)
    # ---
    def open(self, ctx: TRenderContext):
        ctx.text(f"<{self.tag_name}{self._attribute_string()}>")
    # ---
    def close(self, ctx: TRenderContext):
        ctx.text(f"</{self.tag_name}>")
    # ---
    def to_string(self) -> str:
        ctx = TRenderContext()
        self.display(ctx)
        return ctx.html()
    # ---
    def __str__(self):
        return self.to_string()
    # ---
    def __repr__(self):
        return f"<THtmlTag {self.tag_name} attrs={self.attributes!r}>"
    # ---
    def _attribute_string(self) -> str:
        parts = []
        for name, value in self.attributes.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                value = " ".join(str(v) for v in value if v)
            elif isinstance(value, bool):
                value = name if value else None
                if value is None:
                    continue
            parts.append(f' {name}="{minimize_entities(value)}"')
        return "".join(parts)
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 THtmlHeadEntry — одна запись <head> (CSS / JS / комментарий)
# ----------------------------------------------------------------------------------------------------------------------
@dataclass(frozen=True)
class THtmlHeadEntry:
    uri: str
    kind: str = HEAD_SCRIPT
    package_id: str | None = None

    @property
    def key(self) -> str:
        return f"{self.kind}:{self.uri}"

    def display(self, ctx: TRenderContext, prefix: str = ""):
        if self.kind == HEAD_STYLE:
            ctx.text(f'<link rel="stylesheet" type="text/css" href="{minimize_entities(prefix + self.uri)}" />\n')
        elif self.kind == HEAD_SCRIPT:
            ctx.text(f'<script type="text/javascript" src="{minimize_entities(prefix + self.uri)}"></script>\n')
        else:
            ctx.text(f"<!-- {self.uri} -->\n")
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 THtmlHeadEntrySet — накопитель ассетов (дедуп по uri)
# ----------------------------------------------------------------------------------------------------------------------
class THtmlHeadEntrySet:
    # порядок вывода: стили → скрипты → комментарии
    _WEIGHT = {HEAD_STYLE: 100, HEAD_SCRIPT: 200, HEAD_COMMENT: 300}

    # ⚡🛠️ ▸ __init__
    def __init__(self, source: "THtmlHeadEntrySet | Iterable[THtmlHeadEntry] | None" = None):
        self.entries: dict[str, THtmlHeadEntry] = {}
        if source is not None:
            self.add_entry_set(source)
        # ⚡🛠️ THtmlHeadEntrySet ▸ End of __init__
    # ---
    def add_entry(self, entry: THtmlHeadEntry):
        if entry.key not in self.entries:
            self.entries[entry.key] = entry
    # ---
    def add_entry_set(self, entries: "THtmlHeadEntrySet | Iterable[THtmlHeadEntry]"):
        for entry in entries:
            self.add_entry(entry)
    # ---
    def get_by_type(self, kind: str) -> list[THtmlHeadEntry]:
        return [e for e in self.entries.values() if e.kind == kind]
    # ---
    def __iter__(self) -> Iterator[THtmlHeadEntry]:
        return iter(list(self.entries.values()))
    # ---
    def __len__(self) -> int:
        return len(self.entries)
    # ---
    def __contains__(self, uri: str) -> bool:
        return any(e.uri == uri for e in self.entries.values())
    # ---
    def display(self, ctx: TRenderContext, prefix: str = ""):
        ordered = sorted(enumerate(self.entries.values()), key=lambda ie: (self._WEIGHT.get(ie[1].kind, 900), ie[0]))
        for _, entry in ordered:
            entry.display(ctx, prefix)
    # ---
    def __repr__(self):
        return f"<THtmlHeadEntrySet {len(self)} entries>"
# 📁🌄 zp_tag.py 🜂 The End — See You Next Session 2025
