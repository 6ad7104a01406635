# ======================================================================================================================
# 📁 file        : zp_cell.py — Cell-рендереры: маппинги полей строки, набор рендереров, контейнер
# 🕒 created     : 10.11.2025 09:35
# 🎉 contains    : TCellRendererMapping, TCellRenderer, TCellRendererSet, TCellRendererContainer
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
import re
from dataclasses import dataclass, replace
from typing import Any, Iterable, Iterator, Mapping
from zp_sys import *
from zp_tag import TRenderContext, THtmlHeadEntrySet
from zp_message import TMessage
from zp_ctrl_mixin import TUIParentMixin
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TCellRendererMapping", "TCellRenderer", "TCellRendererSet", "TCellRendererContainer", "row_value"]
# 💎 ... CONFIG / CONSTS ...
NEGATION_PREFIX = "!"
_CAMEL_RE = re.compile(r"(?<!^)([A-Z])")
# 🍍 ... global utilities ...
def row_value(row: Any, field: str) -> Any:
    """
    Значение поля строки данных: атрибут объекта или ключ словаря.
    Нет поля → ENotFoundError.
    """
    if isinstance(row, Mapping):
        if field in row:
            return row[field]
    elif hasattr(row, field):
        return getattr(row, field)
    raise ENotFoundError(f"row_value(): data row {row!r} has no field '{field}'")
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TCellRendererMapping — свойство рендерера ← поле строки
# ----------------------------------------------------------------------------------------------------------------------
@dataclass(eq=False)
class TCellRendererMapping:
    """
    property  — имя свойства рендерера,
    field     — имя поля строки ('!field' → логическое отрицание значения),
    is_array  — несколько полей собираются в одно свойство-массив,
    array_key — ключ в этом массиве (None → дописывать в конец).
    """
    property: str
    field: str
    is_array: bool = False
    array_key: Any = None

    def copy(self) -> "TCellRendererMapping":
        return replace(self)
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TCellRenderer — рисует одно значение в ячейке, переиспользуется для всех строк
# ----------------------------------------------------------------------------------------------------------------------
class TCellRenderer(TUIObject):
    # свойства, которые нельзя привязать к полям строки
    STATIC_PROPERTIES: tuple[str, ...] = ()

    # ⚡🛠️ ▸ __init__
    def __init__(self):
        """
        Базовый cell-рендерер.
        💠 создаётся один раз на колонку/поле, свойства перезаписываются маппингами на каждой строке.
        render_count > 0 означает «рендерер реально рисовал»: только тогда отдаются его head-записи.
        parent_sensitive выставляет колонка/поле перед каждой строкой (чувствительность view).
        """
        super().__init__()
        self.sensitive: bool = True
        self.parent_sensitive: bool = True
        self.static_properties: list[str] = list(self.STATIC_PROPERTIES)
        self.render_count: int = 0
        self.composite_renderers: dict[str, TCellRenderer] = {}
        self._composite_renderers_created: bool = False
        # ⚡🛠️ TCellRenderer ▸ End of __init__
    # ..................................................................................................................
    # 🚀 Жизненный цикл
    # ..................................................................................................................
    def init(self):
        for renderer in self.get_composite_renderers().values():
            renderer.init()
    # ---
    def process(self):
        for renderer in self.get_composite_renderers().values():
            renderer.process()
    # ---
    def render(self, ctx: TRenderContext):
        self.render_count += 1
    # ---
    def is_sensitive(self) -> bool:
        return self.sensitive and self.parent_sensitive
    # ---
    def get_messages(self) -> list[TMessage]:
        return []
    # ---
    def has_message(self) -> bool:
        return False
    # ---
    def get_property_name_to_map(self, obj: Any, name: str) -> str:
        return name
    # ---
    def get_inline_java_script(self) -> str:
        return ""
    # ..................................................................................................................
    # 🧊 Статические свойства
    # ..................................................................................................................
    def make_property_static(self, name: str):
        """
        Запрещает маппинг свойства. Свойство должно существовать и быть публичным полем.
        """
        if name.startswith("_") or not hasattr(self, name):
            self.fail("make_property_static", f"can not make non-existent property '{name}' static",
                      EInvalidPropertyError)
        if callable(getattr(self, name)):
            self.fail("make_property_static", f"'{name}' is not a public data property and cannot be made static",
                      EInvalidPropertyError)
        if name not in self.static_properties:
            self.static_properties.append(name)
    # ---
    def is_property_static(self, name: str) -> bool:
        return name in self.static_properties
    # ..................................................................................................................
    # 🎨 CSS-классы
    # ..................................................................................................................
    def get_inheritance_css_class_names(self) -> list[str]:
        """
        Классы по цепочке наследования от базового к конкретному:
        TCheckboxCellRenderer → ['zap-selector-cell-renderer', 'zap-checkbox-cell-renderer'].
        """
        names = []
        for cls in reversed(type(self).__mro__):
            if not issubclass(cls, TCellRenderer) or cls is TCellRenderer:
                continue
            raw = cls.__name__[1:] if cls.__name__.startswith("T") else cls.__name__
            names.append(zp_class(_CAMEL_RE.sub(r"-\1", raw).lower()))
        return names
    # ---
    def get_base_css_class_names(self) -> list[str]:
        return []
    # ---
    def get_data_specific_css_class_names(self) -> list[str]:
        return []
    # ---
    def get_html_head_entry_set(self) -> THtmlHeadEntrySet:
        if self.render_count > 0:
            entries = THtmlHeadEntrySet(self.html_head_entry_set)
        else:
            entries = THtmlHeadEntrySet()
        for renderer in self.get_composite_renderers().values():
            entries.add_entry_set(renderer.get_html_head_entry_set())
        return entries
    # ..................................................................................................................
    # 🧩 Композитные рендереры
    # ..................................................................................................................
    def create_composite_renderers(self):
        pass
    # ---
    def confirm_composite_renderers(self):
        if not self._composite_renderers_created:
            self._composite_renderers_created = True
            self.create_composite_renderers()
    # ---
    def add_composite_renderer(self, renderer: "TCellRenderer", key: str):
        if key in self.composite_renderers:
            self.fail("add_composite_renderer", f"a composite renderer with the key '{key}' already exists",
                      EDuplicateIdError)
        if renderer.Owner is not None:
            self.fail("add_composite_renderer", "cannot add a composite renderer that already has a parent")
        self.composite_renderers[key] = renderer
        renderer.Owner = self
    # ---
    def get_composite_renderer(self, key: str) -> "TCellRenderer":
        self.confirm_composite_renderers()
        if key not in self.composite_renderers:
            self.fail("get_composite_renderer", f"composite renderer with key of '{key}' not found",
                      EWidgetNotFoundError)
        return self.composite_renderers[key]
    # ---
    def get_composite_renderers(self, kind: Any = None) -> dict[str, "TCellRenderer"]:
        self.confirm_composite_renderers()
        return {key: r for key, r in self.composite_renderers.items() if is_kind(r, kind)}
    # ---
    def iter_children(self):
        yield from self.get_composite_renderers().values()
    # ..................................................................................................................
    # ♻️ Копирование
    # ..................................................................................................................
    def _copy_into(self, clone: "TCellRenderer", id_suffix: str):
        super()._copy_into(clone, id_suffix)
        clone.static_properties = list(self.static_properties)
        clone.composite_renderers = {}
        for key, renderer in self.composite_renderers.items():
            renderer_copy = renderer.copy(id_suffix)
            renderer_copy.Owner = clone
            clone.composite_renderers[key] = renderer_copy
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TCellRendererSet — упорядоченные рендереры + их маппинги
# ----------------------------------------------------------------------------------------------------------------------
class TCellRendererSet(TObject):
    # ⚡🛠️ ▸ __init__
    def __init__(self):
        """
        Набор рендереров.
        💠 каждый рендерер при добавлении получает слот в арене (порядок слотов = порядок рендера),
        таблица маппингов живёт по тому же слоту и заводится/удаляется вместе с рендерером.
        """
        self.f_arena: dict[int, TCellRenderer] = {}
        self.f_mappings: dict[int, list[TCellRendererMapping]] = {}
        self.renderers_by_id: dict[str, TCellRenderer] = {}
        self._next_slot: int = 0
        self._mappings_applied: bool = False
        # ⚡🛠️ TCellRendererSet ▸ End of __init__
    # ---
    def _slot_of(self, renderer: TCellRenderer, function: str) -> int:
        for slot, arena_renderer in self.f_arena.items():
            if arena_renderer is renderer:
                return slot
        self.fail(function, f"renderer {renderer!r} does not belong to this set", ENotFoundError)
    # ..................................................................................................................
    # ➕ Рендереры
    # ..................................................................................................................
    def add_renderer(self, renderer: TCellRenderer) -> int:
        slot = self._next_slot
        self._next_slot += 1
        self.f_arena[slot] = renderer
        self.f_mappings[slot] = []
        if renderer.id is not None:
            self.renderers_by_id[renderer.id] = renderer
        return slot
    # ---
    def add_renderer_with_mappings(self, renderer: TCellRenderer,
                                   mappings: Iterable[TCellRendererMapping] = ()):
        self.add_renderer(renderer)
        self.add_mappings_to_renderer(renderer, mappings)
    # ---
    def remove_renderer(self, renderer: TCellRenderer) -> TCellRenderer:
        slot = self._slot_of(renderer, "remove_renderer")
        del self.f_arena[slot]
        del self.f_mappings[slot]
        if renderer.id is not None and self.renderers_by_id.get(renderer.id) is renderer:
            del self.renderers_by_id[renderer.id]
        return renderer
    # ---
    def index_renderer(self, renderer: TCellRenderer):
        """Индексирует по id рендерер, получивший id после добавления (в init)."""
        self._slot_of(renderer, "index_renderer")
        if renderer.id is not None:
            self.renderers_by_id[renderer.id] = renderer
    # ..................................................................................................................
    # 🔗 Маппинги
    # ..................................................................................................................
    def add_mappings_to_renderer(self, renderer: TCellRenderer, mappings: Iterable[TCellRendererMapping] = ()):
        for mapping in mappings:
            self.add_mapping_to_renderer(renderer, mapping)
    # ---
    def add_mapping_to_renderer(self, renderer: TCellRenderer, mapping: TCellRendererMapping):
        if renderer.is_property_static(mapping.property):
            self.fail("add_mapping_to_renderer", f"the '{mapping.property}' property can not be data-mapped",
                      EInvalidPropertyError)
        slot = self._slot_of(renderer, "add_mapping_to_renderer")
        self.f_mappings[slot].append(mapping)
        # ... 🔊 ...
        self.debug("add_mapping_to_renderer", f"{renderer.__class__.__name__}.{mapping.property} ← {mapping.field}")
    # ---
    def get_mappings_by_renderer(self, renderer: TCellRenderer) -> list[TCellRendererMapping]:
        return list(self.f_mappings[self._slot_of(renderer, "get_mappings_by_renderer")])
    # ---
    def apply_mappings_to_renderer(self, renderer: TCellRenderer, row: Any):
        """
        Переносит поля строки в свойства рендерера по зарегистрированным маппингам.
        💠 массивные свойства инициализируются первым маппингом в этом вызове,
        следующие маппинги на то же свойство дописывают (или кладут по array_key).
        Набор «уже начатых» массивов живёт только в пределах вызова.
        """
        array_properties: set[str] = set()
        for mapping in self.f_mappings[self._slot_of(renderer, "apply_mappings_to_renderer")]:
            prop = mapping.property
            field = mapping.field
            if mapping.is_array:
                value = row_value(row, field)
                if prop in array_properties:
                    target = getattr(renderer, prop)
                    if mapping.array_key is None:
                        if isinstance(target, dict):
                            # следующий целый ключ после наибольшего
                            target[max((k for k in target if isinstance(k, int)), default=-1) + 1] = value
                        else:
                            target.append(value)
                    else:
                        if isinstance(target, list):
                            target = dict(enumerate(target))
                            setattr(renderer, prop, target)
                        target[mapping.array_key] = value
                else:
                    array_properties.add(prop)
                    if mapping.array_key is None:
                        setattr(renderer, prop, [value])
                    else:
                        setattr(renderer, prop, {mapping.array_key: value})
            elif field.startswith(NEGATION_PREFIX):
                setattr(renderer, prop, not row_value(row, field[len(NEGATION_PREFIX):]))
            else:
                setattr(renderer, prop, row_value(row, field))
        self._mappings_applied = True
    # ---
    def mappings_applied(self) -> bool:
        return self._mappings_applied
    # ..................................................................................................................
    # 🔍 Выборки
    # ..................................................................................................................
    def get_renderer_by_position(self, position: int = 0) -> TCellRenderer:
        renderers = list(self.f_arena.values())
        if 0 <= position < len(renderers):
            return renderers[position]
        self.fail("get_renderer_by_position", "set does not contain that many renderers", ENotFoundError)
    # ---
    def get_renderer(self, renderer_id: str) -> TCellRenderer:
        if renderer_id not in self.renderers_by_id:
            self.fail("get_renderer", f"cell renderer with an id of '{renderer_id}' not found", ENotFoundError)
        return self.renderers_by_id[renderer_id]
    # ---
    def get_first(self) -> TCellRenderer | None:
        for renderer in self.f_arena.values():
            return renderer
        return None
    # ---
    def __iter__(self) -> Iterator[TCellRenderer]:
        return iter(list(self.f_arena.values()))
    # ---
    def __len__(self) -> int:
        return len(self.f_arena)
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TCellRendererContainer — владелец набора рендереров (колонка таблицы, поле details-view)
# ----------------------------------------------------------------------------------------------------------------------
class TCellRendererContainer(TUIParentMixin, TUIObject):
    # ⚡🛠️ ▸ __init__
    def __init__(self, id: str | None = None):
        super().__init__()
        self.id = id
        self.renderers = TCellRendererSet()
        # ⚡🛠️ TCellRendererContainer ▸ End of __init__
    # ..................................................................................................................
    # ➕ Рендереры и маппинги
    # ..................................................................................................................
    def add_renderer(self, renderer: TCellRenderer) -> TCellRenderer:
        if renderer.Owner is not None:
            self.fail("add_renderer", f"{renderer.log_name()} already has a parent")
        self.renderers.add_renderer(renderer)
        renderer.Owner = self
        return renderer
    # ---
    def add_renderer_with_mappings(self, renderer: TCellRenderer,
                                   mappings: Iterable[TCellRendererMapping] = ()) -> TCellRenderer:
        self.add_renderer(renderer)
        self.renderers.add_mappings_to_renderer(renderer, mappings)
        return renderer
    # ---
    def add_mapping_to_renderer(self, renderer: TCellRenderer, data_field: str, property: str,
                                obj: Any = None, is_array: bool = False,
                                array_key: Any = None) -> TCellRendererMapping:
        """
        Регистрирует маппинг. Если передан obj, имя свойства уточняет сам рендерер,
        а созданный маппинг кладётся в obj под этим именем.
        """
        if obj is not None:
            property = renderer.get_property_name_to_map(obj, property)
        mapping = TCellRendererMapping(property, data_field, is_array, array_key)
        self.renderers.add_mapping_to_renderer(renderer, mapping)
        if obj is not None:
            setattr(obj, property, mapping)
        return mapping
    # ---
    def add_child(self, child: Any):
        if not isinstance(child, TCellRenderer):
            self.fail("add_child", f"only TCellRenderer objects may be nested within {self.__class__.__name__}. "
                                   f"Attempting to add '{child.__class__.__name__}'", EInvalidClassError)
        self.add_renderer(child)
    # ..................................................................................................................
    # 🔍 Выборки
    # ..................................................................................................................
    def get_renderers(self) -> list[TCellRenderer]:
        return list(self.renderers)
    # ---
    def get_renderer(self, renderer_id: str) -> TCellRenderer:
        return self.renderers.get_renderer(renderer_id)
    # ---
    def get_renderer_by_position(self, position: int = 0) -> TCellRenderer:
        return self.renderers.get_renderer_by_position(position)
    # ---
    def get_first_renderer(self) -> TCellRenderer | None:
        return self.renderers.get_first()
    # ---
    def iter_children(self):
        yield from self.renderers
    # ..................................................................................................................
    # 🚀 Жизненный цикл
    # ..................................................................................................................
    def init(self):
        for renderer in self.renderers:
            renderer.init()
            self.renderers.index_renderer(renderer)
    # ---
    def process(self):
        for renderer in self.renderers:
            renderer.process()
    # ---
    def apply_mappings(self, row: Any, sensitive: bool = True):
        """Готовит все рендереры к строке row."""
        for renderer in self.renderers:
            self.renderers.apply_mappings_to_renderer(renderer, row)
            renderer.parent_sensitive = sensitive
    # ---
    def get_html_head_entry_set(self) -> THtmlHeadEntrySet:
        entries = super().get_html_head_entry_set()
        for renderer in self.renderers:
            entries.add_entry_set(renderer.get_html_head_entry_set())
        return entries
    # ---
    def get_renderer_inline_java_script(self) -> str:
        scripts = [r.get_inline_java_script() for r in self.renderers]
        return "\n".join(s for s in scripts if s)
    # ---
    def get_renderer_css_class_names(self) -> list[str]:
        """Классы первого рендерера (data-specific только после применения маппингов)."""
        first = self.renderers.get_first()
        if first is None:
            return []
        classes = first.get_inheritance_css_class_names() + first.get_base_css_class_names()
        if self.renderers.mappings_applied():
            classes += first.get_data_specific_css_class_names()
        return classes + list(first.classes)
    # ..................................................................................................................
    # ♻️ Копирование
    # ..................................................................................................................
    def _copy_into(self, clone: "TCellRendererContainer", id_suffix: str):
        super()._copy_into(clone, id_suffix)
        clone.renderers = TCellRendererSet()
        for renderer in self.renderers:
            renderer_copy = renderer.copy(id_suffix)
            renderer_copy.Owner = clone
            clone.renderers.add_renderer_with_mappings(
                renderer_copy,
                [mapping.copy() for mapping in self.renderers.get_mappings_by_renderer(renderer)],
            )
# 📁🌄 zp_cell.py 🜂 The End — See You Next Session 2025
