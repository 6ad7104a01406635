# ======================================================================================================================
# 📁 file        : zp_tree.py — Рекурсивное n-арное дерево для иерархических наборов опций
# 🕒 created     : 24.10.2025 16:30
# 🎉 contains    : TTreeNode, TDataTreeNode
# 🌅 project     : Zap Core 2025 🜂
# ======================================================================================================================
# 🚢 ...imports...
from __future__ import annotations
import weakref
from typing import Any, Iterator
from zp_sys import *
# 💎🧩⚙️ ... __ALL__ ...
__all__ = ["TTreeNode", "TDataTreeNode"]
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TTreeNode — узел дерева
# ----------------------------------------------------------------------------------------------------------------------
class TTreeNode(TObject):
    # ⚡🛠️ ▸ __init__
    def __init__(self):
        """
        Узел дерева.
        💠 владеет своими Children, на родителя смотрит слабой ссылкой,
        index — порядковый номер среди детей родителя, выдаётся при add_child()
        и остаётся верным, пока порядок детей не меняют.
        """
        self.Children: list[TTreeNode] = []
        self.f_parent: weakref.ref | None = None
        self.index: int = 0
        # ⚡🛠️ TTreeNode ▸ End of __init__
    # ..................................................................................................................
    # 👨‍👩‍👧‍👧 Родословная
    # ..................................................................................................................
    @property
    def Parent(self) -> "TTreeNode | None":
        return None if self.f_parent is None else self.f_parent()
    # ---
    def get_parent(self) -> "TTreeNode | None":
        return self.Parent
    # ---
    def get_index(self) -> int:
        return self.index
    # ---
    def add_child(self, child: "TTreeNode") -> "TTreeNode":
        if child.Parent is not None:
            self.fail("add_child", "node already has a parent")
        node = self
        while node is not None:
            if node is child:
                self.fail("add_child", "a node cannot be added below itself")
            node = node.Parent
        child.f_parent = weakref.ref(self)
        child.index = len(self.Children)
        self.Children.append(child)
        return child
    # ---
    def add_tree(self, tree: "TTreeNode"):
        """Переносит детей tree (без самого корня tree) под этот узел."""
        children = list(tree.Children)
        tree.Children = []
        for child in children:
            child.f_parent = None
            self.add_child(child)
    # ---
    def get_children(self) -> list["TTreeNode"]:
        return list(self.Children)
    # ---
    def has_children(self) -> bool:
        return len(self.Children) > 0
    # ---
    def get_path(self) -> list[int]:
        """Индексы от корня до узла включительно: [0, 2, 1]."""
        path = [self.index]
        parent = self.Parent
        while parent is not None:
            path.append(parent.index)
            parent = parent.Parent
        path.reverse()
        return path
    # ---
    def get_index_path(self, separator: str = ".") -> str:
        return separator.join(str(i) for i in self.get_path())
    # ..................................................................................................................
    # 🔍 Обход
    # ..................................................................................................................
    def __iter__(self) -> Iterator["TTreeNode"]:
        return iter(self.Children)
    # ---
    def iter_tree(self) -> Iterator["TTreeNode"]:
        yield self
        for child in self.Children:
            yield from child.iter_tree()
    # ---
    def count(self) -> int:
        """Размер поддерева вместе с самим узлом."""
        return 1 + sum(child.count() for child in self.Children)
    # ---
    def __len__(self) -> int:
        return self.count()
    # ---
    def __bool__(self) -> bool:
        return True
# ----------------------------------------------------------------------------------------------------------------------
# 🧩 TDataTreeNode — узел с value / title
# ----------------------------------------------------------------------------------------------------------------------
class TDataTreeNode(TTreeNode):
    def __init__(self, value: Any = None, title: str | None = None):
        super().__init__()
        self.value = value
        self.title = title

    def __repr__(self):
        return f"<TDataTreeNode value={self.value!r} title={self.title!r}>"
# 📁🌄 zp_tree.py 🜂 The End — See You Next Session 2025
