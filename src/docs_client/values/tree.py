"""Nodes of a display tree built from a document directory."""

from typing import List, Literal, Union

from pydantic import BaseModel


class TreeFileNode(BaseModel):
    type: Literal["file"] = "file"
    name: str
    path: str
    icon: str
    title: str


class TreeDirectoryNode(BaseModel):
    type: Literal["directory"] = "directory"
    name: str
    path: str
    icon: str
    title: str
    children: List["TreeNode"] = []

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def walk(self):
        """Yield this node's descendants depth first."""
        for child in self.children:
            yield child
            if isinstance(child, TreeDirectoryNode):
                yield from child.walk()


TreeNode = Union[TreeFileNode, TreeDirectoryNode]

TreeDirectoryNode.model_rebuild()
