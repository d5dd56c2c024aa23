"""Immutable documents returned by references."""

from typing import Annotated, Union

from pydantic import Field

from docs_client.entities.index_entity import IndexEntity
from docs_client.entities.md_entity import MdEntity
from docs_client.entities.unknown_entity import UnknownEntity

Document = Annotated[Union[IndexEntity, MdEntity, UnknownEntity], Field(discriminator="type")]

__all__ = ["Document", "IndexEntity", "MdEntity", "UnknownEntity"]
