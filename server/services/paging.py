"""Shared pagination helper for the entity services."""

from typing import List, Optional, Tuple, Type, TypeVar

from domain.persistable import Persistable
from domain.view_models import Pager
from repositories.base import DataAccess

T = TypeVar("T", bound=Persistable)


def fetch_page(
    data_access: DataAccess, entity_type: Type[T], page_index: int, page_size: int, sort_by: Optional[str] = None
) -> Tuple[int, int, List[T]]:
    """
    Load one page of entities.

    Args:
        data_access: Data access to read from
        entity_type: Entity class to list
        page_index: Requested 1-based page; clamped into the valid range
        page_size: Entities per page
        sort_by: Field to sort ascending by

    Returns:
        Tuple of (effective page index, total count, entities on the page)
    """
    total = data_access.count(entity_type)
    page_index = Pager.clamp_page_index(page_index, page_size, total)
    items = data_access.list_page(entity_type, skip=(page_index - 1) * page_size, limit=page_size, sort_by=sort_by)
    return page_index, total, items
