"""Static menu data."""

from __future__ import annotations

from lunchtray.constant import ITEM_META_BY_ID as _ITEM_META_BY_ID_RAW
from lunchtray.constant import MENU_ITEM_IDS_BY_KIND
from lunchtray.errors import UnknownMenuItemError
from lunchtray.models import MenuItem, MenuKind

_KIND_BY_ITEM_ID: dict[str, MenuKind] = {
    item_id: MenuKind(kind) for kind, item_ids in MENU_ITEM_IDS_BY_KIND.items() for item_id in item_ids
}

MENU_ITEMS_BY_ID: dict[str, MenuItem] = {
    item_id: MenuItem(
        item_id=item_id,
        name=str(meta["name"]),
        description=str(meta["description"]),
        price=float(meta["price"]),
        kind=_KIND_BY_ITEM_ID[item_id],
        image=str(meta.get("image", "")),
    )
    for item_id, meta in _ITEM_META_BY_ID_RAW.items()
}

MENU_BY_KIND: dict[MenuKind, list[MenuItem]] = {
    MenuKind(kind): [MENU_ITEMS_BY_ID[item_id] for item_id in item_ids]
    for kind, item_ids in MENU_ITEM_IDS_BY_KIND.items()
}


def menu_for(kind: MenuKind) -> list[MenuItem]:
    """Return the options offered for one tray slot, in menu order."""
    return list(MENU_BY_KIND[kind])


def item_by_id(item_id: str) -> MenuItem:
    """Look up a catalog item, raising UnknownMenuItemError when missing."""
    try:
        return MENU_ITEMS_BY_ID[item_id]
    except KeyError:
        raise UnknownMenuItemError(item_id) from None


def display_name_for_item(item_id: str) -> str:
    """Get display name for an item id."""
    item = MENU_ITEMS_BY_ID.get(item_id)
    if item is None:
        return item_id
    return item.name
