"""Integrity checks for adventure documents."""

from __future__ import annotations

from .markup import DataNode

START_ENTRY = "1"


def _ids(root: DataNode, tag: str, errors: list[str]) -> set[str]:
    seen: set[str] = set()
    for node in root.children:
        if node.name.lower() != tag:
            continue
        node_id = node.get_string("id")
        if not node_id:
            errors.append(f"<{tag}> element without 'id'")
            continue
        if node_id in seen:
            errors.append(f"Duplicate {tag} id '{node_id}'")
        seen.add(node_id)
    return seen


def _check_contains(owner: str, node: DataNode, items: set[str], errors: list[str]) -> None:
    item_id = node.get_string("item")
    if not item_id:
        errors.append(f"{owner} has <contains> without 'item'")
    elif item_id not in items:
        errors.append(f"{owner} contains missing item '{item_id}'")
    raw = node.get_string("ammount", node.get_string("amount"))
    if raw is not None:
        try:
            amount = int(raw)
        except ValueError:
            errors.append(f"{owner} has invalid amount '{raw}' for item '{item_id}'")
        else:
            if amount < 1:
                errors.append(f"{owner} has invalid amount '{raw}' for item '{item_id}' (must be positive integer)")


def _check_commands(owner: str, node: DataNode, areas: set[str], errors: list[str]) -> None:
    for child in node.children:
        tag = child.name.lower()
        if tag == "enter":
            target = child.get_string("area")
            if not target:
                errors.append(f"{owner} has <enter> without 'area'")
            elif target not in areas:
                errors.append(f"{owner} enters missing area '{target}'")
        elif tag in ("select", "option"):
            _check_commands(owner, child, areas, errors)


def validate_document(root: DataNode) -> list[str]:
    """Validate cross references inside an adventure document and return error messages."""

    errors: list[str] = []
    if root.name != "adventure":
        return [f"Root element must be <adventure>, got <{root.name}>"]

    entries = _ids(root, "entry", errors)
    areas = _ids(root, "area", errors)
    items = _ids(root, "item", errors)

    if START_ENTRY not in entries:
        errors.append(f"Start entry '{START_ENTRY}' does not exist")

    for node in root.children:
        tag = node.name.lower()
        if tag == "item":
            if not node.get_string("name"):
                errors.append(f"Item '{node.get_string('id')}' has no name")
        elif tag == "entry":
            _check_commands(f"Entry '{node.get_string('id')}'", node, areas, errors)
        elif tag == "area":
            area_id = node.get_string("id")
            owner = f"Area '{area_id}'"
            for child in node.children:
                if child.name == "contains":
                    _check_contains(owner, child, items, errors)
                elif child.name == "connects":
                    target = child.get_string("to")
                    direction = child.get_string("dir")
                    if not target:
                        errors.append(f"{owner} has <connects> without 'to'")
                    elif target not in areas:
                        errors.append(f"{owner} connects to missing area '{target}'")
                    if not direction:
                        errors.append(f"{owner} connection to '{target}' has no direction")
                    if not child.get_string("type"):
                        errors.append(f"{owner} connection to '{target}' has no type")
                    key = child.get_string("key")
                    if key and key not in items:
                        errors.append(f"{owner} connection [{direction}] requires missing key item '{key}'")
                elif child.name == "prop":
                    prop_name = child.get_string("name")
                    if not prop_name:
                        errors.append(f"{owner} has <prop> without 'name'")
                    for sub in child.children:
                        if sub.name == "contains":
                            _check_contains(f"Prop '{prop_name}' in area '{area_id}'", sub, items, errors)

    return errors


__all__ = ["START_ENTRY", "validate_document"]
