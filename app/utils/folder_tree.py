from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional


def _field(folder: Any, name: str):
    if isinstance(folder, dict):
        return folder[name]
    return getattr(folder, name)


def index_by_parent(folders: Iterable[Any]) -> Dict[Optional[int], List[Any]]:
    """Group folders by parent_id, keeping their input order within each group."""
    children = defaultdict(list)
    for folder in folders:
        children[_field(folder, "parent_id")].append(folder)
    return children


def iter_descendants(children: Dict[Optional[int], List[Any]], folder_id: int):
    """Yield every folder below ``folder_id``, parents before their children."""
    seen = {folder_id}
    stack = list(reversed(children.get(folder_id, [])))
    while stack:
        folder = stack.pop()
        if _field(folder, "id") in seen:
            continue
        seen.add(_field(folder, "id"))
        yield folder
        stack.extend(reversed(children.get(_field(folder, "id"), [])))


def build_folder_tree(folders: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    Build a nested folder tree from flat rows.

    Rows may be ORM objects or dicts with at least ``id`` and ``parent_id``;
    each becomes a dict of its columns plus a ``children`` list. Roots are
    the rows whose parent_id is None. Rows whose parent is missing are never
    reached, so orphaned subtrees are left out of the result. Sibling order
    follows the input order (callers pass folders sorted by path).
    """
    children = index_by_parent(folders)

    roots = [_to_node(folder) for folder in children.get(None, [])]
    stack = list(roots)
    while stack:
        node = stack.pop()
        node["children"] = [_to_node(child) for child in children.get(node["id"], [])]
        stack.extend(node["children"])
    return roots


def _to_node(folder: Any) -> Dict[str, Any]:
    if isinstance(folder, dict):
        node = {key: value for key, value in folder.items() if key != "children"}
    elif hasattr(folder, "__table__"):
        node = {
            column.key: getattr(folder, column.key)
            for column in folder.__table__.columns
        }
    else:
        node = {key: value for key, value in vars(folder).items() if key != "children"}
    node["children"] = []
    return node


def flatten_folder_tree(tree: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Inverse of build_folder_tree: pre-order list of nodes without ``children``."""
    flat = []
    stack = list(reversed(tree))
    while stack:
        node = stack.pop()
        flat.append({key: value for key, value in node.items() if key != "children"})
        stack.extend(reversed(node.get("children", [])))
    return flat
