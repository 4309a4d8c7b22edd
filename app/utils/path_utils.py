from typing import Optional


def join_path(parent_path: Optional[str], name: str) -> str:
    # "/" + "a" must give "/a", not "//a"
    if parent_path is None:
        return name
    return f"{parent_path.rstrip('/')}/{name}"


def resolve_file_path(name: str, folder_path: Optional[str]) -> str:
    """Path of a file placed in a folder; an unfiled file's path is its bare name."""
    return join_path(folder_path, name)


def resolve_folder_path(name: str, parent_path: Optional[str]) -> str:
    """Path of a folder under ``parent_path``; root folders live at "/<name>"."""
    if parent_path is None:
        return f"/{name}"
    return join_path(parent_path, name)
