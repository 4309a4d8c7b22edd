from app.utils.path_utils import join_path, resolve_file_path, resolve_folder_path


class TestResolveFilePath:
    """Test cases for file repathing"""

    def test_unfiled_file_path_is_its_name(self):
        """No folder means the path is the bare file name"""
        assert resolve_file_path("report.pdf", None) == "report.pdf"

    def test_file_in_folder(self):
        """Folder path and file name are joined with a slash"""
        assert resolve_file_path("report.pdf", "/Documents/Work") == "/Documents/Work/report.pdf"

    def test_file_in_root_folder_has_single_slash(self):
        """A folder whose path is "/" does not produce a double slash"""
        assert resolve_file_path("readme.md", "/") == "/readme.md"


class TestResolveFolderPath:
    """Test cases for folder repathing"""

    def test_root_level_folder(self):
        """A folder without parent lives at /<name>"""
        assert resolve_folder_path("Archive", None) == "/Archive"

    def test_nested_folder(self):
        """A sub folder is its parent's path plus its own name"""
        assert resolve_folder_path("Work", "/Documents") == "/Documents/Work"

    def test_join_path_strips_trailing_slash(self):
        """Trailing slashes on the parent are collapsed"""
        assert join_path("/Documents/", "Work") == "/Documents/Work"
