"""Tests for upload utility functions."""

from blogdesk.core.modules.upload.utils import build_asset_path, build_raw_url, sanitize_filename


class TestSanitizeFilename:
    """Tests for sanitize_filename function."""

    def test_normal_filename_unchanged(self):
        assert sanitize_filename("cover.png") == "cover.png"
        assert sanitize_filename("diagram_v2.svg") == "diagram_v2.svg"

    def test_multiple_spaces_collapsed(self):
        assert sanitize_filename("my    screenshot.png") == "my screenshot.png"

    def test_path_traversal_stripped(self):
        assert sanitize_filename("../../../etc/passwd") == "passwd"
        assert sanitize_filename("../.github/workflows/ci.yml") == "ci.yml"

    def test_leading_dots_removed(self):
        assert sanitize_filename(".env") == "env"
        assert sanitize_filename("...notes.md") == "notes.md"

    def test_dangerous_characters_replaced(self):
        assert sanitize_filename("img:1.png") == "img_1.png"
        assert sanitize_filename("what?*.jpg") == "what_.jpg"
        assert sanitize_filename("a|b.gif") == "a_b.gif"

    def test_long_filename_preserves_extension(self):
        result = sanitize_filename("photo_" * 30 + ".jpeg")
        assert len(result) <= 100
        assert result.endswith(".jpeg")
        assert result.startswith("photo_")

    def test_long_filename_without_extension(self):
        assert sanitize_filename("x" * 150) == "x" * 100

    def test_only_special_characters(self):
        assert sanitize_filename("???") == "unnamed_file"
        assert sanitize_filename("...") == "unnamed_file"
        assert sanitize_filename("") == "unnamed_file"

    def test_unicode_letters_preserved(self):
        assert sanitize_filename("封面.png") == "封面.png"


class TestBuildAssetPath:
    def test_timestamp_prefix(self):
        assert build_asset_path("cover.png", 1760860000000) == "assets/1760860000000-cover.png"

    def test_missing_filename(self):
        assert build_asset_path(None, 1760860000000) == "assets/1760860000000-file-1760860000000"
        assert build_asset_path("", 5) == "assets/5-file-5"

    def test_filename_is_sanitized(self):
        assert build_asset_path("../secret.txt", 7) == "assets/7-secret.txt"


class TestBuildRawUrl:
    def test_url(self):
        url = build_raw_url("octo/blog", "main", "assets/1-cover.png")
        assert url == "https://raw.githubusercontent.com/octo/blog/main/assets/1-cover.png"

    def test_spaces_are_quoted(self):
        url = build_raw_url("octo/blog", "main", "assets/1-my cover.png")
        assert url == "https://raw.githubusercontent.com/octo/blog/main/assets/1-my%20cover.png"
