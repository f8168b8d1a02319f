"""Tests for upload filename handling."""

from dossier.core.modules.upload.utils import (
    DEFAULT_UPLOAD_NAME,
    build_upload_filename,
    is_stored_filename,
    sanitize_filename,
)


class TestSanitizeFilename:
    """Tests for sanitize_filename function."""

    def test_normal_filename_unchanged(self):
        assert sanitize_filename("document.pdf") == "document.pdf"
        assert sanitize_filename("Zeugnis_2024-final.PDF") == "Zeugnis_2024-final.PDF"

    def test_spaces_and_umlauts_replaced(self):
        assert sanitize_filename("Arbeitszeugnis Müller.pdf") == "Arbeitszeugnis_M_ller.pdf"
        assert sanitize_filename("my   cv.pdf") == "my_cv.pdf"

    def test_path_components_dropped(self):
        assert sanitize_filename("../../../etc/passwd") == "passwd"
        assert sanitize_filename("C:\\Users\\me\\cv.pdf") == "cv.pdf"

    def test_leading_dots_removed(self):
        assert sanitize_filename(".hidden") == "hidden"
        assert sanitize_filename("...file.txt") == "file.txt"

    def test_surrounding_underscores_stripped(self):
        assert sanitize_filename("(copy).pdf") == "copy_.pdf"
        assert sanitize_filename("__a__b__") == "a_b"

    def test_empty_result_gets_default(self):
        assert sanitize_filename("") == DEFAULT_UPLOAD_NAME
        assert sanitize_filename("???") == DEFAULT_UPLOAD_NAME
        assert sanitize_filename("..") == DEFAULT_UPLOAD_NAME

    def test_long_filename_truncated_keeping_extension(self):
        result = sanitize_filename("a" * 150 + ".pdf")
        assert len(result) == 100
        assert result.endswith(".pdf")

    def test_long_filename_without_extension(self):
        assert sanitize_filename("b" * 150) == "b" * 100


def test_build_upload_filename_prefixes_timestamp():
    assert build_upload_filename("My CV.pdf", 1700000000000) == "1700000000000-My_CV.pdf"


class TestIsStoredFilename:
    def test_names_from_build_upload_filename(self):
        assert is_stored_filename(build_upload_filename("cv.pdf", 1700000000000))
        assert is_stored_filename(build_upload_filename("Arbeitszeugnis_" + "x" * 200 + ".pdf", 1700000000000))

    def test_unsafe_names(self):
        for name in ["", ".env", "..", "../secret.pdf", "a/b.pdf", "a\\b.pdf", "_x.pdf", "a b.pdf"]:
            assert not is_stored_filename(name)
