"""URL 정규화 유틸 테스트"""
from src.utils.url_utils import SITE_ORIGIN, normalize_href


class TestNormalizeHref:
    """href → 절대 URL"""

    def test_root_relative_gets_site_origin(self):
        assert normalize_href("/dog-breeds/beagle/") == "https://www.akc.org/dog-breeds/beagle/"

    def test_protocol_relative_gets_https(self):
        assert normalize_href("//cdn.akc.org/img/beagle.jpg") == "https://cdn.akc.org/img/beagle.jpg"

    def test_absolute_unchanged(self):
        url = "https://www.akc.org/dog-breeds/boxer/"
        assert normalize_href(url) == url
        assert normalize_href("http://example.com/a") == "http://example.com/a"

    def test_other_schemes_unchanged(self):
        """data: URI는 그대로"""
        assert normalize_href("data:image/gif;base64,R0lGOD") == "data:image/gif;base64,R0lGOD"

    def test_relative_without_leading_slash_resolved(self):
        assert normalize_href("wp-content/x.jpg") == "https://www.akc.org/wp-content/x.jpg"
        assert normalize_href("../dog-breeds/x/") == "https://www.akc.org/dog-breeds/x/"
        assert normalize_href("beagle.jpg", base_url="https://example.com") == "https://example.com/beagle.jpg"

    def test_empty_and_blank(self):
        assert normalize_href("") == ""
        assert normalize_href("   ") == ""

    def test_custom_base_trailing_slash(self):
        assert normalize_href("/x", base_url="https://example.com/") == "https://example.com/x"

    def test_default_origin(self):
        assert SITE_ORIGIN == "https://www.akc.org"
