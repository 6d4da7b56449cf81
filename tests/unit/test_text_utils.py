"""텍스트 정제 유틸리티 유닛 테스트"""
from src.utils.text import clean_markup_text, strip_markup_tags, unescape_extra_entities


class TestStripMarkupTags:
    """태그 제거 테스트"""

    def test_removes_inline_tags(self):
        assert strip_markup_tags("<p>Loyal <em>and</em> merry</p>") == "Loyal and merry"

    def test_removes_tags_with_attributes(self):
        assert strip_markup_tags('<a href="/x" class="y">link</a>') == "link"

    def test_plain_text_unchanged(self):
        assert strip_markup_tags("no markup") == "no markup"

    def test_empty(self):
        assert strip_markup_tags("") == ""


class TestUnescapeExtraEntities:
    """named entity 치환"""

    def test_known_entities(self):
        assert unescape_extra_entities("a&nbsp;b &amp; &quot;c&quot; d&#x27;s") == 'a b & "c" d\'s'

    def test_unknown_entities_left_alone(self):
        assert unescape_extra_entities("&lt;&eacute;") == "&lt;&eacute;"

    def test_empty(self):
        assert unescape_extra_entities("") == ""


class TestCleanMarkupText:
    """태그 제거 → entity 치환 → strip"""

    def test_full_pipeline(self):
        raw = "  <p>The Beagle&#x27;s nose&nbsp;is &quot;legendary&quot;.</p>\n"
        assert clean_markup_text(raw) == 'The Beagle\'s nose is "legendary".'

    def test_only_markup_becomes_empty(self):
        assert clean_markup_text("<p>&nbsp;</p>") == ""

    def test_entities_are_decoded_after_tag_strip(self):
        """&lt;b&gt;는 태그로 취급되지 않음"""
        assert clean_markup_text("&amp;lt;b&amp;gt;") == "&lt;b&gt;"
