import pytest

from anagramme import Dictionary, DictionaryError
from anagramme.dictionary import dictionary_path, load


@pytest.fixture
def resource_dir(tmp_path):
    (tmp_path / "fr.txt").write_text("chat\nchien\nniche\nÉlève\n", encoding="utf-8")
    return tmp_path


class TestDictionary:
    def test_contains(self):
        d = Dictionary(["chat", "chien", "niche"])
        assert d.contains("chat")
        assert d.contains("niche")
        assert "chien" in d
        assert not d.contains("cha")
        assert not d.contains("chats")
        assert not d.contains("")
        assert "nich" not in d

    def test_has_prefix(self):
        d = Dictionary(["chat", "chien", "niche"])
        assert d.has_prefix("c")
        assert d.has_prefix("ch")
        assert d.has_prefix("chi")
        # a word is a prefix of itself
        assert d.has_prefix("chat")
        assert d.has_prefix("")
        assert not d.has_prefix("chats")
        assert not d.has_prefix("x")
        assert not d.has_prefix("chx")

    def test_empty(self):
        d = Dictionary()
        assert len(d) == 0
        assert not d.has_prefix("")
        assert not d.has_prefix("a")
        assert not d.contains("")

    def test_nested_words(self):
        d = Dictionary(["a", "aa", "aaa"])
        assert d.contains("a")
        assert d.contains("aa")
        assert d.contains("aaa")
        assert not d.has_prefix("aaaa")

    def test_normalization(self):
        d = Dictionary(["Élève", "ÇA", "niche\n", "  chat  "])
        assert d.contains("eleve")
        assert d.contains("ca")
        assert d.contains("niche")
        assert d.contains("chat")
        assert not d.contains("Élève")

    def test_len(self):
        d = Dictionary(["chat", "Chat", "chat\n", "chien"])
        assert len(d) == 2

    def test_from_lines(self):
        d = Dictionary.from_lines(["chat\n", "\n", "chien\r\n", "niche"])
        assert len(d) == 3
        assert d.contains("chien")
        # the last line counts, even without a trailing newline
        assert d.contains("niche")
        assert not d.contains("")


class TestLoad:
    def test_dictionary_path(self, tmp_path):
        assert dictionary_path(tmp_path, "fr") == tmp_path / "fr.txt"
        assert dictionary_path(str(tmp_path), "EN") == tmp_path / "en.txt"

    def test_load(self, resource_dir):
        d = load(resource_dir, "fr")
        assert len(d) == 4
        assert d.contains("chat")
        assert d.contains("eleve")

    def test_load_language_case(self, resource_dir):
        assert len(load(str(resource_dir), "FR")) == 4

    def test_missing_file(self, resource_dir):
        with pytest.raises(DictionaryError) as err:
            load(resource_dir, "de")
        assert "de.txt" in str(err.value)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(DictionaryError):
            load(tmp_path / "nowhere", "fr")

    def test_not_utf8(self, tmp_path):
        (tmp_path / "fr.txt").write_bytes(b"chat\n\xff\xfe\xfa\n")
        with pytest.raises(DictionaryError) as err:
            load(tmp_path, "fr")
        assert "UTF-8" in str(err.value)

    def test_unreadable(self, tmp_path):
        # a directory where the file should be cannot be read as a word list
        (tmp_path / "fr.txt").mkdir()
        with pytest.raises(DictionaryError):
            load(tmp_path, "fr")
