"""
Tests for the prefix tree
"""

from succinct.trie import Trie


class TestTrie:
    def test_contains(self):
        trie = Trie()
        assert trie.append("foo")
        assert trie.size() == 4
        assert not trie.append("foo")
        assert trie.size() == 4
        assert trie.append("bar")
        assert trie.size() == 7
        assert trie.append("baz")
        assert trie.size() == 8
        assert trie.append("foobar")
        assert trie.size() == 11
        assert trie.append("あいうえお")
        assert trie.size() == 16

        for word in ("foo", "bar", "baz", "foobar", "あいうえお"):
            assert trie.contains(word)
        for word in ("fo", "foob", "xxx", "あいうえおか"):
            assert word not in trie

    def test_prefix(self):
        trie = Trie()
        for word in ("foo", "bar", "baz", "foobar", "あいうえお"):
            trie.append(word)

        assert trie.prefix("") == ""
        assert trie.prefix("f") == ""
        assert trie.prefix("fo") == ""
        assert trie.prefix("foo") == "foo"
        assert trie.prefix("foob") == "foo"
        assert trie.prefix("fooba") == "foo"
        assert trie.prefix("foobar") == "foobar"
        assert trie.prefix("foobarbaz") == "foobar"
        assert trie.prefix("あいうえおか") == "あいうえお"

    def test_longest_common_word(self):
        trie = Trie()
        for word in ("the", "they", "their", "them", "theirs", "this", "that"):
            trie.append(word)
        assert trie.prefix("theorem") == "the"
