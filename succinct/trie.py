class Trie:
    """Prefix tree over characters. Each node owns its children."""

    def __init__(self):
        self.children = {}
        self.is_leaf = False

    def append(self, word):
        """Store `word`. Returns True if it was not stored before."""
        node = self
        for c in word:
            node = node.children.setdefault(c, Trie())
        is_new = not node.is_leaf
        node.is_leaf = True
        return is_new

    def size(self):
        """Number of nodes, the root included."""
        return 1 + sum(child.size() for child in self.children.values())

    def contains(self, word):
        node = self
        for c in word:
            node = node.children.get(c)
            if node is None:
                return False
        return node.is_leaf

    def __contains__(self, word):
        return self.contains(word)

    def prefix(self, s):
        """Longest stored word that is a prefix of `s` ('' if there is none)."""
        length = 0
        node = self
        for i, c in enumerate(s):
            node = node.children.get(c)
            if node is None:
                break
            if node.is_leaf:
                length = i + 1
        return s[:length]
