# Character trie with exact lookup and single-substitution matching
import logging
from typing import Optional, Tuple


class TrieNode(object):
    # Trie node class
    def __init__(self, char=''):
        # edge label used by the parent to reach this node
        self.char = char
        self.children = {}

        # terminal is set to the full string for nodes where an inserted string ends
        self.terminal = None

    def is_terminal(self):
        return self.terminal is not None


class Trie(object):
    """
    Prefix tree over arbitrary characters. Shared prefixes share nodes, every stored string ends at a node whose
    terminal equals the string itself. The root never holds a terminal.
    """
    def __init__(self):
        self.root = self._get_new_node()
        self._size = 0

    @staticmethod
    def _get_new_node(char=''):
        return TrieNode(char)

    def __len__(self):
        return self._size

    def __contains__(self, key):
        node = self.contains(key)
        return node is not None and node.terminal == key

    def insert(self, key: str) -> TrieNode:
        """
        Insert key into the trie. Missing nodes are created on the way, existing structure is never touched.
        Inserting the same key again is a no-op. The empty string is not stored, the root stays non-terminal.
        :param key: (str) string to store
        :return: (TrieNode) the node the key ends at
        """
        if not key:
            logging.debug("Ignoring empty string, the root never holds a terminal")
            return self.root

        p_crawl = self.root
        for ch in key:
            child = p_crawl.children.get(ch)
            if child is None:
                child = self._get_new_node(ch)
                p_crawl.children[ch] = child
            p_crawl = child

        if p_crawl.terminal is None:
            p_crawl.terminal = key
            self._size += 1
        return p_crawl

    def contains(self, key: str) -> Optional[TrieNode]:
        """
        Walk the trie along key.
        :param key: (str) string to look up
        :return: (TrieNode) the node reached after consuming all characters of key, or None if an edge is missing.
        The node is not necessarily terminal: if key is only a prefix of stored strings its terminal is None.
        """
        p_crawl = self.root
        for ch in key:
            p_crawl = p_crawl.children.get(ch)
            if p_crawl is None:
                return None
        return p_crawl

    def _longest_prefix(self, key: str) -> Tuple[str, TrieNode]:
        p_crawl = self.root
        level = 0
        for ch in key:
            child = p_crawl.children.get(ch)
            if child is None:
                break
            p_crawl = child
            level += 1
        return key[:level], p_crawl

    def match_off_by_one(self, query: str) -> Optional[str]:
        """
        Search for a stored string of the same length as query that differs from it in exactly one position.

        Example: with "abcdef" stored, "abgdef" matches and "abdef" is returned, "hbgdef" differs in two places and
        does not match. An exact match returns None as well.

        Only the children of the first divergence point are tried. A candidate is accepted as soon as the rest of
        query after the skipped position is found below it, no matter whether the node reached is terminal.

        :param query: (str) string to search for
        :return: (str) the characters query has in common with the stored string, or None
        """
        if not query:
            return None

        # longest prefix of query present in the trie
        prefix, current = self._longest_prefix(query)
        remainder = query[len(prefix) + 1:]

        # skip the mismatched character and look for the remainder below each child
        for child in current.children.values():
            matched = 0
            for ch in remainder:
                child = child.children.get(ch)
                if child is None:
                    break
                matched += 1

            if len(prefix) + matched == len(query) - 1:
                return prefix + remainder[:matched]

        return None
