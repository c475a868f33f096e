"""
Tree-sitter wrapper for PHP code blocks.
Provides parsing, named queries and node/offset utilities.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

import tree_sitter_php as tsphp
from tree_sitter import Language, Node, Parser, Query, QueryCursor, Tree

PHP_LANGUAGE = Language(tsphp.language_php())

QUERIES: Dict[str, str] = {
    "echo": "(echo_statement) @echo",
}


class PhpTreeSitterDocument:
    """
    Parsed PHP text with query support.
    """

    def __init__(self, text: str):
        self.text = text
        self.tree: Optional[Tree] = None
        self._text_bytes = text.encode("utf-8")
        self._query_cache: Dict[str, Query] = {}
        self._parse()

    def _parse(self):
        """Parse the document with Tree-sitter."""
        parser = Parser(PHP_LANGUAGE)
        self.tree = parser.parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        if not self.tree:
            raise RuntimeError("Document not parsed")
        return self.tree.root_node

    def query(self, query_name: str) -> List[Tuple[Node, str]]:
        """
        Execute a named query on the document.

        Returns:
            List of (node, capture_name) tuples

        Raises:
            ValueError: If query is not defined
        """
        if query_name not in QUERIES:
            raise ValueError(f"Unknown query: {query_name}")

        if query_name not in self._query_cache:
            self._query_cache[query_name] = Query(PHP_LANGUAGE, QUERIES[query_name])

        cursor = QueryCursor(self._query_cache[query_name])

        results = []
        for _pattern_index, captures in cursor.matches(self.root_node):
            for capture_name, nodes in captures.items():
                for node in nodes:
                    results.append((node, capture_name))
        return results

    def walk_tree(self, start_node: Optional[Node] = None) -> Iterator[Node]:
        """
        Walk the tree using TreeCursor, depth-first.
        """
        if start_node is None:
            start_node = self.root_node

        cursor = start_node.walk()
        visited_children = False

        while True:
            if not visited_children:
                yield cursor.node

                if not cursor.goto_first_child():
                    visited_children = True
            elif cursor.goto_next_sibling():
                visited_children = False
            elif not cursor.goto_parent():
                break
            else:
                visited_children = True

    def get_node_text(self, node: Node) -> str:
        """Get text content for a node."""
        return self._text_bytes[node.start_byte:node.end_byte].decode("utf-8")

    def get_node_range(self, node: Node) -> Tuple[int, int]:
        """Get char range for a node."""
        return self.byte_to_char_position(node.start_byte), self.byte_to_char_position(node.end_byte)

    def has_error(self) -> bool:
        """Check if the tree has any syntax errors."""
        if not self.tree:
            return True
        return self.root_node.has_error

    def first_error(self) -> Optional[Node]:
        """First ERROR or MISSING node in document order."""
        for node in self.walk_tree():
            if node.type == "ERROR" or node.is_missing:
                return node
        return None

    def byte_to_char_position(self, byte_pos: int) -> int:
        """
        Convert byte position to character position in Unicode text.
        A position inside a multi-byte character maps to the position before it.
        """
        if byte_pos <= 0:
            return 0
        if byte_pos >= len(self._text_bytes):
            return len(self.text)

        # UTF-8 guarantees at most 4 bytes per character
        start = max(0, byte_pos - 4)
        for end in range(byte_pos, start - 1, -1):
            try:
                return len(self._text_bytes[:end].decode("utf-8"))
            except UnicodeDecodeError:
                continue
        return 0


__all__ = ["PhpTreeSitterDocument", "PHP_LANGUAGE", "QUERIES", "Node"]
