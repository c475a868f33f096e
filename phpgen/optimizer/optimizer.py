"""
Echo coalescing pass for hand-written PHP blocks.

Consecutive `echo '<literal>';` statements separated only by whitespace are
replaced with a single echo of the concatenated, precomputed literal.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, Union

from ..errors import SourceSyntaxError
from ..php_strings import decode_double, decode_single, string_literal
from .range_edits import RangeEditor
from .tree_sitter_support import Node, PhpTreeSitterDocument

logger = logging.getLogger(__name__)

OPEN_TAG = "<?php"

# Children allowed inside a double-quoted string for it to stay a plain literal.
_PLAIN_STRING_PARTS = {"string_content", "string_value", "escape_sequence"}

# (start_char, end_char, value)
Emission = Tuple[int, int, str]


class SourceOptimizer:
    """Stateless; one instance may be reused for any number of blocks."""

    def optimize(self, source: Union[str, Sequence[str]]) -> str:
        text = source if isinstance(source, str) else "\n".join(source)

        prefix = "" if text.lstrip().startswith(OPEN_TAG) else OPEN_TAG + " "
        doc = PhpTreeSitterDocument(prefix + text)

        if doc.has_error():
            raise self._syntax_error(doc, len(prefix))

        editor = RangeEditor(doc.text)
        merged = 0
        for run in self._collect_runs(doc):
            if len(run) < 2:
                continue
            value = "".join(v for _, _, v in run)
            editor.add_replacement(run[0][0], run[-1][1], f"echo {string_literal(value)};", "echo_merged")
            merged += len(run)

        result, stats = editor.apply_edits()
        if merged:
            logger.debug(
                f"Coalesced {merged} echo statements into {stats.get('echo_merged', 0)}"
            )
        return result[len(prefix):]

    __call__ = optimize

    def _collect_runs(self, doc: PhpTreeSitterDocument) -> List[List[Emission]]:
        echoes = sorted((node for node, _ in doc.query("echo")), key=lambda n: n.start_byte)

        runs: List[List[Emission]] = []
        current: List[Emission] = []
        for node in echoes:
            value = self._literal_value(doc, node)
            if value is None:
                if current:
                    runs.append(current)
                current = []
                continue

            start, end = doc.get_node_range(node)
            if current and doc.text[current[-1][1]:start].strip():
                runs.append(current)
                current = []
            current.append((start, end, value))

        if current:
            runs.append(current)
        return runs

    @staticmethod
    def _literal_value(doc: PhpTreeSitterDocument, node: Node) -> Optional[str]:
        """Value echoed by `node` if it is a single plain string literal."""
        children = node.children
        if not children or children[-1].type != ";":
            return None
        if doc.get_node_text(children[0]).lower() != "echo":
            return None

        named = node.named_children
        if len(named) != 1:
            return None

        arg = named[0]
        literal = doc.get_node_text(arg)
        if arg.type == "string" and literal.lstrip("bB").startswith("'"):
            return decode_single(literal)
        if arg.type == "encapsed_string" and literal.lstrip("bB").startswith('"'):
            if all(child.type in _PLAIN_STRING_PARTS for child in arg.named_children):
                return decode_double(literal)
        return None

    @staticmethod
    def _syntax_error(doc: PhpTreeSitterDocument, prefix_len: int) -> SourceSyntaxError:
        node = doc.first_error()
        if node is None:
            return SourceSyntaxError(1, 1)

        row, col = node.start_point
        if row == 0:
            col = max(0, col - prefix_len)
        snippet = doc.get_node_text(node).splitlines()[0][:40] if node.end_byte > node.start_byte else ""
        return SourceSyntaxError(row + 1, col + 1, snippet)


def optimize(source: Union[str, Sequence[str]]) -> str:
    return SourceOptimizer().optimize(source)


__all__ = ["SourceOptimizer", "optimize"]
