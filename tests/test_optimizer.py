"""
Tests for echo coalescing over tree-sitter-php.
"""

import pytest

from phpgen.errors import SourceSyntaxError
from phpgen.optimizer import SourceOptimizer, optimize
from phpgen.optimizer.range_edits import RangeEditor
from phpgen.php_strings import decode_double, string_literal


@pytest.fixture
def optimizer():
    return SourceOptimizer()


def test_two_literal_echoes_merge(optimizer):
    assert optimizer.optimize("echo 'a'; echo 'b';") == "echo 'ab';"


def test_variable_echo_breaks_the_run(optimizer):
    code = "echo 'a';\necho $x;\necho 'b';"
    assert optimizer.optimize(code) == code


def test_runs_merge_on_both_sides_of_a_break(optimizer):
    code = "echo 'a'; echo 'b'; echo $x; echo 'c'; echo \"d\";"
    assert optimizer.optimize(code) == "echo 'ab'; echo $x; echo 'cd';"


def test_single_echo_is_untouched(optimizer):
    assert optimizer.optimize('echo "x";') == 'echo "x";'


def test_open_tag_is_preserved(optimizer):
    code = "<?php\necho 'a';\necho 'b';\n"
    assert optimizer.optimize(code) == "<?php\necho 'ab';\n"


def test_escapes_are_decoded_and_reencoded(optimizer):
    assert optimizer.optimize("echo 'it\\'s '; echo \"ok\\n\";") == 'echo "it\'s ok\\n";'


def test_interpolated_string_is_not_a_literal(optimizer):
    code = 'echo "a"; echo "hi $name";'
    assert optimizer.optimize(code) == code


def test_comment_breaks_the_run(optimizer):
    code = "echo 'a'; // note\necho 'b';"
    assert optimizer.optimize(code) == code


def test_multi_argument_echo_is_left_alone(optimizer):
    code = "echo 'a', 'b'; echo 'c';"
    assert optimizer.optimize(code) == code


def test_nested_block_keeps_surrounding_text(optimizer):
    code = "function f() {\n    echo '<p>';\n    echo '</p>';\n    return 1;\n}"
    assert optimizer.optimize(code) == "function f() {\n    echo '<p></p>';\n    return 1;\n}"


def test_lines_are_joined(optimizer):
    assert optimizer.optimize(["echo 'a';", "echo 'b';"]) == "echo 'ab';"


def test_module_level_helper():
    assert optimize("echo 'x'; echo 'y';") == "echo 'xy';"


def test_optimizing_twice_is_stable(optimizer):
    once = optimizer.optimize("echo 'a'; echo 'b'; echo $c;")
    assert optimizer.optimize(once) == once


def test_syntax_error_is_reported(optimizer):
    with pytest.raises(SourceSyntaxError) as excinfo:
        optimizer.optimize("echo 'a';\n$x = ;")
    assert excinfo.value.line == 2


def test_high_byte_escapes_survive_merge(optimizer):
    assert optimizer.optimize('echo "\\xff"; echo "a";') == 'echo "\\xffa";'
    assert optimizer.optimize("echo \"\\377\"; echo 'b';") == 'echo "\\xffb";'


def test_unicode_escape_stays_a_character(optimizer):
    assert optimizer.optimize('echo "\\u{e9}"; echo "!";') == "echo '\u00e9!';"


def test_byte_escape_decoding():
    assert decode_double('"\\x41\\xc3\\xa9"') == "A\udcc3\udca9"
    assert string_literal("A\udcc3\udca9") == '"A\\xc3\\xa9"'


def test_range_editor_applies_back_to_front():
    editor = RangeEditor("aa bb cc")
    editor.add_replacement(0, 2, "A", "x")
    editor.add_replacement(6, 8, "CCC", "x")
    text, stats = editor.apply_edits()
    assert text == "A bb CCC"
    assert stats["x"] == 2
    assert stats["chars_removed"] == 4 and stats["chars_added"] == 4
