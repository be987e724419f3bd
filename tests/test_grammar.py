import pytest

from cqlpy.grammar import CQL_1_5_3, completion_items, grammar_for


def test_grammar_for_known_version_returns_shared_table() -> None:
    assert grammar_for("1.5.3") is CQL_1_5_3
    assert grammar_for() is CQL_1_5_3


def test_grammar_for_unknown_version_raises() -> None:
    with pytest.raises(ValueError, match="Unsupported CQL version '2.0'"):
        grammar_for("2.0")


def test_symbol_operators_are_longest_first() -> None:
    lengths = [len(op) for op in CQL_1_5_3.operators]

    assert lengths == sorted(lengths, reverse=True)
    assert set(CQL_1_5_3.operators[:4]) == {"<=", ">=", "<>", "!="}
    assert CQL_1_5_3.text_operators[0] == "implies"


def test_multi_word_keywords_live_outside_single_word_set() -> None:
    assert "or after" not in CQL_1_5_3.keywords
    assert CQL_1_5_3.compound_keyword_tails("or") == ("after", "before", "less", "more")
    assert CQL_1_5_3.compound_keyword_tails("and") == ()


def test_literal_patterns() -> None:
    assert CQL_1_5_3.number.fullmatch("42L")
    assert CQL_1_5_3.number.fullmatch("3.14")
    assert CQL_1_5_3.datetime.fullmatch("@2014-01-25T14:30:14.559Z")
    assert CQL_1_5_3.identifier.fullmatch("_tmp1")
    assert CQL_1_5_3.string.fullmatch(r'"a\"b"')
    assert not CQL_1_5_3.string.fullmatch('"a\nb"')


def test_completion_items_group_keywords_functions_then_types() -> None:
    items = completion_items()

    kinds = [item.type for item in items]
    assert kinds == sorted(kinds, key=["keyword", "function", "type"].index)
    assert len(items) == len(CQL_1_5_3.keywords) + 4 + len(CQL_1_5_3.functions) + len(CQL_1_5_3.data_types)

    by_label = {(item.label, item.type): item for item in items}
    assert by_label[("or after", "keyword")].boost == 10
    assert by_label[("Abs", "function")].info == "CQL 1.5.3 function: Abs"
    assert by_label[("Boolean", "type")].boost == 8
    assert by_label[("Date", "function")].detail == "function"
    assert ("Date", "type") in by_label
