"""
Unit tests for the search index builder.
"""

from hunt.config import HuntConfig, configure
from hunt.index_builder import build_index, concat_values, flatten_values
from hunt.text.tokenizer import to_stemmed_words


class TestConcatValues:
    """Test flattening of field values in declared order"""

    def test_joins_with_space(self):
        assert concat_values(["Woot for MongoDB!", "This is my body."]) == "Woot for MongoDB! This is my body."

    def test_list_field_contributes_each_element(self):
        assert concat_values(["Woot", ["mongo", "nosql"], "tail"]) == "Woot mongo nosql tail"

    def test_none_contributes_nothing(self):
        assert concat_values([None, "title", None]) == "title"
        assert concat_values([]) == ""

    def test_scalars_and_bytes(self):
        assert flatten_values([42, b"bytes"]) == ["42", "bytes"]


class TestBuildIndex:
    """Test term set derivation"""

    def test_single_field(self):
        assert build_index(["Woot for MongoDB!"]) == ["woot", "mongodb"]

    def test_equals_stemmed_words_of_concatenation(self):
        values = ["Woot for MongoDB!", "This is my body."]
        assert build_index(values) == to_stemmed_words(concat_values(values))

    def test_multiple_fields_equal_single_concatenation(self):
        assert build_index(["Woot for MongoDB!", "This is my body."]) == \
            build_index(["Woot for MongoDB! This is my body."])

    def test_list_field_in_order(self):
        assert build_index(["Woot for MongoDB!", ["mongo", "nosql"]]) == \
            build_index(["Woot for MongoDB! mongo nosql"])

    def test_field_order_determines_term_order(self):
        assert build_index(["alpha", "beta"]) == ["alpha", "beta"]
        assert build_index(["beta", "alpha"]) == ["beta", "alpha"]

    def test_no_duplicate_terms_across_fields(self):
        assert build_index(["kissing", ["kiss", "kisses"]]) == ["kiss"]

    def test_absent_fields(self):
        assert build_index([None, None]) == []
        assert build_index([]) == []

    def test_single_string_value(self):
        assert build_index("Woot for MongoDB!") == ["woot", "mongodb"]

    def test_rebuild_reflects_current_values(self):
        assert build_index(["Woot for MongoDB!"]) == ["woot", "mongodb"]
        assert build_index(["Another woot"])[-1] == "woot"
        assert "mongodb" not in build_index(["Another woot"])

    def test_additional_words_to_ignore(self):
        assert build_index(["bang yabadabaduu"]) == ["bang", "yabadabaduu"]
        configure(additional_words_to_ignore=["bang", "yabadabaduu"])
        assert build_index(["bang yabadabaduu"]) == []

    def test_explicit_config(self):
        config = HuntConfig(additional_words_to_ignore=["woot"])
        assert build_index(["Woot for MongoDB!"], config) == ["mongodb"]
