from phrasebook.placeholders import placeholder_names, substitute, token


def test_token_styles():
    assert token("name") == "{{name}}"
    assert token("name", "single") == "{name}"


def test_names_scanned_left_to_right_and_collapsed():
    assert placeholder_names("{{a}} then {{b}} then {{a}}") == frozenset({"a", "b"})
    assert placeholder_names("no tokens here") == frozenset()


def test_names_are_arbitrary_substrings():
    assert placeholder_names("{{first name}} {{x.y}}") == frozenset({"first name", "x.y"})


def test_single_style_skips_double_tokens():
    assert placeholder_names("{a} and {{b}}", "single") == frozenset({"a"})
    assert placeholder_names("{a} and {{b}}") == frozenset({"b"})


def test_substitute_in_insertion_order_is_order_independent():
    template = "{{a}}-{{b}}"
    assert substitute(template, {"a": "1", "b": "2"}) == "1-2"
    assert substitute(template, {"b": "2", "a": "1"}) == "1-2"


def test_substitute_without_replacements():
    assert substitute("Hi {{name}}", None) == "Hi {{name}}"
    assert substitute("Hi {{name}}", {}) == "Hi {{name}}"


def test_substitute_first_occurrence_only():
    assert substitute("{n}, {n}", {"n": "x"}, "single") == "x, {n}"


def test_single_style_skips_tokens_touching_a_literal_brace():
    assert substitute("{{x}", {"x": "X"}, "single") == "{{x}"
    assert substitute("{x}}", {"x": "X"}, "single") == "{x}}"
    assert placeholder_names("{{x} {x}}", "single") == frozenset()
