import pytest

from keyevents.keymaps import (
    UNBOUND,
    Binding,
    BindingList,
    CharKey,
    FunctionKey,
    Modifier,
    SpecialKey,
    UnknownKeyTokenError,
    UnknownModifierError,
    non_char_keys,
    parse_binding,
    parse_binding_list,
    pp_binding,
    pp_binding_state,
    pp_key,
)
from keyevents.keymaps.grammar import NAMED_KEYS


def ctrl(char: str) -> Binding:
    return Binding.of(CharKey(char), Modifier.CTRL)


@pytest.mark.parametrize("text", ["c-x", "ctrl-x", "control-x", "C-X", "Ctrl-x"])
def test_ctrl_synonyms_parse_to_same_binding(text: str) -> None:
    assert parse_binding(text) == ctrl("x")


def test_modifier_order_does_not_matter() -> None:
    left = parse_binding("m-shift-f5")
    right = parse_binding("S-Meta-F5")

    assert left == right
    assert left.modifiers == frozenset({Modifier.META, Modifier.SHIFT})
    assert left.key == FunctionKey(5)


def test_duplicate_modifiers_collapse() -> None:
    assert parse_binding("C-C-x") == ctrl("x")


def test_plain_character() -> None:
    binding = parse_binding("x")

    assert binding == Binding(key=CharKey("x"))
    assert binding.modifiers == frozenset()


def test_single_letter_f_is_a_character() -> None:
    assert parse_binding("f") == Binding(key=CharKey("f"))


def test_non_ascii_character_is_accepted_verbatim() -> None:
    assert parse_binding("é") == Binding(key=CharKey("é"))


@pytest.mark.parametrize(
    ("text", "key"),
    [
        ("esc", SpecialKey.ESC),
        ("pgup", SpecialKey.PAGE_UP),
        ("PgDown", SpecialKey.PAGE_DOWN),
        ("del", SpecialKey.DELETE),
        ("backtab", SpecialKey.BACK_TAB),
        ("upleft", SpecialKey.UP_LEFT),
        ("printscreen", SpecialKey.PRINT_SCREEN),
        ("space", CharKey(" ")),
        ("tab", CharKey("\t")),
    ],
)
def test_named_keys(text: str, key: object) -> None:
    assert parse_binding(text) == Binding(key=key)


def test_function_key() -> None:
    binding = parse_binding("f12")

    assert binding == Binding(key=FunctionKey(12))
    assert pp_binding(binding) == "F12"


def test_space_renders_as_space() -> None:
    binding = parse_binding("space")

    assert binding == Binding(key=CharKey(" "))
    assert pp_binding(binding) == "Space"


def test_empty_binding_is_rejected() -> None:
    with pytest.raises(UnknownKeyTokenError) as excinfo:
        parse_binding("")

    assert str(excinfo.value) == "Empty keybinding not allowed"


def test_unknown_modifier_reports_token() -> None:
    with pytest.raises(UnknownModifierError) as excinfo:
        parse_binding("q-x")

    assert excinfo.value.token == "q"


def test_leftmost_unknown_modifier_wins() -> None:
    with pytest.raises(UnknownModifierError) as excinfo:
        parse_binding("c-bogus-hyper-x")

    assert excinfo.value.token == "bogus"


@pytest.mark.parametrize("text", ["xyz", "fx1", "f1a", "c-", "f\u00b2", "C-"])
def test_unknown_key_tokens(text: str) -> None:
    with pytest.raises(UnknownKeyTokenError):
        parse_binding(text)


def test_unknown_key_reports_lowercased_token() -> None:
    with pytest.raises(UnknownKeyTokenError) as excinfo:
        parse_binding("C-Hyper")

    assert excinfo.value.token == "hyper"


def test_pp_emits_canonical_modifier_order() -> None:
    binding = Binding.of(
        CharKey("x"), Modifier.SHIFT, Modifier.CTRL, Modifier.ALT, Modifier.META
    )

    assert pp_binding(binding) == "M-A-C-S-x"


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        (SpecialKey.ESC, "Esc"),
        (SpecialKey.PAGE_UP, "PgUp"),
        (SpecialKey.DELETE, "Del"),
        (FunctionKey(0), "F0"),
        (CharKey("\t"), "Tab"),
        (CharKey(" "), "Space"),
        (CharKey("X"), "X"),
    ],
)
def test_pp_key(key: object, expected: str) -> None:
    assert pp_key(key) == expected


@pytest.mark.parametrize(
    "text",
    [
        "x",
        "C-x",
        "M-S-F5",
        "M-A-C-S-Esc",
        "C-PgUp",
        "Space",
        "A-Tab",
        "BackTab",
        "F0",
        ",",
    ],
)
def test_canonical_strings_are_fixed_points(text: str) -> None:
    assert pp_binding(parse_binding(text)) == text


def test_every_named_key_round_trips() -> None:
    for key in NAMED_KEYS.values():
        for modifiers in ((), (Modifier.CTRL,), (Modifier.META, Modifier.SHIFT)):
            binding = Binding.of(key, *modifiers)
            assert parse_binding(pp_binding(binding)) == binding


def test_synonyms_collapse_when_printed() -> None:
    assert pp_binding(parse_binding("Control-Meta-pgup")) == "M-C-PgUp"


def test_non_char_keys_in_declared_order() -> None:
    keys = non_char_keys()

    assert len(keys) == len(SpecialKey)
    assert len(set(keys)) == len(keys)
    assert keys[:4] == ("BackTab", "Esc", "Backspace", "Enter")
    assert keys[-1] == "Menu"
    assert "Tab" not in keys and "Space" not in keys


@pytest.mark.parametrize("text", ["unbound", "UNBOUND", "  Unbound "])
def test_unbound(text: str) -> None:
    assert parse_binding_list(text) is UNBOUND


def test_binding_list_keeps_order() -> None:
    state = parse_binding_list("c-x, M-y")

    assert state == BindingList((ctrl("x"), Binding.of(CharKey("y"), Modifier.META)))


def test_binding_list_allows_duplicates() -> None:
    state = parse_binding_list("c-x,C-x")

    assert isinstance(state, BindingList)
    assert len(state) == 2


@pytest.mark.parametrize("text", ["c-x, q-y", "q-y, c-x", "c-x,", ""])
def test_binding_list_failure_propagates(text: str) -> None:
    with pytest.raises((UnknownModifierError, UnknownKeyTokenError)):
        parse_binding_list(text)


def test_binding_list_pretty_print() -> None:
    assert pp_binding_state(parse_binding_list("ctrl-x,  esc")) == "C-x, Esc"
    assert pp_binding_state(UNBOUND) == "unbound"


def test_bindings_are_ordered_structurally() -> None:
    bindings = [parse_binding(text) for text in ("x", "C-x", "F2", "Esc", "F1")]

    ordered = sorted(bindings)

    assert [pp_binding(b) for b in ordered] == ["Esc", "F1", "F2", "x", "C-x"]


@pytest.mark.parametrize("modifiers", ["C", ("ctrl",), (Modifier.CTRL, "S")])
def test_binding_rejects_non_modifier_values(modifiers: object) -> None:
    with pytest.raises(TypeError):
        Binding(key=CharKey("x"), modifiers=modifiers)  # type: ignore[arg-type]


def test_binding_rejects_non_key_values() -> None:
    with pytest.raises(TypeError):
        Binding(key="x")  # type: ignore[arg-type]
