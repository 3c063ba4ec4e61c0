import pytest

from commanddeck.core.commands import MacroCommand, UndoableCommand


def test_macro_executes_children_in_order(recording, call_log):
    macro = MacroCommand([recording("a"), recording("b"), recording("c")])

    macro.execute()

    assert call_log == [("execute", "a"), ("execute", "b"), ("execute", "c")]

def test_macro_repeated_execute_keeps_order(recording, call_log):
    macro = MacroCommand([recording("a"), recording("b"), recording("c")])

    macro.execute()
    macro.execute()

    assert [name for _, name in call_log] == ["a", "b", "c", "a", "b", "c"]

def test_macro_copies_children_on_construction(recording, call_log):
    children = [recording("a"), recording("b")]
    macro = MacroCommand(children)

    children.append(recording("late"))
    children.pop(0)
    macro.execute()

    assert call_log == [("execute", "a"), ("execute", "b")]
    assert len(macro) == 2
    assert isinstance(macro.commands, tuple)

def test_macro_accepts_generator(recording, call_log):
    macro = MacroCommand(recording(n) for n in "xyz")
    macro.execute()
    macro.execute()
    assert len(call_log) == 6

def test_nested_macros(recording, call_log):
    inner = MacroCommand([recording("b"), recording("c")], "inner")
    outer = MacroCommand([recording("a"), inner, recording("d")], "outer")

    outer.execute()

    assert [name for _, name in call_log] == ["a", "b", "c", "d"]
    assert list(outer)[1] is inner

def test_macro_failure_aborts_without_rollback(recording, failing, call_log):
    macro = MacroCommand([recording("a"), failing(), recording("c")])

    with pytest.raises(RuntimeError):
        macro.execute()

    # "a" ran and was not undone, "c" never ran
    assert call_log == [("execute", "a")]

def test_macro_rejects_non_commands(recording):
    with pytest.raises(TypeError):
        MacroCommand([recording("a"), "not a command"])

def test_macro_has_no_undo(recording):
    macro = MacroCommand([recording("a")])
    assert not isinstance(macro, UndoableCommand)
    assert not hasattr(macro, "undo")

def test_empty_macro_is_noop():
    macro = MacroCommand([], "Nothing")
    macro.execute()
    assert len(macro) == 0
    assert macro.description == "Nothing"
