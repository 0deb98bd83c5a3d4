import logging

from chelper.profile import Profile


def test_push_and_stack_trace():
    profile = Profile()
    profile.push("loading manifest")
    profile.push("loading id data")
    assert profile.stack_trace() == "loading manifest\nloading id data"


def test_next_replaces_top():
    profile = Profile()
    profile.push("loading manifest")
    profile.push("loading id data")
    profile.next("loading json data")
    assert profile.stack == ["loading manifest", "loading json data"]


def test_pop_removes_top():
    profile = Profile()
    profile.push("a")
    profile.push("b")
    profile.pop()
    assert profile.stack == ["a"]


def test_pop_on_empty_logs_error(caplog):
    profile = Profile()
    with caplog.at_level(logging.ERROR):
        profile.pop()
    assert profile.stack == []
    assert "pop stack when stack is empty" in caplog.text


def test_clear_empties_stack():
    profile = Profile()
    profile.push("a")
    profile.clear()
    assert profile.stack_trace() == ""


def test_print_and_clear(caplog):
    profile = Profile()
    profile.push("init cpack")
    profile.push("init json nodes")
    with caplog.at_level(logging.ERROR):
        message = profile.print_and_clear(RuntimeError("unknown id type"))
    assert message == "unknown id type\nstack trace:\ninit cpack\ninit json nodes"
    assert "unknown id type" in caplog.text
    assert profile.stack == []