import pytest

from hoboengine.debug import has_crashed, log, log_error, reset_crash


@pytest.fixture(autouse=True)
def clean_state():
    reset_crash()
    yield
    reset_crash()


def test_log_string(capsys):
    log("hello")
    assert capsys.readouterr().out == "[LOG] hello\n"
    assert has_crashed() is False


def test_log_float(capsys):
    log(2.5)
    assert capsys.readouterr().out == "[LOG] 2.5\n"


def test_log_error_prints_red_and_sets_flag(capsys):
    log_error("boom")
    assert capsys.readouterr().out == "\033[31m[ERROR] boom\033[0m\n"
    assert has_crashed() is True


def test_reset_crash_clears_flag():
    log_error(1.5)
    assert has_crashed() is True
    reset_crash()
    assert has_crashed() is False