import pytest

from ptpublish.guard import Exit


def test_close_runs_callback_once():
    calls = []
    guard = Exit(lambda: calls.append(1))
    guard.close()
    guard.close()
    assert calls == [1]


def test_cancel_prevents_callback():
    calls = []
    guard = Exit(lambda: calls.append(1))
    guard.cancel()
    guard.close()
    assert calls == []


def test_with_block_runs_callback():
    calls = []
    with Exit(lambda: calls.append("done")) as guard:
        assert calls == []
    guard.close()
    assert calls == ["done"]


def test_with_block_runs_callback_on_error():
    calls = []
    with pytest.raises(KeyError):
        with Exit(lambda: calls.append("cleanup")):
            raise KeyError("boom")
    assert calls == ["cleanup"]


def test_cancel_inside_with_block():
    calls = []
    with Exit(lambda: calls.append(1)) as guard:
        guard.cancel()
    assert calls == []