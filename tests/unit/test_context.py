# tests/unit/test_context.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import threading

from tablefsm.runtime.context import Context, background


def test_background_not_cancelled():
    ctx = background()
    assert not ctx.cancelled
    assert ctx.wait(timeout=0) is False


def test_cancel_is_idempotent():
    ctx = Context()
    ctx.cancel()
    ctx.cancel()
    assert ctx.cancelled
    assert ctx.wait(timeout=0) is True


def test_values_chain():
    root = background()
    child = root.with_value("ue", 7).with_value("amf", "a1")
    assert child.value("ue") == 7
    assert child.value("amf") == "a1"
    assert child.value("missing", "dflt") == "dflt"
    assert root.value("ue") is None


def test_child_shadows_parent_value():
    ctx = background().with_value("k", 1).with_value("k", 2)
    assert ctx.value("k") == 2


def test_cancellation_shared_with_children():
    root = background()
    child = root.with_value("k", "v")
    child.cancel()
    assert root.cancelled


def test_wait_released_by_cancel_from_other_thread():
    ctx = background()
    timer = threading.Timer(0.01, ctx.cancel)
    timer.start()
    try:
        assert ctx.wait(timeout=5) is True
    finally:
        timer.cancel()
