"""Tests for the controller, with a fake scheduler and clipboard instead of Tk."""

import json

from controller import ConverterController
from settings import Settings
from state_machine import Phase

SAMPLE_KEY = "ss://YWVzLTI1Ni1nY206cGFzc3dvcmQ=@example.com:8388/?outline=1"


class FakeScheduler:
    def __init__(self):
        self.jobs = []

    def after(self, ms, func):
        self.jobs.append((ms, func))

    def run_next(self):
        ms, func = self.jobs.pop(0)
        func()
        return ms


class FakeClipboard:
    def __init__(self, text=""):
        self.text = text
        self.fail = False

    def read_text(self):
        return self.text

    def write_text(self, text):
        if self.fail:
            raise RuntimeError("clipboard unavailable")
        self.text = text


def _controller(**settings):
    scheduler = FakeScheduler()
    clipboard = FakeClipboard()
    controller = ConverterController(scheduler, clipboard, settings=Settings(**settings))
    return controller, scheduler, clipboard


def test_submit_runs_conversion_after_delay() -> None:
    controller, scheduler, _ = _controller(conversion_delay_ms=300)

    assert controller.submit(SAMPLE_KEY)
    assert controller.state.is_loading
    assert scheduler.run_next() == 300

    assert controller.state.phase is Phase.SUCCESS
    assert json.loads(controller.state.output)["server"] == "example.com"


def test_zero_delay_is_allowed() -> None:
    controller, scheduler, _ = _controller(conversion_delay_ms=0)

    controller.submit(SAMPLE_KEY)

    assert scheduler.run_next() == 0
    assert controller.state.phase is Phase.SUCCESS


def test_only_one_conversion_in_flight() -> None:
    controller, scheduler, _ = _controller()

    assert controller.submit(SAMPLE_KEY)
    assert not controller.submit(SAMPLE_KEY)
    assert len(scheduler.jobs) == 1


def test_failed_conversion() -> None:
    controller, scheduler, _ = _controller()

    controller.submit("invalidkeywithnoatsign")
    scheduler.run_next()

    assert controller.state.phase is Phase.FAILED
    assert controller.state.error == "Invalid key format"
    assert not controller.copy()


def test_listeners_see_every_transition() -> None:
    controller, scheduler, _ = _controller()
    phases = []
    controller.subscribe(lambda state: phases.append(state.phase))

    controller.submit(SAMPLE_KEY)
    scheduler.run_next()
    controller.copy()
    scheduler.run_next()

    assert phases == [Phase.CONVERTING, Phase.SUCCESS, Phase.COPIED, Phase.SUCCESS]


def test_copy_writes_clipboard_and_resets() -> None:
    controller, scheduler, clipboard = _controller(copy_feedback_ms=2000)
    controller.submit(SAMPLE_KEY)
    scheduler.run_next()

    assert controller.copy()
    assert clipboard.text == controller.state.output
    assert controller.state.is_copied

    assert scheduler.run_next() == 2000
    assert controller.state.phase is Phase.SUCCESS


def test_second_copy_restarts_feedback_timer() -> None:
    controller, scheduler, _ = _controller()
    controller.submit(SAMPLE_KEY)
    scheduler.run_next()

    controller.copy()
    controller.copy()
    scheduler.run_next()

    assert controller.state.is_copied
    scheduler.run_next()
    assert controller.state.phase is Phase.SUCCESS


def test_clipboard_failure_is_reported() -> None:
    controller, scheduler, clipboard = _controller()
    controller.submit(SAMPLE_KEY)
    scheduler.run_next()
    clipboard.fail = True

    assert not controller.copy()
    assert controller.state.phase is Phase.SUCCESS
    assert scheduler.jobs == []


def test_paste_strips_clipboard_text() -> None:
    controller, _, clipboard = _controller()
    clipboard.text = "  ss://key\n"

    assert controller.paste() == "ss://key"


def test_edit_clears_error_and_notifies() -> None:
    controller, scheduler, _ = _controller()
    calls = []
    controller.submit("bad")
    scheduler.run_next()
    controller.subscribe(lambda state: calls.append(state.phase))

    assert controller.edit("bad!")
    assert not controller.edit("bad!")

    assert calls == [Phase.IDLE]


def test_custom_converter() -> None:
    scheduler = FakeScheduler()
    controller = ConverterController(scheduler, FakeClipboard(), converter=lambda key: "Error: nope")

    controller.submit("ss://key")
    scheduler.run_next()

    assert controller.state.error == "nope"


def test_unchanged_text_keeps_error() -> None:
    controller, scheduler, _ = _controller()
    controller.submit("bad")
    scheduler.run_next()

    # Shift, стрелки и т.п.: KeyRelease без изменения текста
    assert not controller.edit("bad")

    assert controller.state.phase is Phase.FAILED
    assert controller.state.error == "Invalid key format"


def test_raising_converter_ends_in_failed_state() -> None:
    def broken(key):
        raise RuntimeError("converter crashed")

    scheduler = FakeScheduler()
    controller = ConverterController(scheduler, FakeClipboard(), converter=broken)

    controller.submit("ss://key")
    scheduler.run_next()

    assert controller.state.phase is Phase.FAILED
    assert controller.state.error == "converter crashed"
    assert controller.state.can_submit("ss://key")
