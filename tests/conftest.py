from unittest.mock import MagicMock

import pytest

from quotepush.core.state import Quote, QuoteState
from quotepush.core.status import ConsoleView, Toaster


class FakeTimer:
    def __init__(self, interval, function, args=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.function(*self.args)


def make_response(payload=None, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = payload
    return response


@pytest.fixture
def timers():
    return []


@pytest.fixture
def view():
    return ConsoleView(echo=False)


@pytest.fixture
def toaster(view, timers):
    def factory(interval, function, args=None):
        timer = FakeTimer(interval, function, args)
        timers.append(timer)
        return timer

    return Toaster(view, timer_factory=factory)


@pytest.fixture
def state():
    return QuoteState(Quote("Hello", "A"))
