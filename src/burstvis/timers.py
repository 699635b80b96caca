import sched
import time


def _no_wait(_seconds):
    # Timers run from inside the frame loop, so the scheduler never sleeps.
    pass


class ManualClock:
    """A time source that only moves when told to. Used for offline rendering."""

    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds

    def set(self, now):
        self.now = now


class Timer:
    """
    Handle for a scheduled callback.
    Once cancelled it never fires again, even if an event for it is
    already queued.
    """

    def __init__(self, scheduler, delay, callback, args, period=None):
        self.scheduler = scheduler
        self.callback = callback
        self.args = args
        self.period = period
        self.active = True
        self._event = scheduler._enter(delay, self._fire)

    def _fire(self):
        if not self.active:
            return
        if self.period is None:
            self.active = False
            self._event = None
        else:
            self._event = self.scheduler._enter(self.period, self._fire)
        self.callback(*self.args)

    def cancel(self):
        if not self.active:
            return
        self.active = False
        if self._event is not None:
            self.scheduler._cancel(self._event)
        self._event = None


class FrameScheduler:
    """
    Cooperative timers for a single-threaded frame loop.
    Callbacks only run when `run_pending` is called, once per frame.
    """

    def __init__(self, timefunc=time.monotonic):
        self.timefunc = timefunc
        self._scheduler = sched.scheduler(timefunc, _no_wait)

    def call_later(self, delay, callback, *args):
        """Run `callback(*args)` once, `delay` seconds from now."""
        return Timer(self, delay, callback, args)

    def call_every(self, period, callback, *args):
        """Run `callback(*args)` every `period` seconds until cancelled."""
        return Timer(self, period, callback, args, period=period)

    def _enter(self, delay, action):
        return self._scheduler.enter(delay, 0, action)

    def _cancel(self, event):
        if event in self._scheduler.queue:
            self._scheduler.cancel(event)

    def run_pending(self):
        """Run every callback whose time has come, then return."""
        self._scheduler.run(blocking=False)

    @property
    def pending(self):
        return len(self._scheduler.queue)
