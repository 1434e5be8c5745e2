#####################################################################################
#
#  Copyright (c) Crossbar.io Technologies GmbH
#  SPDX-License-Identifier: EUPL-1.2
#
#####################################################################################

import os
import re
import sys

from io import StringIO

from zope.interface import provider

from twisted.logger import ILogObserver, formatEvent, globalLogPublisher
from twisted.logger import LogLevel, formatTime

from txaio import get_global_log_level, set_global_log_level

from hosttrie import _log_categories

__all__ = ('make_stdout_observer', 'start_logging', 'LogCapturer')

STANDARD_FORMAT = "{time} [{system}] {text}"
NONE_FORMAT = "{text}"

# A regex that matches ANSI escape sequences
# http://stackoverflow.com/a/33925425
_ansi_cleaner = re.compile(r"(\x9B|\x1B\[)[0-?]*[ -\/]*[@-~]")


def strip_ansi(text):
    """
    Strip ANSI codes.
    """
    return _ansi_cleaner.sub('', text)


def make_stdout_observer(levels=(LogLevel.info, LogLevel.warn, LogLevel.error, LogLevel.critical),
                         show_source=False, format="standard", _file=None, _categories=None):
    """
    Create an observer which prints logs to L{sys.stdout}.

    Events carrying a ``log_category`` are rendered with the message format
    registered for that category.
    """
    if _file is None:
        _file = sys.__stdout__

    if _categories is None:
        _categories = _log_categories.log_categories

    if format == "standard":
        format_string = STANDARD_FORMAT
    elif format == "none":
        format_string = NONE_FORMAT
    else:
        raise ValueError("invalid log format '{}'".format(format))

    @provider(ILogObserver)
    def StandardOutObserver(event):

        if event["log_level"] not in levels:
            return

        if event.get("log_system", "-") == "-":
            log_system = "{:<10} {:>6}".format("hosttrie", os.getpid())
        else:
            log_system = event["log_system"]

        if show_source and event.get("log_namespace") is not None:
            log_system += " " + event["log_namespace"]

        if event.get("log_category"):
            category_format = _categories.get(event["log_category"])
            if category_format:
                event = event.copy()
                event["log_format"] = category_format

        event_string = strip_ansi(format_string.format(
            time=formatTime(event["log_time"]), system=log_system, text=formatEvent(event)))

        print(event_string, file=_file)

    return StandardOutObserver


_LEVELS = (LogLevel.debug, LogLevel.info, LogLevel.warn, LogLevel.error, LogLevel.critical)


def start_logging(level="info", _file=None):
    """
    Route all log events of the given level and above to stdout.

    Returns the observer, so it can be removed from the global
    publisher again.
    """
    set_global_log_level(level)
    if level == "none":
        levels = ()
    else:
        first = _LEVELS.index(LogLevel.levelWithName("debug" if level == "trace" else level))
        levels = _LEVELS[first:]
    observer = make_stdout_observer(levels=levels, _file=_file)
    globalLogPublisher.addObserver(observer)
    return observer


class LogCapturer(object):
    """
    Collects every log event emitted inside a ``with`` block, e.g. the
    ``HT1XX`` events of trie updates. Events are kept in ``logs``, rendered
    text in ``log_text``, and ``get_category()`` filters by category code.
    """
    def __init__(self, level="debug"):
        self.logs = []
        self._old_log_level = get_global_log_level()
        self.desired_level = level
        self.log_text = StringIO()

        self._out_observer = make_stdout_observer(
            levels=(LogLevel.debug, LogLevel.info, LogLevel.warn,
                    LogLevel.error), _file=self.log_text)

    def get_category(self, identifier):
        """
        Get logs captured with the given log category.
        """
        return [x for x in self.logs if x.get("log_category") == identifier]

    def _got_log(self, log):
        self.logs.append(log)

        # Render them, to make sure there are no "can't format" errors
        self._out_observer(log)

    def __enter__(self):
        set_global_log_level(self.desired_level)
        globalLogPublisher.addObserver(self._got_log)
        return self

    def __exit__(self, type, value, traceback):
        globalLogPublisher.removeObserver(self._got_log)
        set_global_log_level(self._old_log_level)
