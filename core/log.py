################################################################################################

'''

Copyright 2025 Aaron Vose (avose@aaronvose.net)

Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the code for the in-process debug logger shared by the
drag engine and the demo UI.

'''

################################################################################################

import inspect
import os
from collections import deque
from datetime import datetime

################################################################################################

# Pointer samples can arrive at 60+ Hz while verbose; keep the backlog bounded.
MAX_ENTRIES = 5000

def _timestamp() -> str:
    return datetime.now().strftime("%m/%d/%Y %H:%M:%S")

class LogManager():
    __log = None

    def __init__(self, verbosity: int = 0, max_entries: int = MAX_ENTRIES):
        if LogManager.__log is None:
            LogManager.__log = deque(maxlen=max_entries)
            LogManager.__log.append((_timestamp(), "Begin NestDrag Log"))
        self.verbosity = verbosity

    def add(self, text: str):
        LogManager.__log.append((_timestamp(), text))

    def enabled(self, level: int = 0) -> bool:
        """True when a message at `level` would be recorded."""
        return self.verbosity >= level

    def debug(self, text: str, level: int = 0):
        if not self.enabled(level):
            return
        # Tag with the caller's file name
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        if caller is not None:
            filename = os.path.basename(caller.f_code.co_filename)
        else:
            filename = "unknown"
        self.add(f"[{filename}] {text}")

    def get(self, index: int = None):
        if index is not None:
            return LogManager.__log[index]
        return list(LogManager.__log)

    def count(self):
        return len(LogManager.__log)

    def set_verbosity(self, verbosity: int = 0):
        self.verbosity = verbosity

    def clear(self):
        """Clear all log entries."""
        LogManager.__log.clear()
        LogManager.__log.append((_timestamp(), "Log cleared"))

    def write_to_file(self, filepath: str):
        """Write all log entries to a file."""
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                for timestamp, message in LogManager.__log:
                    f.write(f"[{timestamp}] {message}\n")
            self.add(f"Log written to file: {filepath}")
        except OSError as e:
            self.add(f"Failed to write log to file '{filepath}': {e}")

################################################################################################

Log = LogManager()

################################################################################################
