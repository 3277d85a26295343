# app.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import sys
import traceback
import wx

from core.log import Log
from utils.data_file import load_data
from utils.sample_data import sample_data, sample_schema

def on_exception(exc_type, exc_value, exc_traceback):
    """Show unhandled exceptions on the status bar and in the log."""
    if issubclass(exc_type, KeyboardInterrupt):
        # Allow Ctrl+C to work normally
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    tb_text = ''.join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    error_message = f"!ERROR! Unhandled Exception:\n{tb_text}"
    Log.debug(error_message, 0)

    app = wx.GetApp()
    main_frame = app.GetTopWindow() if app else None
    if main_frame is not None and hasattr(main_frame, 'SetStatusText'):
        main_frame.SetStatusText(error_message.splitlines()[-1])
    else:
        print(error_message, file=sys.stderr)

if tuple(getattr(wx, 'VERSION', (0,0,0))[:3]) < (4, 2, 3):
    raise RuntimeError(f"NestDrag requires wxPython ≥ 4.2.3; found {wx.__version__}")

from ui.main_frame import MainFrame

def main(verbosity: int = 0, stdexp: bool = False, data_path: str = None, save: bool = False):
    # Install the exception handler
    if not stdexp:
        sys.excepthook = on_exception

    Log.set_verbosity(verbosity)
    if data_path:
        data = load_data(data_path)
        Log.debug(f"Loaded {len(data)} elements from '{data_path}'", 1)
    else:
        data = sample_data()

    app = wx.App(False)

    frame = MainFrame(
        data,
        sample_schema(),
        verbosity=verbosity,
        data_path=data_path,
        save=save,
    )
    frame.Show()

    return app.MainLoop()
