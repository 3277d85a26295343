################################################################################################
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the code for the main window's status bar: a message field,
a field describing the drag in progress, and a right-click log menu.
'''
################################################################################################

import wx

from core.log import Log

################################################################################################
class LogPopup(wx.PopupTransientWindow):
    WIN_HEIGHT = 300

    def __init__(self, parent):
        super().__init__(parent, wx.SIMPLE_BORDER)
        text = "\n".join(f"{i:6d}  [{ts}] {msg}" for i, (ts, msg) in enumerate(Log.get()))

        self.view = wx.TextCtrl(
            self,
            value=text,
            size=(parent.Size[0], self.WIN_HEIGHT),
            style=wx.TE_MULTILINE | wx.TE_READONLY | wx.TE_DONTWRAP,
        )
        self.view.SetFont(wx.Font(wx.FontInfo(9).Family(wx.FONTFAMILY_TELETYPE)))
        self.view.SetBackgroundColour((0, 0, 0))
        self.view.SetForegroundColour((128, 192, 128))
        self.view.ShowPosition(self.view.GetLastPosition())

        box_main = wx.BoxSizer(wx.VERTICAL)
        box_main.Add(self.view, 1, wx.EXPAND)
        self.SetSizerAndFit(box_main)

    def OnDismiss(self):
        self.Parent.popup = None

################################################################################################
class StatusBar(wx.StatusBar):
    FIELD_MSG  = 0
    FIELD_DRAG = 1

    def __init__(self, parent):
        super().__init__(parent)
        self.SetFieldsCount(2)
        self.SetStatusWidths([-3, -1])
        self.popup = None
        self.Bind(wx.EVT_RIGHT_DOWN, self.OnRightDown)
        Log.debug("Create StatusBar", 1)

    def set_drag_text(self, text: str):
        self.SetStatusText(text, self.FIELD_DRAG)

    def OnRightDown(self, event):
        menu = wx.Menu()
        item_show = menu.Append(wx.ID_ANY, "Show Log")
        menu.AppendSeparator()
        item_save = menu.Append(wx.ID_SAVE, "Save Log to File...")
        item_clear = menu.Append(wx.ID_CLEAR, "Clear Log")

        self.Bind(wx.EVT_MENU, self.OnShowLog, item_show)
        self.Bind(wx.EVT_MENU, self.OnSaveLogToFile, item_save)
        self.Bind(wx.EVT_MENU, self.OnClearLog, item_clear)

        self.PopupMenu(menu)
        menu.Destroy()

    def OnShowLog(self, event):
        if self.popup is not None:
            self.popup.Dismiss()
        self.popup = LogPopup(self)
        pos = self.ClientToScreen((0, 0))
        self.popup.Position((pos[0], pos[1] - LogPopup.WIN_HEIGHT), (0, 0))
        self.popup.Popup()

    def OnSaveLogToFile(self, event):
        with wx.FileDialog(
            self,
            "Save Log to file",
            wildcard="Log files (*.log)|*.log|Text files (*.txt)|*.txt|All files (*.*)|*.*",
            style=wx.FD_SAVE | wx.FD_OVERWRITE_PROMPT
        ) as fileDialog:
            if fileDialog.ShowModal() == wx.ID_CANCEL:
                return
            path = fileDialog.GetPath()
            Log.write_to_file(path)
            self.SetStatusText(f"Log saved to: {path}", self.FIELD_MSG)

    def OnClearLog(self, event):
        Log.clear()
        self.SetStatusText("Log cleared", self.FIELD_MSG)

################################################################################################
################################################################################################
