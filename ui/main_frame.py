'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import wx
from typing import Any, List, Optional

from core.log import Log
from core.order import order_ids
from ui.list_view import DragListView
from ui.statusbar import StatusBar
from utils.data_file import save_data
from utils.sample_data import random_label


class MainFrame(wx.Frame):
    """Main application frame: the drag list between a header and a footer."""
    def __init__(
            self,
            data: List[Any],
            schema,
            verbosity: int = 0,
            data_path: Optional[str] = None,
            save: bool = False,
    ):
        super().__init__(None, title="NestDrag", size=(480, 700))
        self.SetMinSize((320, 400))

        Log.set_verbosity(verbosity)
        self.data_path = data_path
        self.save = bool(save and data_path)
        self._next_id = self._max_id(data, schema) + 1

        self.status = StatusBar(self)
        self.SetStatusBar(self.status)
        self._build_body(data, schema)
        self.SetStatusText(f"{len(data)} elements loaded.")
        self.Bind(wx.EVT_CLOSE, self._on_close)

    # ---------------- layout ----------------

    def _build_body(self, data, schema):
        root = wx.Panel(self)
        main_sizer = wx.BoxSizer(wx.VERTICAL)

        # Header
        btn_delete = wx.Button(root, label="Delete first item")
        btn_delete.Bind(wx.EVT_BUTTON, self.on_delete_first)
        main_sizer.Add(btn_delete, 0, wx.EXPAND | wx.ALL, 5)

        # List
        self.view = DragListView(
            root, data, schema,
            on_change=self.on_data_changed,
            on_drag_start=self._on_drag_start,
            on_drag_end=self._on_drag_end,
        )
        main_sizer.Add(self.view, 1, wx.EXPAND | wx.LEFT | wx.RIGHT, 5)

        # Footer
        btn_add = wx.Button(root, label="Add item")
        btn_add.Bind(wx.EVT_BUTTON, self.on_add_item)
        main_sizer.Add(btn_add, 0, wx.EXPAND | wx.ALL, 5)

        root.SetSizer(main_sizer)

    @staticmethod
    def _max_id(data, schema) -> int:
        ids = [-1]
        for element in data:
            if schema.is_container(element):
                ids.append(schema.container_key(element))
                ids.extend(schema.key(child) for child in schema.children(element))
            else:
                ids.append(schema.key(element))
        return max(i for i in ids if isinstance(i, int))

    # ---------------- actions ----------------

    def on_delete_first(self, event=None):
        """Remove the first root element, item or container."""
        data = self.view.data
        if not data:
            self.SetStatusText("Nothing to delete.")
            return
        self._apply(data[1:], "Deleted first element.")

    def on_add_item(self, event=None):
        """Append a new root item with a random label."""
        item = {"id": self._next_id, "value": random_label()}
        self._next_id += 1
        self._apply(self.view.data + [item], f"Added item {item['id']}.")

    def _apply(self, data: List[Any], message: str):
        self.view.set_data(data)
        self._persist(data)
        self.SetStatusText(message)

    # ---------------- session callbacks ----------------

    def _on_drag_start(self, entry_id, is_container: bool):
        kind = "container" if is_container else "item"
        self.status.set_drag_text(f"Dragging {kind} {entry_id}")

    def _on_drag_end(self):
        self.status.set_drag_text("")

    def on_data_changed(self, data: List[Any]):
        """Called by the drag session after a reorder is committed."""
        self._persist(data)
        ids = order_ids(self.view.session.committed_order)
        self.SetStatusText(f"Order: {', '.join(str(i) for i in ids)}")
        Log.debug(f"Committed order {ids}", 1)

    def _persist(self, data: List[Any]):
        if not self.save:
            return
        try:
            save_data(self.data_path, data)
        except OSError as e:
            Log.debug(f"Failed to save '{self.data_path}': {e}", 0)
            self.SetStatusText(f"Error saving data: {e}")
            return
        Log.debug(f"Saved {len(data)} elements to '{self.data_path}'", 2)

    def _on_close(self, event):
        self.view.cleanup()
        event.Skip()
