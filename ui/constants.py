'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import wx

# Shared UI constants
PADDING = 10
ITEM_MIN_H = 37
CHILD_INDENT_W = 20
CONTAINER_TOP_H = 25
CONTAINER_BOTTOM_H = 50
CONTAINER_RADIUS = 12
DRAG_SHADOW = 4
TIMER_MS = 16

DEFAULT_BG_COLOR = wx.Colour(240, 240, 255)
ITEM_COLOR = wx.Colour(40, 70, 200)
ITEM_TEXT_COLOR = wx.Colour(255, 255, 255)
CONTAINER_COLOR = wx.Colour(0, 200, 220)
CONTAINER_TEXT_COLOR = wx.Colour(20, 20, 20)
DRAG_OUTLINE_COLOR = wx.Colour(255, 170, 0)
SHADOW_COLOR = wx.Colour(0, 0, 0, 60)
