"""Event dashboard UI panels.

Each panel renders one region of the page and wires its widgets to the
session's `InteractionController` through `on_click` callbacks.
"""
