import logging

import gi
gi.require_version('Gtk', '3.0')
from gi.repository import Gtk, Gdk, GLib

from .errors import LauncherError
from .ranking import match_span
from .usage import FONT_WEIGHTS, pango_font, parse_font

logger = logging.getLogger(__name__)

FOCUS_OUT_DELAY_MS = 500


def highlight_markup(text, query, font, match_font, match_color=None):
    """Pango markup for text with the first match of query in match_font."""
    font = GLib.markup_escape_text(pango_font(font))
    span = match_span(text, query)
    if span is None:
        return f'<span font="{font}">{GLib.markup_escape_text(text)}</span>'

    start, end = span
    match_attrs = f'font="{GLib.markup_escape_text(pango_font(match_font))}"'
    if match_color:
        match_attrs += f' foreground="{GLib.markup_escape_text(match_color)}"'
    return (
        f'<span font="{font}">'
        + GLib.markup_escape_text(text[:start])
        + f"<span {match_attrs}>" + GLib.markup_escape_text(text[start:end]) + "</span>"
        + GLib.markup_escape_text(text[end:])
        + "</span>"
    )


def css_font(value):
    family, size, weight = parse_font(value)
    rules = [f"font-family: {family};"]
    if size:
        rules.append(f"font-size: {size}pt;")
    rules.append(f"font-weight: {FONT_WEIGHTS.get(weight, 400)};")
    return " ".join(rules)


class LauncherWindow(Gtk.Window):

    def __init__(self, state):
        super().__init__(title="Launcher")
        self.set_role("quicklaunch")
        self.set_default_size(600, -1)
        self.set_decorated(False)
        self.set_type_hint(Gdk.WindowTypeHint.DIALOG)
        self.set_position(Gtk.WindowPosition.CENTER)
        self.set_keep_above(True)
        self.set_skip_taskbar_hint(True)
        self.set_skip_pager_hint(True)

        self.state = state
        self.focus_out_timeout = None

        self.build_ui()
        self.apply_css()
        self.connect("focus-out-event", self.on_focus_out)
        self.connect("focus-in-event", self.on_focus_in)
        self.connect("key-press-event", self.on_key_press)

    def apply_css(self):
        style = self.state.style
        css = f"""
            window, list, row {{
                background-color: {style['background']};
            }}
            entry {{
                color: {style['title']};
                {css_font(style['large'])}
            }}
            .result-name {{
                color: {style['title']};
            }}
            .result-comment {{
                color: {style['comment']};
            }}
            row:selected {{
                background-color: {style['highlight']};
            }}
        """
        css_provider = Gtk.CssProvider()
        try:
            css_provider.load_from_data(css.encode())
        except GLib.Error as e:
            # invalid color values in launcher.conf
            logger.warning("Ignoring style overrides: %s", e.message)
            return
        Gtk.StyleContext.add_provider_for_screen(
            Gdk.Screen.get_default(),
            css_provider,
            Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
        )

    def build_ui(self):
        vbox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        self.add(vbox)

        self.search_entry = Gtk.Entry()
        self.search_entry.connect("changed", self.on_search_changed)
        self.search_entry.connect("activate", self.on_search_activate)
        vbox.pack_start(self.search_entry, False, False, 0)

        self.listbox = Gtk.ListBox()
        self.listbox.set_selection_mode(Gtk.SelectionMode.SINGLE)
        self.listbox.set_can_focus(False)
        self.listbox.connect("row-activated", self.on_row_activated)
        vbox.pack_start(self.listbox, True, True, 0)

    def show_results(self):
        for child in self.listbox.get_children():
            self.listbox.remove(child)

        for app, score in self.state.result_applications():
            self.listbox.add(self.create_result_row(app))

        self.listbox.show_all()
        self.select_current_row()
        self.resize(self.get_allocated_width(), 1)

    def create_result_row(self, app):
        row = Gtk.ListBoxRow()
        row.app_id = app.id

        hbox = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=8)
        hbox.set_margin_start(14)
        hbox.set_margin_end(14)
        hbox.set_margin_top(10)
        hbox.set_margin_bottom(10)

        query = self.state.query
        style = self.state.style
        name = Gtk.Label()
        name.set_markup(highlight_markup(app.name, query, style["regular"], style["bold"], style["match"]))
        name.get_style_context().add_class("result-name")
        hbox.pack_start(name, False, False, 0)

        comment = Gtk.Label()
        comment.set_markup(highlight_markup(app.comment, query, style["smallregular"], style["smallbold"]))
        comment.set_xalign(0.0)
        comment.set_ellipsize(3)
        comment.get_style_context().add_class("result-comment")
        hbox.pack_start(comment, True, True, 0)

        row.add(hbox)
        return row

    def select_current_row(self):
        row = self.listbox.get_row_at_index(self.state.selected)
        if row:
            self.listbox.select_row(row)

    def launch_selected(self):
        try:
            app = self.state.launch_selected()
        except LauncherError as e:
            logger.error("%s", e)
            return
        if app is not None:
            self.destroy()

    def on_search_changed(self, entry):
        self.state.set_query(entry.get_text())
        self.show_results()

    def on_search_activate(self, entry):
        self.launch_selected()

    def on_row_activated(self, listbox, row):
        self.state.selected = row.get_index()
        self.launch_selected()

    def on_focus_out(self, widget, event):
        if self.focus_out_timeout:
            GLib.source_remove(self.focus_out_timeout)

        self.focus_out_timeout = GLib.timeout_add(FOCUS_OUT_DELAY_MS, self.delayed_destroy)
        return False

    def on_focus_in(self, widget, event):
        if self.focus_out_timeout:
            GLib.source_remove(self.focus_out_timeout)
            self.focus_out_timeout = None
        return False

    def delayed_destroy(self):
        self.focus_out_timeout = None
        self.destroy()
        return False

    def on_key_press(self, widget, event):
        if event.keyval == Gdk.KEY_Escape:
            self.destroy()
            return True

        if event.keyval in (Gdk.KEY_Up, Gdk.KEY_Down):
            self.state.move_selection(-1 if event.keyval == Gdk.KEY_Up else 1)
            self.select_current_row()
            return True

        return False
