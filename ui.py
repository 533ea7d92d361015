from asciimatics.widgets import Button, Divider, DropdownList, Frame, Label, Layout, Text

from picture import COLOR_RE


class Control:
    """
    Base for the widgets in the side panel.

    Each control adds its own layout to the frame, dispatches user intent
    through the editor and mirrors the latest state in ``sync``.
    """
    def __init__(self, frame, editor):
        self.frame = frame
        self.editor = editor

    def sync(self, state):
        pass


class ToolSelect(Control):
    """
    A dropdown list of the editor's tools.
    """
    def __init__(self, frame, editor):
        super().__init__(frame, editor)
        layout = Layout([1])
        self.frame.add_layout(layout)
        # Setting a widget value fires on_change; ignore the echo of our own sync.
        self._syncing = False
        options = [(name, name) for name in editor.tools]
        self.dropdown = DropdownList(options, label="Tool:", on_change=self._on_change)
        layout.add_widget(self.dropdown)

    def _on_change(self):
        if not self._syncing:
            self.editor.dispatch({"tool": self.dropdown.value})

    def sync(self, state):
        self._syncing = True
        try:
            self.dropdown.value = state.tool
        finally:
            self._syncing = False


class ColorSelect(Control):
    """
    Palette buttons plus a hex field for any other color.
    """
    def __init__(self, frame, editor):
        super().__init__(frame, editor)
        self._syncing = False
        layout = Layout([1, 1])
        self.frame.add_layout(layout)
        for i, (name, color) in enumerate(editor.config.palette):
            # Bind the current colour value through a default argument.
            button = Button(name, on_click=lambda c=color: self._select_color(c))
            layout.add_widget(button, i % 2)

        layout = Layout([1])
        self.frame.add_layout(layout)
        self.hex_input = Text(label="Color:", on_change=self._on_text_change, max_length=7)
        layout.add_widget(self.hex_input)

    def _select_color(self, color):
        self.editor.dispatch({"color": color})

    def _on_text_change(self):
        value = self.hex_input.value
        if not self._syncing and COLOR_RE.fullmatch(value) and value.lower() != self.editor.state.color:
            self._select_color(value)

    def sync(self, state):
        self._syncing = True
        try:
            self.hex_input.value = state.color
        finally:
            self._syncing = False


class SaveButton(Control):
    def __init__(self, frame, editor):
        super().__init__(frame, editor)
        layout = Layout([1])
        self.frame.add_layout(layout)
        layout.add_widget(Button("Save", on_click=self.save))

    def save(self):
        try:
            path = self.editor.save()
        except OSError as exc:
            self.editor.report(f"Save failed: {exc}")
        else:
            self.editor.report(f"Saved {path}")
        self.editor.sync()


class LoadButton(Control):
    def __init__(self, frame, editor):
        super().__init__(frame, editor)
        layout = Layout([3, 1])
        self.frame.add_layout(layout)
        self.path_input = Text(label="File:")
        layout.add_widget(self.path_input, 0)
        layout.add_widget(Button("Load", on_click=self.load), 1)

    def load(self):
        path = (self.path_input.value or "").strip()
        if not path:
            self.editor.report("Enter a file path to load")
        else:
            self.editor.load(path)
        self.editor.sync()


class UndoButton(Control):
    def __init__(self, frame, editor):
        super().__init__(frame, editor)
        layout = Layout([1])
        self.frame.add_layout(layout)
        self.button = Button("Undo", on_click=editor.undo)
        layout.add_widget(self.button)

    def sync(self, state):
        self.button.disabled = not state.history


class StatusLine(Control):
    def __init__(self, frame, editor):
        super().__init__(frame, editor)
        layout = Layout([1])
        self.frame.add_layout(layout)
        self.label = Label("", height=2)
        layout.add_widget(self.label)

    def sync(self, state):
        self.label.text = self.editor.status


CONTROLS = (ToolSelect, ColorSelect, SaveButton, LoadButton, UndoButton, StatusLine)


class UIFrame(Frame):
    """
    The side panel holding every control.
    """
    def __init__(self, screen, editor, x):
        super(UIFrame, self).__init__(
            screen,
            screen.height,
            screen.width - x,
            x=x,
            y=0,
            has_border=True,
            name="UI"
        )
        # Track whether the UI currently has focus (e.g., the mouse is over the UI region)
        self.has_focus: bool = False

        self.controls = []
        for i, control in enumerate(CONTROLS):
            if i:
                layout = Layout([1])
                self.add_layout(layout)
                layout.add_widget(Divider())
            self.controls.append(control(self, editor))
        self.fix()
