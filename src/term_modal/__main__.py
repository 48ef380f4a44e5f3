"""
Interactive modal demo.

Run with: python -m term_modal

Tab/Shift+Tab or the arrow keys move between buttons, Enter activates the
focused one, Y/N pick a button directly, Esc dismisses. The mouse works
too: hover to focus, click to choose. After the dialog closes, press S to
show it again or Q to quit.
"""

from .animation import DisplayState
from .component import Action, ActionKind, Component, FocusTarget
from .config import RuntimeConfig
from .controller import ComponentController
from .events import KeyPress
from .logging_setup import configure_logging, get_logger
from .modal import Modal
from .theme import compose_style

_FOCUS_TEXT = {
    FocusTarget.PRIMARY: "Focused: Yep! (primary)",
    FocusTarget.SECONDARY: "Focused: Nope (secondary)",
    FocusTarget.NONE: "Focused: none",
}


class StatusScreen(Component):
    """Background layer showing the dialog's focus and the last outcome."""

    def __init__(self, modal: Modal):
        super().__init__()
        self.modal = modal
        self.message = "Use the mouse or the keyboard (Tab/Y/N)"

    def handle_event(self, event):
        if isinstance(event, KeyPress) and event.code in ('q', 's'):
            return event.code
        return None

    def update(self, message):
        if message == 'q':
            return Action(ActionKind.QUIT)
        return Action(ActionKind.CUSTOM, payload='show')

    def render(self, surface, area):
        theme = self.modal.theme
        surface.draw_text(area.x, area.y, "term-modal demo", compose_style(theme.primary, None, 'bold'))
        surface.draw_text(area.x, area.y + 2, _FOCUS_TEXT[self.modal.focused_button],
                          compose_style(theme.accent))
        surface.draw_text(area.x, area.bottom - 2, f"> {self.message}", compose_style(theme.accent))


class DemoController(ComponentController):

    def __init__(self, config: RuntimeConfig):
        super().__init__(config=config)
        self.modal = Modal(
            "Are you sure you want to quit?",
            title="",
            primary_label="Yep!",
            secondary_label="Nope",
            theme=config.make_theme(),
            term=self.term,
        )
        self.status = StatusScreen(self.modal)
        self.confirmed = False
        self.push_component(self.status)
        self._open_modal()

    def _open_modal(self):
        self.push_component(self.modal)
        self.modal.show()

    def on_action(self, component, action):
        if action.kind is ActionKind.QUIT:
            self.stop()
        elif action.kind is ActionKind.CUSTOM:
            self._open_modal()
        else:
            self.confirmed = action.kind is ActionKind.CONFIRM
            self.status.message = "Confirmed!" if self.confirmed else "Cancelled!"
            self.modal.hide()
        self.status.redraw = True

    def on_tick(self):
        if self.current_component() is not self.modal:
            return
        if self.modal.display_state is DisplayState.HIDDEN:
            self.pop_component()
            if self.confirmed:
                self.stop()
            else:
                self.status.message += " Press S to show the dialog again, Q to quit."


def main():
    config = RuntimeConfig.from_env()
    configure_logging(config.log_file, config.log_level)
    get_logger().info(
        "Starting demo at %.0f fps, transitions take %.0f ms",
        config.fps, config.transition_duration * 1000,
    )
    DemoController(config).run()


if __name__ == '__main__':
    main()
