"""Tests for ComponentController."""

import pytest
from unittest.mock import MagicMock, Mock
from blessed import Terminal
from term_modal import (
    FRAME_MAX,
    Action,
    ActionKind,
    Component,
    ComponentController,
    DisplayState,
    FocusTarget,
    KeyPress,
    Modal,
    Rect,
    Resize,
    RuntimeConfig,
    Tick,
)


def create_mock_terminal(width=80, height=24):
    """Create a mock Terminal with context-manager modes."""
    term = Mock(spec=Terminal)
    term.width = width
    term.height = height
    term.move = Mock(return_value='')
    term.fullscreen = MagicMock()
    term.cbreak = MagicMock()
    term.hidden_cursor = MagicMock()
    return term


class Layer(Component):
    """Component that records the calls it receives."""

    def __init__(self, message=None, action=None, trigger=None):
        super().__init__()
        self.message = message
        self.trigger = trigger
        self.action = action
        self.events = []
        self.updates = []
        self.renders = []
        self.ticks = 0

    def handle_event(self, event):
        self.events.append(event)
        if self.trigger is not None and event != self.trigger:
            return None
        return self.message

    def update(self, message):
        self.updates.append(message)
        return self.action

    def render(self, surface, area):
        self.renders.append(area)

    def advance_animation(self):
        self.ticks += 1


class RecordingController(ComponentController):

    def __init__(self, events, **kwargs):
        source = Mock()
        source.poll.side_effect = events
        super().__init__(
            term=create_mock_terminal(),
            config=RuntimeConfig(mouse=False),
            event_source=source,
            register_resize_handler=False,
            **kwargs,
        )
        self.surface = Mock()
        self.actions = []

    def on_action(self, component, action):
        self.actions.append((component, action))
        if action.kind is ActionKind.QUIT:
            self.stop()


class TestComponentStack:
    """Tests for pushing and popping components."""

    def test_push_and_current(self):
        controller = RecordingController([])
        bottom, top = Layer(), Layer()
        controller.push_component(bottom)
        controller.push_component(top)

        assert controller.current_component() is top
        assert controller.components == [bottom, top]

    def test_pop_marks_parent_for_redraw(self):
        controller = RecordingController([])
        bottom, top = Layer(), Layer()
        controller.push_component(bottom)
        controller.push_component(top)
        bottom.redraw = False

        assert controller.pop_component() is top
        assert bottom.redraw is True

    def test_pop_empty(self):
        controller = RecordingController([])

        assert controller.pop_component() is None
        assert controller.current_component() is None


class TestStep:
    """Tests for processing a single event."""

    def test_event_goes_to_top_only(self):
        controller = RecordingController([])
        bottom, top = Layer(), Layer()
        controller.push_component(bottom)
        controller.push_component(top)

        controller.step(KeyPress('a'))

        assert top.events == [KeyPress('a')]
        assert bottom.events == []

    def test_message_applied_and_action_forwarded(self):
        """Test that a message is applied once and its action reaches on_action."""
        action = Action(ActionKind.CONFIRM, FocusTarget.PRIMARY)
        layer = Layer(message='go', action=action)
        controller = RecordingController([])
        controller.push_component(layer)

        controller.step(KeyPress('y'))

        assert layer.updates == ['go']
        assert controller.actions == [(layer, action)]

    def test_no_message_no_update(self):
        layer = Layer()
        controller = RecordingController([])
        controller.push_component(layer)

        controller.step(Tick())

        assert layer.updates == []
        assert controller.actions == []

    def test_all_layers_animate(self):
        controller = RecordingController([])
        layers = [Layer(), Layer()]
        for layer in layers:
            controller.push_component(layer)

        controller.step(Tick())

        assert [layer.ticks for layer in layers] == [1, 1]

    def test_redraw_all_layers_when_requested(self):
        """Test that all layers are drawn bottom-up and flags are cleared."""
        controller = RecordingController([])
        bottom, top = Layer(), Layer()
        controller.push_component(bottom)
        controller.push_component(top)
        bottom.redraw = False

        controller.step(Tick())

        assert bottom.renders == [Rect(0, 0, 80, 24)]
        assert top.renders == [Rect(0, 0, 80, 24)]
        assert not bottom.redraw and not top.redraw
        controller.surface.clear.assert_called_once()
        controller.surface.flush.assert_called_once()

    def test_no_redraw_when_idle(self):
        controller = RecordingController([])
        layer = Layer()
        controller.push_component(layer)
        layer.redraw = False

        controller.step(Tick())

        assert layer.renders == []

    def test_resize_forces_redraw(self):
        controller = RecordingController([])
        layer = Layer()
        controller.push_component(layer)
        layer.redraw = False

        controller.step(Resize(100, 40))

        assert len(layer.renders) == 1


class TestRun:
    """Tests for the main loop."""

    def test_run_without_components(self):
        controller = RecordingController([])

        with pytest.raises(RuntimeError):
            controller.run()

    def test_run_until_stopped(self):
        """Test that the loop processes events until stop() is called."""
        layer = Layer(message='quit', action=Action(ActionKind.QUIT), trigger=KeyPress('q'))
        controller = RecordingController([Tick(), KeyPress('q'), KeyPress('never')])
        controller.push_component(layer)

        controller.run()

        assert layer.events == [Tick(), KeyPress('q')]
        controller.term.fullscreen.assert_called_once()
        controller.term.cbreak.assert_called_once()
        controller.term.hidden_cursor.assert_called_once()

    def test_run_until_stack_empty(self):
        class Popper(RecordingController):
            def on_tick(self):
                self.pop_component()

        controller = Popper([Tick(), Tick()])
        controller.push_component(Layer())

        controller.run()

        assert controller.components == []

    def test_sigwinch_queues_resize(self):
        """Test that the resize signal handler queues a Resize event."""
        controller = RecordingController([])
        controller._handle_sigwinch(None, None)

        controller.events.notify_resize.assert_called_once()


class TestModalHosting:
    """Tests for driving a Modal through the controller."""

    def test_confirm_flow(self):
        """Test the modal appears, confirms on 'y' and stays open."""
        events = [Tick()] * FRAME_MAX + [KeyPress('y')]
        controller = RecordingController(events)
        modal = Modal("Continue?", term=controller.term)
        controller.push_component(modal)
        modal.show()

        for event in events:
            controller.step(event)

        assert modal.display_state is DisplayState.VISIBLE
        assert controller.actions == [(modal, Action(ActionKind.CONFIRM, FocusTarget.PRIMARY))]

    def test_escape_flow(self):
        """Test that Escape cancels and the modal animates closed."""
        controller = RecordingController([])
        modal = Modal("Continue?", term=controller.term)
        controller.push_component(modal)
        modal.show()
        for _ in range(FRAME_MAX):
            controller.step(Tick())

        controller.step(KeyPress('KEY_ESCAPE'))
        assert controller.actions == [(modal, Action(ActionKind.CANCEL))]

        for _ in range(FRAME_MAX - 1):
            controller.step(Tick())
        assert modal.display_state is DisplayState.HIDDEN
