"""
TUI Layout
prompt_toolkit layout configuration
"""
from prompt_toolkit.layout import Layout, HSplit, VSplit, Window, Float
from prompt_toolkit.layout.containers import FloatContainer, ConditionalContainer
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.widgets import TextArea
from prompt_toolkit.filters import Condition
from .models import UIState
from .widgets import (
    create_result_window,
    create_stats_window,
    create_history_window,
    create_examples_window,
    create_status_bar,
)


def create_input_field(state: UIState):
    """Create the free-text input widget"""
    return TextArea(
        height=Dimension(min=3, max=6),
        multiline=True,
        wrap_lines=True,
        style='class:input',
    )


def create_command_line(state: UIState):
    """Create the command line widget"""
    return TextArea(
        height=1,
        prompt=':',
        style='class:commandline',
        multiline=False,
        wrap_lines=False,
    )


def _separator():
    return Window(height=1, char='─', style='class:separator')


def create_root_container(state: UIState, input_widget, cmd_widget):
    """Create the root container for the TUI

    Returns:
        (container, result_window) tuple - result_window holds focus outside insert mode
    """
    result_window = create_result_window(state)

    title = Window(
        height=1,
        content=_title_control(),
        style='class:title',
    )

    # Lower body: stats + history | separator | examples
    lower = VSplit([
        HSplit([
            create_stats_window(state),
            create_history_window(state),
        ]),
        Window(width=1, char='│', style='class:separator'),
        create_examples_window(state),
    ])

    root = HSplit([
        title,
        input_widget,
        _separator(),
        result_window,
        _separator(),
        lower,
        create_status_bar(state),
    ])

    # Command line (shown when command_active)
    command_line_container = ConditionalContainer(
        content=cmd_widget,
        filter=Condition(lambda: state.command_active),
    )

    float_container = FloatContainer(
        content=root,
        floats=[
            Float(
                bottom=0,
                left=0,
                right=0,
                content=command_line_container,
            ),
        ],
    )

    return float_container, result_window


def _title_control():
    return FormattedTextControl([
        ("class:title", " Palindrome Checker "),
        ("class:dim", " Check if your text is a palindrome"),
    ])


def create_layout(state: UIState, input_widget, cmd_widget):
    """Create the prompt_toolkit Layout

    Returns:
        (Layout, result_window) tuple - result_window needed to leave insert mode
    """
    root, result_window = create_root_container(state, input_widget, cmd_widget)
    return Layout(root, focused_element=result_window), result_window
