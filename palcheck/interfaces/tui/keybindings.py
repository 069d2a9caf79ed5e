"""
TUI Keybindings
Vi-style keymaps for PalCheck
"""
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.filters import Condition
from prompt_toolkit.application.current import get_app
from palcheck.core.session import EXAMPLE_INPUTS
from .models import UIState


def create_keybindings(state: UIState, controller, input_widget, cmd_widget, home_window) -> KeyBindings:
    """Create keybindings for the TUI"""
    kb = KeyBindings()
    cmd_buffer = cmd_widget.buffer

    # Define mode filters once
    is_command_mode = Condition(lambda: state.command_active)
    is_insert_mode = Condition(lambda: state.editing)
    is_normal_mode = ~is_command_mode & ~is_insert_mode

    # Insert mode: keys go to the input field
    @kb.add('i', filter=is_normal_mode)
    @kb.add('a', filter=is_normal_mode)
    def _(event):
        """Edit the input text"""
        state.editing = True
        get_app().layout.focus(input_widget)

    @kb.add('escape', filter=is_insert_mode)
    @kb.add('c-c', filter=is_insert_mode)
    def _(event):
        """Leave insert mode"""
        state.editing = False
        get_app().layout.focus(home_window)

    # Examples: 1-7 load the numbered example
    for number in range(1, len(EXAMPLE_INPUTS) + 1):
        @kb.add(str(number), filter=is_normal_mode)
        def _(event, number=number):
            """Load example"""
            controller.select_example(number)

    @kb.add('x', filter=is_normal_mode)
    def _(event):
        """Clear input"""
        controller.clear_input()

    @kb.add('y', filter=is_normal_mode)
    def _(event):
        """Copy input to clipboard"""
        controller.copy_input()

    @kb.add('enter', filter=is_normal_mode)
    def _(event):
        """Check now instead of waiting for the debounce"""
        controller.check_now()

    # Quit
    @kb.add('q', filter=is_normal_mode)
    def _(event):
        """Quit the TUI"""
        event.app.exit()

    # Command mode: enter with :
    @kb.add(':', filter=is_normal_mode)
    def _(event):
        """Enter command mode"""
        state.command_active = True
        cmd_buffer.text = ""
        get_app().layout.focus(cmd_widget)
        get_app().invalidate()

    # Command buffer: execute command on Enter
    @kb.add('enter', filter=is_command_mode)
    def _(event):
        """Execute command"""
        line = cmd_buffer.text
        state.command_active = False
        cmd_buffer.text = ""

        # Return focus to main UI before the command runs (it may quit)
        get_app().layout.focus(home_window)

        if line:
            controller.execute_command(line)

    # Command buffer: cancel on Escape
    @kb.add('escape', filter=is_command_mode)
    @kb.add('c-c', filter=is_command_mode)
    def _(event):
        """Cancel command mode"""
        state.command_active = False
        cmd_buffer.text = ""
        get_app().layout.focus(home_window)

    return kb
