from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.filters import Condition


def create_key_bindings(finder):
    key_bindings = KeyBindings()

    @Condition
    def is_multi():
        return finder.multi

    @key_bindings.add("escape", eager=True)
    @key_bindings.add("c-c")
    @key_bindings.add("c-d")
    def exit_(event):
        event.app.exit(result=None)

    @key_bindings.add("up", eager=True)
    @key_bindings.add("c-p", eager=True)
    def cursor_up_(event):
        finder.result_buffer.cursor_up()

    @key_bindings.add("down", eager=True)
    @key_bindings.add("c-n", eager=True)
    def cursor_down_(event):
        finder.result_buffer.cursor_down()

    @key_bindings.add("tab", filter=is_multi)
    def toggle_(event):
        finder.toggle_selection(finder.current_result())
        if finder.reverse:
            finder.result_buffer.cursor_down()
        else:
            finder.result_buffer.cursor_up()

    @key_bindings.add("s-tab", filter=is_multi)
    def unselect_(event):
        result = finder.current_result()
        if result is not None:
            finder.selected.discard(result.index)

    return key_bindings
