from prompt_toolkit.layout.layout import Layout
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.layout.containers import Window, HSplit
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.formatted_text import FormattedText

from pyfzy.processors import MatchProcessor


def result_height(finder):
    """
    Size the result list to the current matches, capped by the finder's
    height. An empty result list still keeps one row.
    """
    rows = max(len(finder.results), 1)
    if finder.height is None:
        return Dimension(min=1, preferred=rows)
    height = max(finder.height, 1)
    return Dimension(min=1, max=height, preferred=min(rows, height))


def prompt_prefix(finder):
    # case-sensitive matching shows up in the prompt
    if finder.config.case_sensitive:
        return FormattedText([("bold", "Aa> ")])
    return FormattedText([("bold", "> ")])


def create_result_window(finder):
    return Window(
        BufferControl(
            buffer=finder.result_buffer,
            focusable=False,
            include_default_input_processors=False,
            input_processors=[MatchProcessor(finder)],
        ),
        height=lambda: result_height(finder),
        wrap_lines=False,
        always_hide_cursor=True,
        cursorline=True,
        get_line_prefix=finder.get_result_prefix,
    )


def create_prompt_window(finder):
    return Window(
        BufferControl(buffer=finder.prompt_buffer, include_default_input_processors=False),
        height=Dimension.exact(1),
        dont_extend_height=True,
        get_line_prefix=lambda lineno, wrap_count: prompt_prefix(finder),
    )


def create_layout(finder):
    """
    Result list, match count and prompt. The prompt is nearest the best
    match: at the bottom, or at the top when the finder is reversed.
    """
    results = create_result_window(finder)
    status = Window(
        FormattedTextControl(finder.get_statusbar_text),
        height=Dimension.exact(1),
        dont_extend_height=True,
    )
    prompt = create_prompt_window(finder)

    windows = [results, status, prompt]
    if finder.reverse:
        windows.reverse()
    return Layout(HSplit(windows), focused_element=prompt)
