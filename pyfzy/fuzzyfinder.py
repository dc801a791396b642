import logging

from prompt_toolkit.application import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import FormattedText

from pyfzy.config import create_config
from pyfzy.filter import FilterResult, better_filter, rank
from pyfzy.helpers import timeit
from pyfzy.key_bindings import create_key_bindings
from pyfzy.layout import create_layout
from pyfzy.matcher import SCORE_MIN


logger = logging.getLogger(__name__)


class Finder:
    """
    Interactive fuzzy finder over a list of lines.

    The best match is shown next to the prompt: at the bottom by default,
    at the top when `reverse` is set.
    """

    def __init__(self, lines, config=None, multi=True, reverse=False, height=None, workers=None):
        self.config = config or create_config()
        self.input_lines = list(lines)
        self.multi = multi
        self.reverse = reverse
        self.height = height
        self.workers = workers

        self.pattern = ""
        self.results = self.find_matches(self.pattern)
        self.selected = set()

        self.result_buffer = Buffer(
            name="result",
            multiline=True,
            read_only=False,
            document=Document("", 0),
        )
        self.prompt_buffer = Buffer(
            name="prompt",
            multiline=False,
            read_only=False,
            accept_handler=self.on_accept,
            on_text_changed=self.on_pattern_changed,
        )

        self.application = None
        self.set_result(self.results)

    @timeit
    def find_matches(self, pattern):
        if not pattern:
            return [
                FilterResult(index, [], SCORE_MIN, line)
                for index, line in enumerate(self.input_lines)
            ]
        return rank(better_filter(self.config, pattern, self.input_lines, workers=self.workers))

    def displayed(self):
        if self.reverse:
            return self.results
        return self.results[::-1]

    def result_at(self, lineno):
        displayed = self.displayed()
        if 0 <= lineno < len(displayed):
            return displayed[lineno]
        return None

    def current_result(self):
        return self.result_at(self.result_buffer.document.cursor_position_row)

    def set_result(self, results):
        self.results = results
        text = "\n".join(result.string for result in self.displayed())
        if self.reverse:
            cur_pos = 0
        else:
            cur_pos = len(text)
        self.result_buffer.set_document(Document(text, cur_pos), bypass_readonly=True)

    def get_result_prefix(self, lineno, wrap_count):
        result = self.result_at(lineno)
        if result is not None and result.index in self.selected:
            prefix = " >"
        else:
            prefix = "  "
        return FormattedText([("ansired", prefix)])

    def get_statusbar_text(self):
        text = "{}/{}".format(len(self.results), len(self.input_lines))
        if self.selected:
            text += " ({})".format(len(self.selected))
        return FormattedText([("ansiyellow", text)])

    def toggle_selection(self, result):
        if result is None:
            return
        if result.index in self.selected:
            self.selected.discard(result.index)
        else:
            self.selected.add(result.index)

    def accepted_lines(self):
        if self.multi and self.selected:
            return [self.input_lines[index] for index in sorted(self.selected)]
        result = self.current_result()
        if result is None:
            return []
        return [result.string]

    def on_pattern_changed(self, buffer):
        self.pattern = buffer.text
        self.set_result(self.find_matches(self.pattern))
        logger.debug("pattern %r: %d results", self.pattern, len(self.results))

    def on_accept(self, buffer):
        if self.application is not None:
            self.application.exit(result=self.accepted_lines())
        return True

    def run(self):
        """Run the finder and return the accepted lines, or None on abort."""
        self.application = Application(
            layout=create_layout(self),
            key_bindings=create_key_bindings(self),
            mouse_support=True,
            full_screen=False,
            enable_page_navigation_bindings=False,
        )
        return self.application.run()
