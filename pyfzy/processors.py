from prompt_toolkit.layout.processors import Processor, Transformation
from prompt_toolkit.layout.utils import explode_text_fragments


MATCH_STYLE = "fg:ansigreen bold"


def highlight_positions(fragments, match_positions, style=MATCH_STYLE):
    """
    Restyle the characters of a line at `match_positions`. Positions past
    the end of the line are ignored.
    """
    fragments = explode_text_fragments(fragments)
    for pos in match_positions:
        if pos < len(fragments):
            fragments[pos] = (style, fragments[pos][1])
    return fragments


class MatchProcessor(Processor):
    """
    Highlight the matched characters of every result line.
    """
    def __init__(self, finder, style=MATCH_STYLE):
        self.finder = finder
        self.style = style

    def apply_transformation(self, transformation_input):
        fragments = transformation_input.fragments
        result = self.finder.result_at(transformation_input.lineno)
        if result is not None and result.positions:
            fragments = highlight_positions(fragments, result.positions, self.style)
        return Transformation(fragments)
