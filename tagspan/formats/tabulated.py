# License: BSD3

"""
Two-column corpora where every token carries its own label ::

    John	NNP
    Smith	NNP
    lives	VBZ

Each token becomes a one-token span typed with its label (a part of
speech, or, for lemmatisation corpora, the edit script turning the
token into its lemma).
"""

from ..annotation import Sample, Span
from ..codec import OUTSIDE
from ..editscript import apply_edit_script, shortest_edit_script
from .base import CorpusReader, split_fields


class TabulatedReader(CorpusReader):
    """
    `token TAB label` lines; one span per token
    """
    name = 'tabulated'

    def _label(self, token, value):
        "span type for a token and its second column"
        return value

    def read_unit(self, lines, clear_adaptive_data):
        tokens = []
        spans = []
        for idx, (lineno, line) in enumerate(lines):
            token, value = split_fields(lineno, line)
            tokens.append(token)
            spans.append(Span(idx, idx + 1, self._label(token, value)))
        return Sample(tokens, spans,
                      clear_adaptive_data=clear_adaptive_data)


class LemmatizerReader(TabulatedReader):
    """
    `token TAB lemma` lines; each token is labelled with its shortest
    edit script (see `tagspan.editscript`)
    """
    name = 'lemmatizer'

    def _label(self, token, value):
        return shortest_edit_script(token, value)


def write_tabulated(sample):
    """
    Lines for a sample in the two-column format; tokens without a span
    get the `O` label.  Spans over several tokens label each of them
    """
    labels = [OUTSIDE] * len(sample.tokens)
    for span in sample.spans:
        for idx in range(span.start, span.end):
            labels[idx] = span.type
    return ['%s\t%s' % (token, label)
            for token, label in zip(sample.tokens, labels)]


def write_lemmatizer(sample):
    """
    Lines for a sample whose spans are edit scripts, in the
    `token TAB lemma` format
    """
    scripts = [None] * len(sample.tokens)
    for span in sample.spans:
        scripts[span.start] = span.type
    lines = []
    for token, script in zip(sample.tokens, scripts):
        lemma = apply_edit_script(token, script) if script else token
        lines.append('%s\t%s' % (token, lemma))
    return lines
