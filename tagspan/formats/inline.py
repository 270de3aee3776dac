# License: BSD3

"""
Inline span markup, one sample per line ::

    <START:PER> John Smith <END> lives in <START:LOC> Paris <END>

`<START>` without a type opens a span of the default type.  Spans may
not be nested or empty.  A blank line marks a document boundary.
"""

import re

import funcparserlib.parser as fp

from ..annotation import DEFAULT_TYPE, END_TAG, Sample, Span
from ..errors import FormatError
from .base import CorpusReader

_START_RE = re.compile(r'<START(:([^:>\s]*))?>$')


def _start_type(word):
    "type of a start tag, or None if the word is not one"
    match = _START_RE.match(word)
    if match is None:
        return None
    if match.group(1) is None:
        return DEFAULT_TYPE
    return match.group(2)


def _is_start(word):
    return _start_type(word) is not None


def _is_end(word):
    return word == END_TAG


def _is_word(word):
    return not _is_start(word) and not _is_end(word)


# ---------------------------------------------------------------------
# funcparserlib grammar
# ---------------------------------------------------------------------

_word = fp.some(_is_word)
_start = fp.some(_is_start) >> _start_type
_end = fp.skip(fp.some(_is_end))
_chunk = _start + fp.oneplus(_word) + _end >> (lambda x: (x[0], x[1]))
_plain = _word >> (lambda x: (None, [x]))
_eof = fp.skip(fp.finished)
_markup = fp.many(_chunk | _plain) + _eof


def parse_inline(text, clear_adaptive_data=False):
    """
    Read a sample from a line of inline markup

    :rtype: Sample
    """
    words = text.split()
    for word in words:
        if _start_type(word) == '':
            raise FormatError("Missing type in start tag %r" % word)
    try:
        pieces = _markup.parse(words)
    except fp.NoParseError as oops:
        raise FormatError("Unbalanced span markup (%s): %r" % (oops, text))
    tokens = []
    spans = []
    for span_type, chunk in pieces:
        if span_type is not None:
            spans.append(Span(len(tokens), len(tokens) + len(chunk),
                              span_type))
        tokens.extend(chunk)
    return Sample(tokens, spans, clear_adaptive_data=clear_adaptive_data)


class InlineReader(CorpusReader):
    """
    One sample of inline markup per line
    """
    name = 'inline'
    one_per_line = True
    blank_starts_document = True

    def read_unit(self, lines, clear_adaptive_data):
        lineno, line = lines[0]
        try:
            return parse_inline(line, clear_adaptive_data)
        except FormatError as oops:
            raise FormatError(str(oops), line=lineno)


def write_inline(sample):
    """
    Lines for a sample in inline markup (a clear-flagged sample is
    preceded by a blank line)
    """
    return str(sample).split('\n')
