# License: BSD3

"""
Low-level representation of labelled token sequences.

The central notion is the `Span`: a half-open interval over token
indices carrying a type (a named entity class, a chunk label, an edit
script...).  A `Sample` pairs a token sequence with the non-overlapping
spans annotated on it; it is what corpus readers produce and what
evaluators consume.
"""

# pylint: disable=too-few-public-methods

from collections import namedtuple

DEFAULT_TYPE = 'default'
"""
Type given to untyped spans when a type is required (encoding,
inline markup without an explicit type)
"""


class Span(namedtuple("Span", "start end type")):
    """
    What portion of a token sequence an annotation corresponds to.

    The way we interpret spans amounts to how Python interprets slice
    indices: think of offsets as sitting in between tokens ::

          John   Smith   lives
        0      1       2       3

    So `Span(0, 2, 'PER')` covers "John Smith", and `Span(2, 3)` picks out
    "lives".  Spans are never empty: `0 <= start < end`.

    Two spans are equal if they cover the same tokens *and* have the
    same type; spans sort by start, then longest first, then type.
    """
    __slots__ = ()

    def __new__(cls, start, end, type=None):
        # pylint: disable=redefined-builtin
        if start < 0:
            raise ValueError("start index must be zero or greater: %d"
                             % start)
        if start >= end:
            raise ValueError("start index must be smaller than end index:"
                             " start=%d, end=%d" % (start, end))
        return super(Span, cls).__new__(cls, start, end, type)

    def __str__(self):
        if self.type is None:
            return '[%d..%d)' % (self.start, self.end)
        return '[%d..%d) %s' % (self.start, self.end, self.type)

    def __repr__(self):
        return 'Span(%d, %d, %r)' % (self.start, self.end, self.type)

    def _key(self):
        """
        For internal use by the comparison operators
        """
        return (self.start, -self.end,
                self.type is None, self.type or '')

    def __eq__(self, other):
        return isinstance(other, Span) and\
            self.start == other.start and\
            self.end == other.end and\
            self.type == other.type

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.start, self.end, self.type))

    def __lt__(self, other):
        return self._key() < other._key()

    def __gt__(self, other):
        return other < self

    def __le__(self, other):
        return self < other or self == other

    def __ge__(self, other):
        return other <= self

    def length(self):
        """
        Return the number of tokens covered by this span
        """
        return self.end - self.start

    def contains(self, index):
        """
        True if the token at `index` falls within this span
        """
        return self.start <= index < self.end

    def encloses(self, other):
        """
        Return True if this span includes the argument

        Note that `x.encloses(x) == True`

        Corner case: `x.encloses(None) == False`
        """
        if other is None:
            return False
        return self.start <= other.start and other.end <= self.end

    def intersects(self, other):
        """
        True if the two spans have at least one token in common
        """
        return self.start < other.end and other.start < self.end

    def crosses(self, other):
        """
        True if the spans intersect without either one enclosing
        the other
        """
        return self.intersects(other) and\
            not self.encloses(other) and\
            not other.encloses(self)

    def overlaps(self, other):
        """
        Return the overlapping region if two spans have tokens
        in common, or else None. ::

            Span(5, 10).overlaps(Span(8, 12)) == Span(8, 10)
            Span(5, 10).overlaps(Span(10, 12)) == None

        The region keeps the type of this span.
        """
        if other is None or not self.intersects(other):
            return None
        return Span(max(self.start, other.start),
                    min(self.end, other.end),
                    self.type)

    def shift(self, offset):
        """
        Return a copy of this span, shifted to the right
        (if offset is positive) or left (if negative).
        """
        return Span(self.start + offset, self.end + offset, self.type)

    def retype(self, new_type):
        """
        Return a copy of this span with a different type
        """
        return Span(self.start, self.end, new_type)

    def covered_text(self, tokens):
        """
        The tokens covered by this span, joined with spaces
        """
        if self.end > len(tokens):
            raise ValueError("The span %s is outside the given tokens,"
                             " which have length %d" % (self, len(tokens)))
        return ' '.join(tokens[self.start:self.end])


def spans_to_strings(spans, tokens):
    """
    Return the text covered by each span (see `Span.covered_text`)
    """
    return [span.covered_text(tokens) for span in spans]


def check_spans(spans, length):
    """
    Raise `ValueError` if the spans overlap each other or go beyond a
    sequence of `length` tokens
    """
    last = None
    for span in sorted(spans):
        if span.end > length:
            raise ValueError("The span %s is outside a sequence of"
                             " %d tokens" % (span, length))
        if last is not None and last.intersects(span):
            raise ValueError("Overlapping spans: %s and %s" % (last, span))
        last = span


# ---------------------------------------------------------------------
# samples
# ---------------------------------------------------------------------


class Sample(object):
    """
    One labelled corpus unit (typically a sentence): a token sequence
    and the spans annotated on it.

    Samples are not modified after construction; use `with_spans` or
    `filter_types` to obtain a variant.

    :param tokens: the words of the sentence
    :type tokens: [string]

    :param spans: annotated spans; these must not overlap each other
        and must fit within the tokens
    :type spans: [Span]

    :param clear_adaptive_data: if True, this sample starts a new
        document and labellers should forget any document level state
        before processing it
    :type clear_adaptive_data: bool

    :param id: optional identifier
    """
    def __init__(self, tokens, spans=(), clear_adaptive_data=False,
                 id=None):
        # pylint: disable=redefined-builtin, invalid-name
        self.tokens = tuple(tokens)
        spans = sorted(spans)
        check_spans(spans, len(self.tokens))
        self.spans = tuple(spans)
        self.clear_adaptive_data = clear_adaptive_data
        self.id = id

    def __eq__(self, other):
        return isinstance(other, Sample) and\
            self.tokens == other.tokens and\
            self.spans == other.spans and\
            self.clear_adaptive_data == other.clear_adaptive_data

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.tokens, self.spans, self.clear_adaptive_data))

    def __repr__(self):
        return 'Sample(%r, %r, clear_adaptive_data=%r)' % (
            list(self.tokens), list(self.spans), self.clear_adaptive_data)

    def __str__(self):
        """
        Inline markup rendering ::

            <START:PER> John Smith <END> lives

        A sample that clears adaptive data is preceded by an empty line
        """
        starts = {}
        ends = {}
        for span in self.spans:
            starts[span.start] = span
            ends[span.end] = span
        parts = []
        for idx, token in enumerate(self.tokens):
            if idx in ends:
                parts.append(END_TAG)
            if idx in starts:
                parts.append(start_tag(starts[idx].type))
            parts.append(token)
        if len(self.tokens) in ends:
            parts.append(END_TAG)
        prefix = '\n' if self.clear_adaptive_data else ''
        return prefix + ' '.join(parts)

    def with_spans(self, spans):
        """
        A copy of this sample with different spans
        """
        return Sample(self.tokens, spans,
                      clear_adaptive_data=self.clear_adaptive_data,
                      id=self.id)

    def filter_types(self, types):
        """
        A copy of this sample keeping only the spans whose type is
        one of `types`
        """
        types = frozenset(types)
        return self.with_spans(s for s in self.spans if s.type in types)


START_TAG_PREFIX = '<START:'
START_TAG = '<START>'
END_TAG = '<END>'


def start_tag(span_type):
    """
    Inline markup opening a span of the given type
    """
    if span_type is None:
        return START_TAG
    return START_TAG_PREFIX + span_type + '>'


class DocSample(object):
    """
    A document to classify: its tokens and the category it belongs to
    """
    def __init__(self, label, tokens, clear_adaptive_data=False):
        self.label = label
        self.tokens = tuple(tokens)
        self.clear_adaptive_data = clear_adaptive_data

    def __eq__(self, other):
        return isinstance(other, DocSample) and\
            self.label == other.label and\
            self.tokens == other.tokens and\
            self.clear_adaptive_data == other.clear_adaptive_data

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.label, self.tokens, self.clear_adaptive_data))

    def __repr__(self):
        return 'DocSample(%r, %r)' % (self.label, list(self.tokens))

    def __str__(self):
        return '%s\t%s' % (self.label, ' '.join(self.tokens))
