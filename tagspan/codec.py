# License: BSD3

"""
Tag codecs: conversion between one-tag-per-token sequences and spans.

Two grammars are supported

* BIO: `O` (outside any span), `B-<type>` (first token of a span),
  `I-<type>` (any following token of the span)
* BILOU: BIO plus `L-<type>` (last token of a multi-token span) and
  `U-<type>` (a span of a single token)

Decoding is lenient about continuation tags that do not continue
anything: an `I-PER` after `O`, or after a span of another type,
starts a new `PER` span (as if it were `B-PER`).  The same goes for an
orphan `L-PER` in BILOU, which yields a one-token span.  Encoding is
deterministic, so that `decode(encode(spans, n)) == spans` for any set
of non-overlapping typed spans.

Use `is_valid_sequence` if you need to know whether a sequence is
strictly well-formed.
"""

from .annotation import DEFAULT_TYPE, Span, check_spans
from .errors import ConfigurationError, FormatError

OUTSIDE = 'O'
BEGIN = 'B'
INSIDE = 'I'
LAST = 'L'
UNIT = 'U'

_SEPARATOR = '-'


def split_tag(tag):
    """
    Split a tag into its prefix and its type ::

        split_tag('B-PER') == ('B', 'PER')
        split_tag('O') == ('O', None)

    Raise `FormatError` if the tag has no type, or a prefix we do not
    know about
    """
    if tag == OUTSIDE:
        return OUTSIDE, None
    prefix, sep, tag_type = tag.partition(_SEPARATOR)
    if prefix not in (BEGIN, INSIDE, LAST, UNIT):
        raise FormatError("Unknown tag: %r" % tag)
    if not sep or not tag_type:
        raise FormatError("Missing type in tag: %r" % tag)
    return prefix, tag_type


def join_tag(prefix, tag_type):
    """
    Inverse of `split_tag`
    """
    if prefix == OUTSIDE:
        return OUTSIDE
    return prefix + _SEPARATOR + (tag_type or DEFAULT_TYPE)


class TagCodec(object):
    """
    Abstract codec; see `BioCodec` and `BilouCodec`
    """
    name = None
    prefixes = frozenset()

    def parse(self, tag):
        """
        Split a tag (see `split_tag`), additionally checking that
        the prefix belongs to this grammar
        """
        prefix, tag_type = split_tag(tag)
        if prefix not in self.prefixes:
            raise FormatError("Tag %r is not part of the %s grammar"
                              % (tag, self.name))
        return prefix, tag_type

    def decode(self, tags):
        """
        Return the list of spans described by a sequence of tags
        """
        raise NotImplementedError

    def _encode_span(self, span, tags):
        """
        Write the tags for a single span into `tags`
        """
        raise NotImplementedError

    def encode(self, spans, length):
        """
        Return the tag sequence (of size `length`) describing the spans.
        Tokens outside of any span are tagged `O`.

        The spans must not overlap each other.
        """
        spans = list(spans)
        check_spans(spans, length)
        tags = [OUTSIDE] * length
        for span in spans:
            self._encode_span(span, tags)
        return tags

    def valid_successor(self, previous, tag):
        """
        True if `tag` may follow `previous` in a well-formed sequence
        (`previous` is None at the start of the sequence)
        """
        raise NotImplementedError

    def is_valid_sequence(self, tags):
        """
        True if the tags form a well-formed sequence in this grammar
        (no orphan continuation tags, no span left open)
        """
        previous = None
        for tag in tags:
            self.parse(tag)
            if not self.valid_successor(previous, tag):
                return False
            previous = tag
        return self._may_end_with(previous)

    def _may_end_with(self, tag):
        "True if the sequence may stop after this tag"
        return True

    def are_tags_compatible(self, tags):
        """
        True if the tag inventory (eg. the outcomes of a model) can be
        used with this codec: every tag belongs to the grammar, there is
        at least one opening tag, and every continuation type also has
        an opening tag
        """
        openers = set()
        continuations = set()
        try:
            for tag in set(tags):
                prefix, tag_type = self.parse(tag)
                if prefix in (BEGIN, UNIT):
                    openers.add(tag_type)
                elif prefix in (INSIDE, LAST):
                    continuations.add(tag_type)
        except FormatError:
            return False
        return bool(openers) and continuations <= openers


class BioCodec(TagCodec):
    """
    Begin/Inside/Outside
    """
    name = 'BIO'
    prefixes = frozenset([OUTSIDE, BEGIN, INSIDE])

    def decode(self, tags):
        spans = []
        start = None
        current = None
        for idx, tag in enumerate(tags):
            prefix, tag_type = self.parse(tag)
            if prefix == INSIDE and start is not None and\
                    tag_type == current:
                continue
            if start is not None:
                spans.append(Span(start, idx, current))
                start = None
                current = None
            if prefix in (BEGIN, INSIDE):
                start = idx
                current = tag_type
        if start is not None:
            spans.append(Span(start, len(tags), current))
        return spans

    def _encode_span(self, span, tags):
        tags[span.start] = join_tag(BEGIN, span.type)
        for idx in range(span.start + 1, span.end):
            tags[idx] = join_tag(INSIDE, span.type)

    def valid_successor(self, previous, tag):
        prefix, tag_type = self.parse(tag)
        if prefix != INSIDE:
            return True
        if previous is None:
            return False
        prev_prefix, prev_type = self.parse(previous)
        return prev_prefix in (BEGIN, INSIDE) and prev_type == tag_type


class BilouCodec(TagCodec):
    """
    Begin/Inside/Last/Outside/Unit
    """
    name = 'BILOU'
    prefixes = frozenset([OUTSIDE, BEGIN, INSIDE, LAST, UNIT])

    def decode(self, tags):
        spans = []
        start = None
        current = None
        for idx, tag in enumerate(tags):
            prefix, tag_type = self.parse(tag)
            continues = start is not None and tag_type == current
            if prefix == INSIDE and continues:
                continue
            if prefix == LAST and continues:
                spans.append(Span(start, idx + 1, current))
                start = None
                current = None
                continue
            if start is not None:
                spans.append(Span(start, idx, current))
                start = None
                current = None
            if prefix in (UNIT, LAST):
                spans.append(Span(idx, idx + 1, tag_type))
            elif prefix in (BEGIN, INSIDE):
                start = idx
                current = tag_type
        if start is not None:
            spans.append(Span(start, len(tags), current))
        return spans

    def _encode_span(self, span, tags):
        if span.length() == 1:
            tags[span.start] = join_tag(UNIT, span.type)
            return
        tags[span.start] = join_tag(BEGIN, span.type)
        for idx in range(span.start + 1, span.end - 1):
            tags[idx] = join_tag(INSIDE, span.type)
        tags[span.end - 1] = join_tag(LAST, span.type)

    def valid_successor(self, previous, tag):
        prefix, tag_type = self.parse(tag)
        if previous is None:
            return prefix not in (INSIDE, LAST)
        prev_prefix, prev_type = self.parse(previous)
        if prev_prefix in (BEGIN, INSIDE):
            # an open span must be continued or closed
            return prefix in (INSIDE, LAST) and tag_type == prev_type
        return prefix not in (INSIDE, LAST)

    def _may_end_with(self, tag):
        if tag is None:
            return True
        prefix, _ = self.parse(tag)
        return prefix not in (BEGIN, INSIDE)


def to_bio(tags):
    """
    Rewrite BILOU tags into BIO tags (`L-` becomes `I-`, `U-` becomes
    `B-`); BIO tags are left as they are
    """
    res = []
    for tag in tags:
        prefix, tag_type = split_tag(tag)
        if prefix == LAST:
            prefix = INSIDE
        elif prefix == UNIT:
            prefix = BEGIN
        res.append(join_tag(prefix, tag_type))
    return res


CODECS = {'BIO': BioCodec,
          'BILOU': BilouCodec}

DEFAULT_CODEC = 'BIO'


def codec_for_name(name):
    """
    Return a codec instance given its name (case insensitive)
    """
    key = (name or '').upper()
    if key not in CODECS:
        raise ConfigurationError("Unknown sequence codec %r (expected one"
                                 " of %s)" % (name, ", ".join(sorted(CODECS))))
    return CODECS[key]()
