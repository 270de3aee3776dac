# License: BSD3

"""
Resolving overlapping span predictions.

Labellers may emit spans that overlap one another (several dictionaries
matching the same words, several passes over a sentence...).  Before
these predictions can be compared with a reference sample they must be
made consistent.
"""


def drop_overlapping_spans(spans):
    """
    Return a subset of the spans where no two spans overlap.

    Spans are considered from left to right, longest first among spans
    that start at the same token (see the ordering on `Span`); a span is
    kept if it starts at or after the end of the last span kept.  The
    result is sorted, and running this on an already consistent list
    returns the same spans ::

        drop_overlapping_spans([Span(1, 2, 'LOC'), Span(0, 2, 'ORG')])
          == [Span(0, 2, 'ORG')]
    """
    kept = []
    for span in sorted(spans):
        if not kept or span.start >= kept[-1].end:
            kept.append(span)
    return kept
