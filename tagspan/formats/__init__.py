# License: BSD3

"""
Reading (and writing) labelled corpora.

Readers take a source of text lines (see `LineSource`) and yield
`Sample` objects; pick one by name with `reader_for_format` ::

    reader = read_corpus('train.conll', 'conll02', codec='BILOU')
    for sample in reader:
        ...
"""

from ..codec import DEFAULT_CODEC
from ..errors import ConfigurationError
from .base import (DOCSTART, ClearFeatures, CorpusReader, LineSource)
from .conll import CoNLL02Reader, CoNLL03Reader, write_conll
from .doc import DocReader
from .inline import InlineReader, parse_inline, write_inline
from .tabulated import (LemmatizerReader, TabulatedReader,
                        write_lemmatizer, write_tabulated)

CORPUS_FORMATS = {
    TabulatedReader.name: TabulatedReader,
    CoNLL02Reader.name: CoNLL02Reader,
    CoNLL03Reader.name: CoNLL03Reader,
    LemmatizerReader.name: LemmatizerReader,
    InlineReader.name: InlineReader,
    DocReader.name: DocReader,
}
"""
Corpus readers by format name
"""

SPAN_FORMATS = sorted(k for k in CORPUS_FORMATS if k != DocReader.name)
"""
Formats whose samples carry spans (all but `doc`)
"""


def reader_for_format(name, lines, clear_features=ClearFeatures.no,
                      codec=None, skip_errors=False, doc_marker=DOCSTART):
    """
    Return a reader for the given format over a source of lines.
    The codec is only used by the CoNLL readers.

    :rtype: CorpusReader
    """
    if name not in CORPUS_FORMATS:
        raise ConfigurationError("Unknown corpus format %r (expected one"
                                 " of %s)" % (name,
                                              ", ".join(sorted(CORPUS_FORMATS))))
    cls = CORPUS_FORMATS[name]
    kwargs = {'clear_features': clear_features,
              'skip_errors': skip_errors,
              'doc_marker': doc_marker}
    if getattr(cls, 'uses_codec', False):
        kwargs['codec'] = codec or DEFAULT_CODEC
    return cls(lines, **kwargs)


def read_corpus(path, name, **kwargs):
    """
    `reader_for_format` on the lines of a UTF-8 file
    """
    return reader_for_format(name, LineSource(path), **kwargs)


def filter_types(samples, types):
    """
    Iterate over the samples keeping only the spans of the given types
    """
    types = frozenset(types)
    for sample in samples:
        yield sample.filter_types(types)


def _sample_lines(sample, name, codec):
    "lines for one sample in the given format (no separator)"
    if name in (CoNLL02Reader.name, CoNLL03Reader.name):
        return write_conll(sample, codec)
    elif name == TabulatedReader.name:
        return write_tabulated(sample)
    elif name == LemmatizerReader.name:
        return write_lemmatizer(sample)
    elif name == InlineReader.name:
        return [x for x in write_inline(sample) if x]
    else:
        raise ConfigurationError("Cannot write samples in format %r" % name)


def write_corpus(samples, name, stream, codec=None, doc_marker=DOCSTART):
    """
    Write samples to a text stream in the given format.

    Clear-flagged samples are preceded by a document boundary: a blank
    line for inline markup, a document marker line (and blank line)
    for the column formats
    """
    one_per_line = name == InlineReader.name
    for sample in samples:
        lines = _sample_lines(sample, name, codec)
        if sample.clear_adaptive_data:
            if one_per_line:
                stream.write('\n')
            else:
                stream.write(doc_marker + '\n\n')
        for line in lines:
            stream.write(line + '\n')
        if not one_per_line:
            stream.write('\n')
