# License: BSD3

"""
Machinery shared by the corpus readers: line sources, document
boundaries, and error handling
"""

from enum import Enum
import codecs
import warnings

from ..errors import ConfigurationError, FormatError

DOCSTART = '-DOCSTART-'
"""
Default marker for lines that start a new document
"""


class ClearFeatures(Enum):
    """
    Which samples tell labellers to forget their document level
    (adaptive) state

    * `no`: none
    * `yes`: all of them
    * `docstart`: those that follow a document marker
    """
    no = 'no'
    yes = 'yes'
    docstart = 'docstart'

    @classmethod
    def from_string(cls, value):
        """
        Return the setting named by a string (case insensitive);
        settings are passed through
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigurationError("Unknown clear features setting %r"
                                     " (expected one of %s)" %
                                     (value, ", ".join(x.value for x in cls)))


class LineSource(object):
    """
    The lines of a text file, without their line endings.

    The file is opened afresh every time you iterate over the source,
    so readers built on it can go over the corpus as many times as
    needed.  A missing or unreadable file raises `IOError` on iteration.
    """
    def __init__(self, path, encoding='utf-8'):
        self.path = path
        self.encoding = encoding

    def __iter__(self):
        with codecs.open(self.path, 'r', self.encoding) as stream:
            for line in stream:
                yield line.rstrip('\r\n')

    def __repr__(self):
        return 'LineSource(%r)' % self.path


class CorpusReader(object):
    """
    Abstract corpus reader: iterating over it yields samples.

    :param lines: a re-iterable source of text lines (a list, a
        `LineSource`...); iterating the reader a second time reads the
        source again

    :param clear_features: which samples clear adaptive data
    :type clear_features: ClearFeatures or string

    :param skip_errors: if True, samples with malformed lines are
        skipped with a warning instead of raising `FormatError`

    :param doc_marker: prefix of document boundary lines.  A document
        boundary line must be followed by a blank line, and contributes
        no tokens.

    Derived classes should implement `read_unit`
    """
    name = None
    one_per_line = False
    """
    If True, every line is a sample; otherwise samples are blocks of
    lines separated by blank lines
    """
    blank_starts_document = False
    """
    (one sample per line formats) whether a blank line marks a document
    boundary
    """

    def __init__(self, lines, clear_features=ClearFeatures.no,
                 skip_errors=False, doc_marker=DOCSTART):
        self.lines = lines
        self.clear_features = ClearFeatures.from_string(clear_features)
        self.skip_errors = skip_errors
        self.doc_marker = doc_marker

    def read_unit(self, lines, clear_adaptive_data):
        """
        Build a sample from its lines

        :param lines: line number and text for each line of the sample
        :type lines: [(int, string)]
        """
        raise NotImplementedError

    def _units(self):
        """
        Group the lines into sample-sized units: yield, for each unit,
        its numbered lines and whether it follows a document boundary.
        A document marker without its blank line yields a `FormatError`
        in place of the lines; the block after it is dropped.
        """
        block = []
        new_doc = False
        skipping = False
        numbered = enumerate(self.lines, 1)
        for lineno, line in numbered:
            line = line.rstrip('\r\n')
            if skipping:
                # rest of the block after a broken document marker
                skipping = bool(line.strip())
                continue
            if self.doc_marker and line.startswith(self.doc_marker):
                if block:
                    yield block, new_doc
                    block = []
                following = next(numbered, None)
                new_doc = True
                if following is not None and following[1].strip():
                    skipping = True
                    yield FormatError("Expected an empty line after %s,"
                                      " got %r" % (self.doc_marker,
                                                   following[1]),
                                      line=following[0]), new_doc
                continue
            if not line.strip():
                if block:
                    yield block, new_doc
                    block = []
                    new_doc = False
                elif self.blank_starts_document:
                    new_doc = True
                continue
            block.append((lineno, line))
            if self.one_per_line:
                yield block, new_doc
                block = []
                new_doc = False
        if block:
            yield block, new_doc

    def __iter__(self):
        pending = False
        for block, new_doc in self._units():
            pending = pending or new_doc
            if isinstance(block, FormatError):
                if not self.skip_errors:
                    raise block
                warnings.warn("Skipping sample: %s" % block)
                continue
            clear = self.clear_features is ClearFeatures.yes or\
                (self.clear_features is ClearFeatures.docstart and pending)
            try:
                sample = self.read_unit(block, clear)
            except FormatError as oops:
                if not self.skip_errors:
                    raise
                warnings.warn("Skipping sample: %s" % oops)
                continue
            pending = False
            yield sample


def split_fields(lineno, line, expected=2, separator='\t'):
    """
    Split a line into exactly `expected` fields, raising `FormatError`
    otherwise.  A `None` separator splits on any whitespace.
    """
    if separator is None:
        fields = line.split()
    else:
        fields = [f.strip() for f in line.split(separator)]
    if len(fields) != expected or not all(fields):
        raise FormatError("Expected %d fields, got %d: %r"
                          % (expected, len(fields), line), line=lineno)
    return fields
