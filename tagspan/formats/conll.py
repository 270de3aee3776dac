# License: BSD3

"""
CoNLL style corpora, where spans are encoded as prefixed tags
(`B-PER`, `I-PER`, `O`...) one token per line ::

    John	B-PER
    Smith	I-PER
    lives	O

The CoNLL 2003 variant has several whitespace separated columns (part
of speech, chunk...): the token is the first and the tag the last ::

    U.N.  NNP  I-NP  I-ORG
"""

from ..annotation import Sample
from ..codec import DEFAULT_CODEC, TagCodec, codec_for_name
from ..errors import FormatError
from .base import CorpusReader, split_fields


class CoNLL02Reader(CorpusReader):
    """
    `token TAB tag` lines, tags decoded with a BIO or BILOU codec

    :param codec: codec or codec name (default BIO)
    """
    name = 'conll02'
    uses_codec = True

    def __init__(self, lines, codec=None, **kwargs):
        super(CoNLL02Reader, self).__init__(lines, **kwargs)
        if codec is None:
            codec = DEFAULT_CODEC
        if not isinstance(codec, TagCodec):
            codec = codec_for_name(codec)
        self.codec = codec

    def _token_and_tag(self, lineno, line):
        "the two columns we care about"
        return split_fields(lineno, line)

    def read_unit(self, lines, clear_adaptive_data):
        tokens = []
        tags = []
        for lineno, line in lines:
            token, tag = self._token_and_tag(lineno, line)
            try:
                self.codec.parse(tag)
            except FormatError as oops:
                raise FormatError(str(oops), line=lineno)
            tokens.append(token)
            tags.append(tag)
        return Sample(tokens, self.codec.decode(tags),
                      clear_adaptive_data=clear_adaptive_data)


class CoNLL03Reader(CoNLL02Reader):
    """
    Whitespace separated columns: token first, tag last
    """
    name = 'conll03'

    def _token_and_tag(self, lineno, line):
        fields = line.split()
        if len(fields) < 2:
            raise FormatError("Expected at least 2 columns, got %d: %r"
                              % (len(fields), line), line=lineno)
        return fields[0], fields[-1]


def write_conll(sample, codec=None):
    """
    Lines for a sample in the `token TAB tag` format

    :param codec: codec or codec name (default BIO)
    """
    if codec is None:
        codec = DEFAULT_CODEC
    if not isinstance(codec, TagCodec):
        codec = codec_for_name(codec)
    tags = codec.encode(sample.spans, len(sample.tokens))
    return ['%s\t%s' % (token, tag) for token, tag in zip(sample.tokens, tags)]
