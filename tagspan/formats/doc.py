# License: BSD3

"""
Document classification corpora: one document per line, its category
then its text ::

    sport	Real Madrid won again
"""

from ..annotation import DocSample
from .base import CorpusReader, split_fields


class DocReader(CorpusReader):
    """
    `label TAB text` lines; text is split on whitespace
    """
    name = 'doc'
    one_per_line = True

    def read_unit(self, lines, clear_adaptive_data):
        lineno, line = lines[0]
        label, text = split_fields(lineno, line)
        return DocSample(label, text.split(),
                         clear_adaptive_data=clear_adaptive_data)
