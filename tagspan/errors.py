# License: BSD3

"""
Exceptions raised by tagspan

Missing files and other input/output failures are reported with the
usual `IOError` (`OSError`) and are not wrapped.
"""

# pylint: disable=too-few-public-methods


class TagspanException(Exception):
    """
    Base class for the errors tagspan raises on purpose
    """
    def __init__(self, *args, **kw):
        super(TagspanException, self).__init__(*args, **kw)


class FormatError(TagspanException):
    """
    Malformed input: a corpus line with the wrong number of fields, a tag
    that does not follow the tag grammar, broken inline markup...

    :param line: (one-based) number of the offending line, if known
    :type line: int
    """
    def __init__(self, msg, line=None):
        if line is not None:
            msg = "line %d: %s" % (line, msg)
        super(FormatError, self).__init__(msg)
        self.line = line


class ConfigurationError(TagspanException):
    """
    Settings that make it impossible to start: an unknown codec or
    corpus format, a fold count below two, an empty dictionary file
    """
    pass
