# License: BSD3

"""
Evaluation measures: span-level precision/recall/F-measure and tag
accuracy
"""

from .accuracy import Accuracy
from .fmeasure import (FALSE_NEGATIVE, FALSE_POSITIVE, TOTAL,
                       ScoreAccumulator, SpanError, Stats, find_errors)
