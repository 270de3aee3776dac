# License: BSD3

"""
K-fold cross-validation of a labeller trainer.

The corpus is cut into `k` contiguous folds; for each fold we train on
the other folds, evaluate on the held-out one, and merge the scores of
every fold into a single report.
"""

from concurrent.futures import ThreadPoolExecutor
from functools import reduce
import sys

import numpy as np
from tabulate import tabulate

from .errors import ConfigurationError
from .evaluation import SequenceLabelerEvaluator
from .metrics import ScoreAccumulator
from .util import concat_l

DEFAULT_FOLDS = 10


def partition(items, n_folds):
    """
    Cut a list into `n_folds` contiguous folds of (nearly) equal size;
    when the items do not divide evenly, the first folds get one item
    more ::

        partition(range(5), 2) == [[0, 1, 2], [3, 4]]

    If there are fewer items than folds, some folds are empty.
    """
    if n_folds < 2:
        raise ConfigurationError("Need at least 2 folds for"
                                 " cross-validation, not %d" % n_folds)
    items = list(items)
    bounds = np.cumsum([0] + [len(x) for x in
                              np.array_split(np.arange(len(items)), n_folds)])
    return [items[start:end] for start, end in zip(bounds, bounds[1:])]


def group_documents(samples):
    """
    Group samples into documents, a new document starting at every
    sample that clears adaptive data

    :rtype: [[Sample]]
    """
    docs = []
    for sample in samples:
        if sample.clear_adaptive_data or not docs:
            docs.append([])
        docs[-1].append(sample)
    return docs


class CrossValidator(object):
    """
    :param trainer: builds a labeller from the training folds
    :type trainer: Trainer

    :param n_folds: number of folds (at least 2)

    :param listeners: given every held-out sample of every fold; use a
        `DetailedFMeasureListener` for one aggregated report

    :param by_document: if True, folds are made of whole documents (see
        `group_documents`) rather than samples

    :param workers: number of folds to run in parallel (threads)

    :param verbose: report progress on stderr
    """
    def __init__(self, trainer, n_folds=DEFAULT_FOLDS, listeners=(),
                 by_document=False, workers=1, verbose=False):
        if n_folds < 2:
            raise ConfigurationError("Need at least 2 folds for"
                                     " cross-validation, not %d" % n_folds)
        if workers < 1:
            raise ConfigurationError("Need at least one worker, not %d"
                                     % workers)
        self.trainer = trainer
        self.n_folds = n_folds
        self.listeners = list(listeners)
        self.by_document = by_document
        self.workers = workers
        self.verbose = verbose
        self.fold_scores = []

    def _run_fold(self, folds, index):
        """
        Train on every fold but `index`, evaluate on that one
        """
        held_out = folds[index]
        training = concat_l(f for i, f in enumerate(folds) if i != index)
        if self.by_document:
            held_out = concat_l(held_out)
            training = concat_l(training)
        labeler = self.trainer.train(training)
        evaluator = SequenceLabelerEvaluator(labeler, self.listeners)
        scores = evaluator.evaluate(held_out)
        if self.verbose:
            print("fold %d/%d: %d training, %d test samples, F1 %.4f"
                  % (index + 1, len(folds), len(training), len(held_out),
                     scores.fmeasure()),
                  file=sys.stderr)
        return scores

    def evaluate(self, source):
        """
        Run the cross-validation over a corpus (anything that iterates
        over samples, eg. a corpus reader); return the merged scores

        :rtype: ScoreAccumulator
        """
        samples = list(source)
        units = group_documents(samples) if self.by_document else samples
        folds = partition(units, self.n_folds)
        indices = range(len(folds))
        if self.workers > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                results = list(executor.map(lambda i: self._run_fold(folds, i),
                                            indices))
        else:
            results = [self._run_fold(folds, i) for i in indices]
        self.fold_scores = results
        return reduce(lambda acc, x: acc.merge(x), results,
                      ScoreAccumulator())

    def fold_table(self):
        """
        Overall scores for each fold of the last run, as a table
        """
        rows = []
        for idx, scores in enumerate(self.fold_scores, 1):
            rows.append([idx, scores.samples,
                         scores.precision() * 100,
                         scores.recall() * 100,
                         max(scores.fmeasure(), 0) * 100])
        return tabulate(rows, headers=['fold', 'samples', 'precision',
                                       'recall', 'f1'],
                        floatfmt='.2f')
