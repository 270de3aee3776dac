# License: BSD3

"""
The tagspan library provides the span based substrate shared by sequence
labellers, document classifiers and their evaluators: converting between
per-token tags and typed token intervals, cleaning up predictions, and
scoring them.  It has a three-layer structure:

* base layer (spans and samples, tag codecs, overlap resolution,
  dictionaries)
* format layer (corpus readers and writers, one per file format)
* evaluation layer (scores, evaluation driver, cross-validation)

Layers
~~~~~~
The base layer provides four sublayers:

* annotation (tagspan.annotation): half-open token intervals with a type
  (`Span`) and the corpus units that carry them (`Sample`, `DocSample`)

* codecs (tagspan.codec): BIO and BILOU tag grammars, both ways

* overlap resolution (tagspan.overlap): turning a bag of possibly
  overlapping predictions into a consistent set

* dictionaries (tagspan.lexicon): greedy longest-match detection of
  multiword entries

Building on the base layer, `tagspan.formats` knows about corpus files
(tabulated, CoNLL, edit-script, inline markup, documents).  On top of
this, `tagspan.metrics`, `tagspan.evaluation` and `tagspan.crossval`
compare what a labeller produces against reference samples ::

        crossval -> evaluation -> metrics         [evaluation layer]
                        |
                        v
                     formats                      [format layer]
                        |
        +---------------+-------------+
        |               |             |
        v               v             v
     codec -> annotation <- overlap   lexicon     [base layer]

The dictionaries also come with a labeller (and a trainer memorising
the spans of a corpus), so that the evaluation layer can be exercised
without any statistical model.

The statistical models themselves are not part of this library: they are
collaborators implementing `tagspan.evaluation.Labeler` (and, for
training, `tagspan.evaluation.Trainer`).
"""
