# License: BSD3

"""
Shortest edit scripts between a word form and its lemma.

Lemmatisation can be cast as sequence labelling if, instead of the lemma
itself, each token is labelled with the edit operations that turn the
word into its lemma: "walked" and "talked" then share the same label.

Both strings are lower-cased and reversed before comparison, so that
suffix changes get small positions.  A script is a sequence of
operations, each made of a letter, a position in the (reversed) string
being rewritten, a colon, and the characters involved

* `R<i>:<old><new>`: replace the character `<old>` at position `i`
  with `<new>`
* `I<i>:<new>`: insert `<new>` at position `i`
* `D<i>:<old>`: delete the character `<old>` at position `i`

Operations are listed from the highest position to the lowest, so they
can be applied one after the other.  The special script `O` means that
the lemma is the (lower-cased) word itself ::

    shortest_edit_script('walked', 'walk') == 'D1:eD0:d'
    apply_edit_script('talked', 'D1:eD0:d') == 'talk'
"""

from .errors import FormatError

IDENTITY = 'O'
UNKNOWN_LEMMA = '_'

_REPLACE = 'R'
_INSERT = 'I'
_DELETE = 'D'


def levenshtein_matrix(source, target):
    """
    Edit distance table between two strings: cell `[i][j]` holds the
    distance between the first `i` characters of source and the first
    `j` characters of target
    """
    distance = [[0] * (len(target) + 1) for _ in range(len(source) + 1)]
    for i in range(len(source) + 1):
        distance[i][0] = i
    for j in range(len(target) + 1):
        distance[0][j] = j
    for i in range(1, len(source) + 1):
        for j in range(1, len(target) + 1):
            cost = 0 if source[i - 1] == target[j - 1] else 1
            distance[i][j] = min(distance[i - 1][j] + 1,
                                 distance[i][j - 1] + 1,
                                 distance[i - 1][j - 1] + cost)
    return distance


def _edit_operations(source, target, distance):
    """
    Walk back through the distance table, from the bottom right corner,
    and return the operations that rewrite source into target
    """
    ops = []
    i = len(source)
    j = len(target)
    while distance[i][j] != 0:
        here = distance[i][j]
        if i > 0 and j > 0 and distance[i - 1][j - 1] < here:
            ops.append('%s%d:%s%s' % (_REPLACE, i - 1,
                                      source[i - 1], target[j - 1]))
            i -= 1
            j -= 1
        elif j > 0 and distance[i][j - 1] < here:
            ops.append('%s%d:%s' % (_INSERT, i, target[j - 1]))
            j -= 1
        elif i > 0 and distance[i - 1][j] < here:
            ops.append('%s%d:%s' % (_DELETE, i - 1, source[i - 1]))
            i -= 1
        elif i > 0 and j > 0 and distance[i - 1][j - 1] == here:
            i -= 1
            j -= 1
        elif i > 0 and distance[i - 1][j] == here:
            i -= 1
        else:
            j -= 1
    return ''.join(ops)


def shortest_edit_script(word, lemma):
    """
    Return the script that rewrites `word` into `lemma`
    (see module documentation)
    """
    rev_word = word.lower()[::-1]
    rev_lemma = lemma.lower()[::-1]
    if rev_word == rev_lemma:
        return IDENTITY
    distance = levenshtein_matrix(rev_word, rev_lemma)
    return _edit_operations(rev_word, rev_lemma, distance)


def _parse_script(script):
    """
    Split a script into (operation, position, characters) triples
    """
    ops = []
    idx = 0
    while idx < len(script):
        op = script[idx]
        if op not in (_REPLACE, _INSERT, _DELETE):
            raise FormatError("Unknown edit operation %r in script %r"
                              % (op, script))
        colon = script.find(':', idx + 1)
        position = script[idx + 1:colon]
        if colon < 0 or not position.isdigit():
            raise FormatError("Missing position in edit script %r" % script)
        width = 2 if op == _REPLACE else 1
        chars = script[colon + 1:colon + 1 + width]
        if len(chars) != width:
            raise FormatError("Truncated edit script %r" % script)
        ops.append((op, int(position), chars))
        idx = colon + 1 + width
    return ops


def apply_edit_script(word, script):
    """
    Rewrite `word` according to `script`.

    If the script does not fit the word (it refers to positions the word
    does not have), the lower-cased word is returned unchanged.
    """
    word = word.lower()
    if script == IDENTITY:
        return word
    chars = list(word[::-1])
    for op, position, args in _parse_script(script):
        if op == _REPLACE:
            if position >= len(chars):
                return word
            if chars[position] == args[0]:
                chars[position] = args[1]
        elif op == _INSERT:
            if position > len(chars):
                return word
            chars.insert(position, args)
        else:
            if position >= len(chars):
                return word
            del chars[position]
    return ''.join(chars)[::-1]


def decode_lemmas(tokens, spans):
    """
    Return the lemma for each span, its type being an edit script
    (`_` for empty lemmas)
    """
    lemmas = []
    for span in spans:
        lemma = apply_edit_script(span.covered_text(tokens), span.type)
        lemmas.append(lemma or UNKNOWN_LEMMA)
    return lemmas
