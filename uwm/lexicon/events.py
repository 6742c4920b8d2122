"""
Integerized (word, tag) events.

Words and tags are interned in two `Alphabet`s, which number their keys from
0 upward. The null word and null tag share the out-of-band id -1 and stand
for "any word" and "any tag" in marginal counts; `(NULL_WORD, NULL_TAG)` is
the grand total.

"""
from collections import namedtuple
from arsenal.alphabet import Alphabet


NULL_WORD = -1
NULL_TAG = -1

BOUNDARY_TAG = '.$$.'     # boundary tag -- assumed not a real tag


class IntTaggedWord(namedtuple('IntTaggedWord', 'word tag')):

    def __repr__(self):
        return 'IntTaggedWord(%s, %s)' % (_show(self.word), _show(self.tag))


def _show(i):
    return 'null' if i == -1 else str(i)


NULL_ITW = IntTaggedWord(NULL_WORD, NULL_TAG)


def make_index(keys=()):
    """Vocabulary holding `keys`; the null ids can never be handed out by it.

    >>> tags = make_index(['NN', 'VB'])
    >>> tags['VB'], tags.lookup(0), len(tags)
    (1, 'NN', 2)

    """
    index = Alphabet()
    for k in keys:
        check_id(index[k])
    return index


def check_id(i):
    assert i not in (NULL_WORD, NULL_TAG), 'vocabulary id %r collides with the null markers' % i
    return i


def to_events(sentence, word_index, tag_index):
    """Convert (word, tag) pairs to `IntTaggedWord`s, interning both.

    Pairs tagged with the boundary tag are dropped.

    """
    return [IntTaggedWord(check_id(word_index[w]), check_id(tag_index[t]))
            for (w, t) in sentence if t != BOUNDARY_TAG]
