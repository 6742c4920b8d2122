"""
Counts of unseen-word events.

`UnseenCounter` accumulates during training. Every event updates four cells
at once, (sig, tag), (sig, null), (null, tag) and (null, null), so the
marginals always agree with the joint counts. `freeze` hands out an
immutable `UnseenCounts` that scorers read.

"""
from collections import Counter
from types import MappingProxyType
from pandas import DataFrame

from uwm.lexicon.events import IntTaggedWord, NULL_WORD, NULL_TAG, NULL_ITW, BOUNDARY_TAG


class UnseenCounter(object):

    def __init__(self):
        self.counts = Counter()

    def __len__(self):
        return len(self.counts)

    def __bool__(self):
        return bool(self.counts)

    def observe(self, sig, tag, weight=1.0):
        "Record one unseen-word event: signature `sig` with tag `tag`."
        c = self.counts
        c[IntTaggedWord(sig, tag)] += weight
        c[IntTaggedWord(NULL_WORD, tag)] += weight
        c[IntTaggedWord(sig, NULL_TAG)] += weight
        c[NULL_ITW] += weight

    def uniform(self, tag_index, weight=1.0):
        "Spread `weight` over every tag but the boundary tag."
        for t in range(len(tag_index)):
            if tag_index.lookup(t) != BOUNDARY_TAG:
                self.counts[IntTaggedWord(NULL_WORD, t)] += weight
                self.counts[NULL_ITW] += weight

    def freeze(self):
        return UnseenCounts(self.counts)


class UnseenCounts(object):
    """Read-only snapshot of an `UnseenCounter`.

    >>> c = UnseenCounter()
    >>> c.observe(7, 0); c.observe(7, 1, 2.0)
    >>> f = c.freeze()
    >>> f.count(7, 1), f.count(7, NULL_TAG), f.total, f.count(99, 0)
    (2.0, 3.0, 3.0, 0.0)

    """

    def __init__(self, counts):
        self._counts = MappingProxyType(dict(counts))

    def count(self, word, tag):
        return float(self._counts.get((word, tag), 0.0))

    @property
    def total(self):
        return self.count(NULL_WORD, NULL_TAG)

    def __len__(self):
        return len(self._counts)

    def __contains__(self, k):
        return k in self._counts

    def items(self):
        return self._counts.items()

    def signatures(self):
        "Ids of the signatures with at least one event."
        return sorted({k.word for k in self._counts if k.word != NULL_WORD})

    def to_frame(self, word_index, tag_index):
        """One row per (signature, tag) cell, marginals excluded, sorted by
        decreasing count."""
        rows = [{'signature': word_index.lookup(k.word),
                 'tag': tag_index.lookup(k.tag),
                 'count': v}
                for k, v in self._counts.items()
                if k.word != NULL_WORD and k.tag != NULL_TAG]
        df = DataFrame(rows, columns=['signature', 'tag', 'count'])
        return df.sort_values(['count', 'signature', 'tag'],
                              ascending=[False, True, True]).reset_index(drop=True)
