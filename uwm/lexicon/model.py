"""
Unknown word model of a lexicalized parser's lexicon.

Training pretends that the first part of the treebank was never seen, then
collects, for every word still rare when it is scanned, a count of its tag
together with the word's signature. Scoring turns those counts into an
estimate of log P(word | tag) for words the lexicon has never seen:

    P(T | S) = (c(T, S) + smooth * P(T | unseen)) / (c(S) + smooth)

    P(W | T) = P(T | S) P(W) / P(T)

"""
import sys
from collections import Counter
from numpy import log, float64, errstate
from arsenal import colors

from uwm.lexicon.events import NULL_WORD, NULL_TAG, to_events
from uwm.lexicon.options import Options
from uwm.lexicon.unseen import UnseenCounter
from uwm.parsing.trees import tagged_sentence
from uwm.signatures.generator import SignatureGenerator, never_known


class UnknownWordModel(object):
    """
    word_index, tag_index: vocabularies shared with the rest of the lexicon
      (`arsenal.alphabet.Alphabet`). Signatures are interned into `word_index`.

    Train once (or a few times, e.g. with one weight per treebank), then
    score. Each call to `train` publishes a new frozen snapshot of the counts
    in `self.unseen`; `score` only reads the snapshot.

    """

    def __init__(self, options, word_index, tag_index, lowercase_known=never_known):
        if options is None:
            options = Options()
        self.options = options
        self.word_index = word_index
        self.tag_index = tag_index
        self.signatures = SignatureGenerator(options.language,
                                             options.unknown_level,
                                             prefix_size=options.unknown_prefix_size,
                                             suffix_size=options.unknown_suffix_size,
                                             lowercase_known=lowercase_known)
        self.smart_mutation = options.smart_mutation
        self.counter = UnseenCounter()
        self.unseen = None

    @property
    def unknown_level(self):
        return self.signatures.level

    @unknown_level.setter
    def unknown_level(self, level):
        self.signatures.level = level

    def signature(self, word, loc):
        "Signature (equivalence class) of `word` at sentence position `loc`."
        return self.signatures(word, loc)

    def signature_index(self, word, loc):
        "Id of the signature of `word`, interned into the word vocabulary."
        return self.word_index[self.signature(word, loc)]

    def events(self, sentence):
        return to_events(tagged_sentence(sentence), self.word_index, self.tag_index)

    def train(self, trees, weight=1.0):
        """Collect unseen-word statistics from `trees` (nltk trees or tagged
        sentences, in corpus order)."""
        trees = list(trees)
        seen = Counter()
        start = int(len(trees) * self.options.fraction_before_unseen_counting)
        for tnum, tree in enumerate(trees, start=1):
            for loc, itw in enumerate(self.events(tree)):
                seen[itw.word] += weight
                # start counting once some way through trees; tnum is 1-based
                if tnum > start and seen[itw.word] < 2:
                    word = self.word_index.lookup(itw.word)
                    s = self.signature_index(word, loc)
                    self.counter.observe(s, itw.tag, weight)
        if not self.counter:
            print(colors.yellow % '[warning] no unseen words in %s trees (%s held out); '
                  'using a uniform distribution over tags.' % (len(trees), start),
                  file=sys.stderr)
            self.counter.uniform(self.tag_index, weight)
        self.unseen = self.counter.freeze()
        return self.unseen

    def _signature_id(self, word, loc):
        # Read-only counterpart of `signature_index`.
        sig = self.signature(word, loc)
        if sig in self.word_index:
            return self.word_index[sig]
        return None

    def counts(self, word, tag, loc):
        "The counts c(T,S), c(S), c(unseen), c(T,unseen) behind the estimate."
        unseen = self.unseen
        assert unseen is not None, 'train the unknown word model before scoring'
        s = self._signature_id(word, loc)
        c_TS = unseen.count(s, tag)
        c_S = unseen.count(s, NULL_TAG)
        c_U = unseen.count(NULL_WORD, NULL_TAG)
        c_T = unseen.count(NULL_WORD, tag)
        return c_TS, c_S, c_U, c_T

    def p_tag_given_signature(self, word, tag, loc, smooth):
        """Smoothed P(tag | signature of word). Zero denominators give nan or
        inf rather than an exception."""
        c_TS, c_S, c_U, c_T = self.counts(word, tag, loc)
        p_T_U = float64(c_T) / c_U
        if self.unknown_level == 0:
            c_TS = 0
            c_S = 0
        return (c_TS + smooth * p_T_U) / (float64(c_S) + smooth)

    def score(self, word, tag, loc, c_Tseen, total, smooth):
        """log P(word | tag) for an unseen `word` with tag id `tag` at position
        `loc`.

        `c_Tseen` is the count of `tag` among seen-word events and `total`
        the number of seen-word events; both must be positive, otherwise the
        result is not finite.

        """
        with errstate(divide='ignore', invalid='ignore'):
            pb_T_S = self.p_tag_given_signature(word, tag, loc, smooth)
            p_T = float64(c_Tseen) / total
            p_W = 1.0 / float64(total)
            return float(log(pb_T_S * p_W / p_T))

    def __repr__(self):
        return 'UnknownWordModel(%r)' % (self.options,)

