"""
Signature generator: picks the stage table for a (language, level) pair.

Level 0 disables unknown word modeling for every language: every word maps to
the bare base label. Any other level must appear in the language's `LEVELS`
table; levels outside the table also give the base label (with a warning), so
a signature is always defined.

"""
import sys
from collections import namedtuple
from arsenal import colors

from uwm.signatures import arabic, english, french
from uwm.signatures.pipeline import BASE_LABEL, run


Language = namedtuple('Language', 'levels default_level')

LANGUAGES = {
    'arabic': Language(arabic.LEVELS, arabic.DEFAULT_LEVEL),
    'english': Language(english.LEVELS, english.DEFAULT_LEVEL),
    'french': Language(french.LEVELS, french.DEFAULT_LEVEL),
}


def get_language(name):
    try:
        return LANGUAGES[name]
    except KeyError:
        raise ValueError('unknown language %r (choose from %s)'
                         % (name, ', '.join(sorted(LANGUAGES))))


def level_range(name):
    "Smallest and largest signature level defined for language `name`."
    levels = get_language(name).levels
    return min(levels), max(levels)


def never_known(word):
    return False


class SignatureGenerator(object):
    """Maps a word and its sentence position to its signature.

    >>> g = SignatureGenerator('arabic', 9, prefix_size=1, suffix_size=1)
    >>> g('AlktAb', 0), g('2020', 3), g('madrasap', 1)
    ('UNK-Al-b', 'UNK-NUM', 'UNK-m-FEM-p')
    >>> g.level = 0
    >>> g('AlktAb', 0)
    'UNK'

    `lowercase_known` is a predicate on lowercased words; only variants which
    distinguish sentence-initial capitals of known words use it.

    """

    def __init__(self, language, level, prefix_size=0, suffix_size=0, lowercase_known=never_known):
        self.language = language
        self._prefix_size = prefix_size
        self._suffix_size = suffix_size
        self.lowercase_known = lowercase_known
        self.level = level

    @property
    def level(self):
        return self._level

    @level.setter
    def level(self, level):
        self._level = level
        if level != 0 and level not in get_language(self.language).levels:
            print(colors.yellow % '[warning] no %s signatures at level %s; using %r for every word.'
                  % (self.language, level, BASE_LABEL), file=sys.stderr)
        self._build()

    # Stage tables capture the affix sizes, so changing a size rebuilds them.

    @property
    def prefix_size(self):
        return self._prefix_size

    @prefix_size.setter
    def prefix_size(self, size):
        self._prefix_size = size
        self._build()

    @property
    def suffix_size(self):
        return self._suffix_size

    @suffix_size.setter
    def suffix_size(self, size):
        self._suffix_size = size
        self._build()

    def _build(self):
        levels = get_language(self.language).levels
        if self._level in levels:
            self.stages = levels[self._level](self)
        else:
            self.stages = ()

    def __call__(self, word, loc):
        return run(self.stages, word, loc)

    signature = __call__

    def __repr__(self):
        return 'SignatureGenerator(%r, %r, prefix_size=%r, suffix_size=%r)' % (
            self.language, self.level, self.prefix_size, self.suffix_size)
