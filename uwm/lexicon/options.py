"""
Lexicon options relevant to unknown words.
"""
import sys
from arsenal import colors

from uwm.signatures import LANGUAGES, level_range
from uwm.signatures.generator import get_language


class Options(object):
    """
    language: which signature table to use (see `uwm.signatures.LANGUAGES`).

    unknown_level: signature variant; 0 turns unknown word modeling off.
      `None` picks the language's default. Other values are clamped to the
      levels the language defines.

    unknown_prefix_size, unknown_suffix_size: number of leading/trailing
      characters in the generic affix features (0 disables them).

    smart_mutation: accepted for compatibility with other lexicons; unused.

    fraction_before_unseen_counting: leading fraction of the training trees
      that only warm up the seen-word counts.

    """

    def __init__(self, language='english', unknown_level=None, unknown_prefix_size=1,
                 unknown_suffix_size=1, smart_mutation=False, fraction_before_unseen_counting=0.5):
        lang = get_language(language)
        if not 0 <= fraction_before_unseen_counting <= 1:
            raise ValueError('fraction_before_unseen_counting must be in [0, 1], got %r'
                             % fraction_before_unseen_counting)
        if unknown_level is None:
            unknown_level = lang.default_level
        self.language = language
        self.unknown_level = clamp_level(language, unknown_level)
        self.unknown_prefix_size = unknown_prefix_size
        self.unknown_suffix_size = unknown_suffix_size
        self.smart_mutation = smart_mutation
        self.fraction_before_unseen_counting = fraction_before_unseen_counting

    def __repr__(self):
        return 'Options(%s)' % ', '.join('%s=%r' % kv for kv in sorted(vars(self).items()))

    @staticmethod
    def add_arguments(p):
        "Register unknown word options on `argparse` parser `p`."
        g = p.add_argument_group('unknown words')
        g.add_argument('--language', choices=sorted(LANGUAGES), default='english')
        g.add_argument('--unknown-level', type=int, default=None,
                       help='signature variant; 0 disables (default: per language)')
        g.add_argument('--unknown-prefix-size', type=int, default=1)
        g.add_argument('--unknown-suffix-size', type=int, default=1)
        g.add_argument('--smart-mutation', action='store_true')
        g.add_argument('--fraction-before-unseen-counting', type=float, default=0.5)
        return g

    @classmethod
    def from_args(cls, args):
        return cls(language=args.language,
                   unknown_level=args.unknown_level,
                   unknown_prefix_size=args.unknown_prefix_size,
                   unknown_suffix_size=args.unknown_suffix_size,
                   smart_mutation=args.smart_mutation,
                   fraction_before_unseen_counting=args.fraction_before_unseen_counting)


def clamp_level(language, level):
    """Clamp `level` to the range defined for `language`; 0 (off) is always valid.

    >>> clamp_level('arabic', 9), clamp_level('arabic', 0)
    (9, 0)

    """
    if level == 0:
        return level
    lo, hi = level_range(language)
    if lo <= level <= hi:
        return level
    clamped = min(max(level, lo), hi)
    print(colors.yellow % '[warning] invalid unknown word level %s for %s; using %s (valid: 0, %s-%s).'
          % (level, language, clamped, lo, hi), file=sys.stderr)
    return clamped
