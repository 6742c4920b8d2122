"""
Stages and combinators for building signatures.

A signature is the base label followed by the markers emitted by an ordered
tuple of stages. A stage is any callable `stage(word, loc, marks)` returning a
marker string ('' when it does not fire); `marks` holds everything emitted so
far, base label included.

Precedence between alternatives is expressed with `first_of`, `unless` and
`if_unmarked` so that every (language, level) variant can be declared as a
flat table.

"""
import unicodedata

BASE_LABEL = 'UNK'


def run(stages, word, loc):
    """Apply `stages` in order and join the markers onto the base label.

    >>> run([when(str.isdigit, '-NUM'), prefix(2)], '1984', 0)
    'UNK-NUM-19'

    >>> run([], 'anything', 3)
    'UNK'

    """
    marks = [BASE_LABEL]
    for stage in stages:
        marks.append(stage(word, loc, marks))
    return ''.join(marks)


def probe(f):
    "Lift a word-only probe `f(word) -> marker` into a stage."
    def stage(word, loc, marks):
        return f(word)
    stage.__name__ = f.__name__
    return stage


def when(test, marker):
    "Stage that emits `marker` when `test(word)` holds."
    def stage(word, loc, marks):
        return marker if test(word) else ''
    return stage


def first_of(*stages):
    """Emit the marker of the first stage that fires, skipping the rest.

    >>> run([first_of(when(str.isdigit, '-NUM'), prefix(1))], '42', 0)
    'UNK-NUM'
    >>> run([first_of(when(str.isdigit, '-NUM'), prefix(1))], 'abc', 0)
    'UNK-a'

    """
    def stage(word, loc, marks):
        for s in stages:
            m = s(word, loc, marks)
            if m:
                return m
        return ''
    return stage


def unless(test, s):
    "Run stage `s` only when `test(word)` does not hold."
    def stage(word, loc, marks):
        if test(word):
            return ''
        return s(word, loc, marks)
    return stage


def if_unmarked(s):
    "Run stage `s` only if no earlier stage emitted a marker."
    def stage(word, loc, marks):
        if any(marks[1:]):
            return ''
        return s(word, loc, marks)
    return stage


def prefix(size):
    "Generic prefix feature: '-' plus the first `size` characters."
    def stage(word, loc, marks):
        if size <= 0:
            return ''
        return '-' + word[:min(len(word), size)]
    return stage


def suffix(size):
    """Generic suffix feature: '-' plus the last `size` characters.

    >>> run([suffix(3)], 'parsing', 0)
    'UNK-ing'
    >>> run([suffix(3)], 'to', 0)
    'UNK-to'
    >>> run([suffix(0)], 'parsing', 0)
    'UNK'

    """
    def stage(word, loc, marks):
        if size <= 0:
            return ''
        return '-' + word[len(word) - min(len(word), size):]
    return stage


def first_char(word):
    return word[:1]


def last_char(word):
    return word[-1:]


def char_category(word):
    """Unicode general category of a single-character word, by name rather
    than by the numeric character type.

    >>> char_category('.'), char_category('a'), char_category('ab')
    ('-Po', '-Ll', '')

    """
    if len(word) != 1:
        return ''
    return '-' + unicodedata.category(word)
