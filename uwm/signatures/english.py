"""
Unknown word signatures for English.

Level 5 is the WSJ-tuned signature of the Berkeley/Stanford lexicons:

  { -CAPS, -INITC ap, -LC lowercase, 0 } +
  { -KNOWNLC, 0 } + [only for INITC]
  { -NUM, 0 } +
  { -DASH, 0 } +
  { -last lowered char(s) if known discriminating suffix, 0 }

"""
import unicodedata


DEFAULT_LEVEL = 5

SUFFIXES = ('ed', 'ing', 'ion', 'er', 'est', 'ly', 'ity', 'y', 'al')


def shape(word):
    "Number of capitals and whether the word has digits, dashes or lowercase letters."
    num_caps = 0
    has_digit = has_dash = has_lower = False
    for ch in word:
        if ch.isdigit():
            has_digit = True
        elif ch == '-':
            has_dash = True
        elif ch.isalpha():
            if ch.islower():
                has_lower = True
            elif unicodedata.category(ch) == 'Lt':
                has_lower = True
                num_caps += 1
            else:
                num_caps += 1
    return num_caps, has_digit, has_dash, has_lower


def capitalization(word, loc, lowercase_known):
    """
    >>> known = {'the'}.__contains__
    >>> capitalization('The', 0, known), capitalization('The', 4, known)
    ('-INITC-KNOWNLC', '-CAPS')
    >>> capitalization('Zyx', 0, known), capitalization('zyx', 0, known), capitalization('$US', 3, known)
    ('-INITC', '-LC', '-CAPS')

    """
    if not word:
        return ''
    num_caps, _, _, has_lower = shape(word)
    ch0 = word[0]
    if ch0.isupper() or unicodedata.category(ch0) == 'Lt':
        if loc == 0 and num_caps == 1:
            if lowercase_known(word.lower()):
                return '-INITC-KNOWNLC'
            return '-INITC'
        return '-CAPS'
    elif not ch0.isalpha() and num_caps > 0:
        return '-CAPS'
    elif has_lower:
        return '-LC'
    return ''


def discriminating_suffix(word):
    """
    >>> discriminating_suffix('cats'), discriminating_suffix('glass'), discriminating_suffix('walked')
    ('-s', '', '-ed')
    >>> discriminating_suffix('re-elected'), discriminating_suffix('fly')
    ('', '')

    """
    num_caps, has_digit, has_dash, _ = shape(word)
    lowered = word.lower()
    wlen = len(word)
    if lowered.endswith('s') and wlen >= 3:
        # length 3, so you don't miss out on ones like 80s
        if lowered[-2] not in 'siu':
            return '-s'
    elif wlen >= 5 and not has_dash and not (has_digit and num_caps > 0):
        for s in SUFFIXES:
            if lowered.endswith(s):
                return '-' + s
    return ''


def level5(g):
    lowercase_known = g.lowercase_known

    def caps(word, loc, marks):
        return capitalization(word, loc, lowercase_known)

    def digits(word, loc, marks):
        return '-NUM' if shape(word)[1] else ''

    def dash(word, loc, marks):
        return '-DASH' if shape(word)[2] else ''

    def ending(word, loc, marks):
        return discriminating_suffix(word)

    return (caps, digits, dash, ending)


LEVELS = {
    5: level5,
}
