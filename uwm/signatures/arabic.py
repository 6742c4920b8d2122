"""
Unknown word signatures for Arabic.

Words may come in Buckwalter transliteration or in Arabic script; from level
9 on the probes recognize both. Levels 6-9 date from the first Arabic parsing
experiments, level 10 adds a character class for single-character tokens.

  6: { -Al, 0 } + { -NUM, last char }   (Al- left on the word)
  7: { -NUM, last char }                 (Al- already split off)
  8: { -Al, 0 } + { -NUM, -first char } + adj + past + present + fem + abstract
  9: { -NUM | -Al | -prefix } + adj + past + present + { abstract | fem }
     + { -suffix unless numeral }
 10: like 9, plus the Unicode category of one-character words, written as
     '-' and the two-letter category name (e.g. '.' gives '-Po'). Older
     Arabic models wrote the numeric character type with no dash instead,
     so level 10 signature strings differ from theirs for such words.

"""
from uwm.signatures.pipeline import (probe, when, first_of, unless, prefix, suffix,
                                     first_char, last_char, char_category)


DEFAULT_LEVEL = 9

# Arabic decimal separator, thousands separator, percent sign and minus sign.
NUMBER_PUNCTUATION = frozenset('-.,%٫٬٪−')


def all_digit_plus(word):
    """Digits, possibly with number punctuation, and at least one digit.

    >>> all_digit_plus('1,000'), all_digit_plus('٣٫٥'), all_digit_plus('--')
    (True, True, False)
    >>> all_digit_plus('12kg')
    False

    """
    seen_digit = False
    for ch in word:
        if ch.isdigit():
            seen_digit = True
        elif ch not in NUMBER_PUNCTUATION:
            return False
    return seen_digit


def has_al_prefix(word):
    "Definite article, either script."
    return word.startswith('Al') or word.startswith('ال')


def has_buckwalter_al_prefix(word):
    return word.startswith('Al')


def _ending(word, pairs):
    for (buckwalter, script) in pairs:
        if word.endswith(buckwalter) or word.endswith(script):
            return buckwalter
    return None


def likely_adjectival_suffix(word):
    """nisba ending -iy(y) of derived adjectives.

    >>> likely_adjectival_suffix('siyAsiy'), likely_adjectival_suffix('kitAb')
    ('-ADJ', '')

    """
    if _ending(word, [('y', 'ي')]):
        return '-ADJ'
    return ''


def past_tense_verb_number_suffix(word):
    """Person/number suffixes of the perfective.

    >>> past_tense_verb_number_suffix('katabuwA')
    '-PV.wA'
    >>> past_tense_verb_number_suffix('كتبت')
    '-PV.t'

    """
    e = _ending(word, [('wA', 'وا'),
                       ('tm', 'تم'),
                       ('nA', 'نا'),
                       ('t', 'ت')])
    if e:
        return '-PV.' + e
    return ''


def present_tense_verb_number_suffix(word):
    "Plural and dual suffixes of the imperfective."
    e = _ending(word, [('wn', 'ون'),
                       ('An', 'ان')])
    if e:
        return '-IV.' + e
    return ''


def abstraction_noun_suffix(word):
    """-iyya nouns of abstraction.

    >>> abstraction_noun_suffix('Hurriyp')
    '-ABST'

    """
    if _ending(word, [('yp', 'ية')]):
        return '-ABST'
    return ''


def taa_marbuta_suffix(word):
    """Feminine ending taa marbuta.

    >>> taa_marbuta_suffix('madrasap'), taa_marbuta_suffix('مدرسة')
    ('-FEM', '-FEM')

    """
    if _ending(word, [('p', 'ة')]):
        return '-FEM'
    return ''


def _number_or(stage):
    return first_of(when(all_digit_plus, '-NUM'), stage)


def _dashed(f):
    return probe(lambda word: '-' + f(word))


def level6(g):
    return (when(has_buckwalter_al_prefix, '-Al'),
            _number_or(probe(last_char)))


def level7(g):
    return (_number_or(probe(last_char)),)


def level8(g):
    return (when(has_buckwalter_al_prefix, '-Al'),
            _number_or(_dashed(first_char)),
            probe(likely_adjectival_suffix),
            probe(past_tense_verb_number_suffix),
            probe(present_tense_verb_number_suffix),
            probe(taa_marbuta_suffix),
            probe(abstraction_noun_suffix))


def level9(g):
    return (first_of(when(all_digit_plus, '-NUM'),
                     when(has_al_prefix, '-Al'),
                     prefix(g.prefix_size)),
            probe(likely_adjectival_suffix),
            probe(past_tense_verb_number_suffix),
            probe(present_tense_verb_number_suffix),
            first_of(probe(abstraction_noun_suffix),
                     probe(taa_marbuta_suffix)),
            unless(all_digit_plus, suffix(g.suffix_size)))


def level10(g):
    stages = level9(g)
    return stages[:1] + (probe(char_category),) + stages[1:]


LEVELS = {
    6: level6,
    7: level7,
    8: level8,
    9: level9,
    10: level10,
}
