"""
Unknown word signatures for French.

Only one variant so far (level 1): a part-of-speech guess from derivational
suffixes, then orthographic features, and the last characters of the word as
a fallback when nothing else fired.

"""
import re
from uwm.signatures.pipeline import probe, first_of, if_unmarked, suffix


DEFAULT_LEVEL = 1

NOUN_SUFFIX = re.compile('(ier|ière|ité|ion|ison|isme|ysme|iste|esse|eur|euse|ence|eau|erie|ng|ette'
                         '|age|ade|ance|ude|ogue|aphe|ate|duc|anthe|archie|coque|érèse|ergie|ogie'
                         '|lithe|mètre|métrie|odie|pathie|phie|phone|phore|onyme|thèque|scope|some'
                         '|pole|ôme|chromie|pie)s?$')
ADJ_SUFFIX = re.compile('(iste|ième|uple|issime|aire|esque|atoire|ale|al|able|ible|atif|ique|if|ive'
                        '|eux|aise|ent|ois|oise|ante|el|elle|ente|oire|ain|aine)s?$')
VERB_SUFFIX = re.compile('(ir|er|re|ez|ont|ent|ant|ais|ait|ra|era|eras|é|és|ées|isse|it)$')
ADV_SUFFIX = re.compile('(iment|ement|emment|amment)$')
POSSIBLE_PLURAL = re.compile('(s|ux)$')
HAS_DIGIT = re.compile(r'\d')
IS_DIGIT = re.compile(r'^\d+$')
HAS_PUNC = re.compile('[!-/:-@\\[-`{-~¡-¿‐-‧‰-⁞₠-₵]')
ALL_CAPS = re.compile('^[A-ZÀ-Ý]+$')


def _marker(pattern, marker):
    def f(word):
        if pattern.search(word):
            return marker
        return ''
    return f


noun_suffix = _marker(NOUN_SUFFIX, '-noun')
adj_suffix = _marker(ADJ_SUFFIX, '-adj')
verb_suffix = _marker(VERB_SUFFIX, '-verb')
adv_suffix = _marker(ADV_SUFFIX, '-adv')
possible_plural = _marker(POSSIBLE_PLURAL, '-plural')
has_digit = _marker(HAS_DIGIT, '-num')
is_digit = _marker(IS_DIGIT, '-isNum')
has_punc = _marker(HAS_PUNC, '-hpunc')
is_all_caps = _marker(ALL_CAPS, '-allcap')


def is_capitalized(word):
    """
    >>> is_capitalized('Paris'), is_capitalized('paris'), is_capitalized('')
    ('-upper', '', '')

    """
    if word[:1].isupper():
        return '-upper'
    return ''


def capitalized_inside_sentence(word, loc, marks):
    "Sentence-initial capitals carry no information; all-caps words are marked already."
    if loc > 0 and not is_all_caps(word):
        return is_capitalized(word)
    return ''


def level1(g):
    """
    >>> from uwm.signatures.generator import SignatureGenerator
    >>> g = SignatureGenerator('french', 1, suffix_size=2)
    >>> g('nationalisme', 3), g('parlez', 3), g('2020', 0)
    ('UNK-noun', 'UNK-verb', 'UNK-isNum')
    >>> g('Lyon', 0), g('Lyon', 4), g('ONU', 4)
    ('UNK-on', 'UNK-upper', 'UNK-allcap')

    """
    return (first_of(probe(noun_suffix),
                     probe(adj_suffix),
                     probe(verb_suffix),
                     probe(adv_suffix)),
            probe(possible_plural),
            first_of(probe(is_digit),
                     probe(has_digit)),
            probe(has_punc),
            probe(is_all_caps),
            capitalized_inside_sentence,
            if_unmarked(suffix(g.suffix_size)))


LEVELS = {
    1: level1,
}
