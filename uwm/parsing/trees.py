"""
Tree utilities for turning treebank trees into tagged training events.
"""
from nltk import Tree


def is_terminal(d):
    return not isinstance(d, Tree)


def is_preterm(d):
    return isinstance(d, Tree) and len(d) == 1 and is_terminal(d[0])


def remove_empty(t):
    """Remove empty elements (-NONE-) and any constituent left without words.

    Unlike the training-time tree normalization of the parser, labels are left
    untouched: POS tags such as -LRB- must survive.

    >>> t = Tree.fromstring('(S (NP-SBJ (-NONE- *T*-1)) (VP (VBD ran) (-LRB- -LRB-)))')
    >>> print(remove_empty(t))
    (S (VP (VBD ran) (-LRB- -LRB-)))

    """
    if is_terminal(t):
        return t
    if t.label() == '-NONE-':
        return None
    new = [c for c in (remove_empty(c) for c in t) if c is not None]
    if not new:
        return None
    return Tree(t.label(), new)


def tagged_yield(t):
    """(word, tag) pairs of tree `t`, left to right, without empty elements.

    >>> tagged_yield(Tree.fromstring('(ROOT (S (NP (DT The) (NN cat)) (VP (VBD sat) (-NONE- *))))'))
    [('The', 'DT'), ('cat', 'NN'), ('sat', 'VBD')]

    """
    t = remove_empty(t)
    if t is None:
        return []
    return t.pos()


def tagged_sentence(x):
    """Accept either a tree or a sequence of (word, tag) pairs.

    >>> tagged_sentence([('a', 'DT'), ('dog', 'NN')])
    [('a', 'DT'), ('dog', 'NN')]

    """
    if isinstance(x, Tree):
        return tagged_yield(x)
    return [(w, t) for (w, t) in x]
