"""Treebank file loader.

Reads Penn treebank style bracketed files (e.g. `wsj_0001.mrg`, or the
French/Arabic treebanks after conversion to the same format). Files may hold
many trees, each optionally wrapped in an unlabeled top bracket.

"""
import re
from path import Path
from nltk import Tree


TREE_START = re.compile(r'^\(\s*\(', re.M)


def load_file(filename):
    "Trees in a single bracketed file."
    contents = Path(filename).read_text(encoding='utf-8')
    if TREE_START.search(contents) is None:
        # one bare tree per top-level bracket
        for chunk in _top_level(contents, filename):
            yield Tree.fromstring(chunk)
        return
    # split individual trees
    for chunk in TREE_START.split(contents):
        if not chunk.strip():
            continue
        chunk = '( (' + chunk
        yield Tree.fromstring(chunk, remove_empty_top_bracketing=True)


def _top_level(contents, filename):
    depth = 0
    start = None
    for i, ch in enumerate(contents):
        if ch == '(':
            if depth == 0:
                start = i
            depth += 1
        elif ch == ')':
            depth -= 1
            if depth < 0:
                raise ValueError('%s: unexpected ")" at offset %s' % (filename, i))
            if depth == 0:
                yield contents[start:i+1]
    if depth != 0:
        raise ValueError('%s: %s unclosed bracket(s) at end of file' % (filename, depth))


def load_trees(paths, pattern='*.mrg'):
    """Trees from each file in `paths`; directories contribute their files
    matching `pattern`, in sorted order."""
    for p in paths:
        p = Path(p)
        if p.is_dir():
            for filename in sorted(p.walkfiles(pattern)):
                for t in load_file(filename):
                    yield t
        else:
            for t in load_file(p):
                yield t
