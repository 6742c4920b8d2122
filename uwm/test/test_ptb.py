import doctest
import pytest

from uwm import __main__ as cli
from uwm.parsing import trees
from uwm.parsing.ptb import load_file, load_trees
from uwm.parsing.trees import tagged_yield


MRG = """\
( (S
    (NP-SBJ (DT The) (NN dog) )
    (VP (VBD barked) )
    (. .) ))
( (S
    (NP-SBJ (-NONE- *) )
    (VP (VB Go) (ADVP (RB home) ))
    (. !) ))
"""

BARE = """\
(ROOT (SENT (NP (DET Le) (NC chat)) (VN (V dort)) (PONCT .)))
(ROOT (SENT (NP (NPP Paris)) (VN (V dort)) (PONCT .)))
"""


def test_load_mrg(tmp_path):
    f = tmp_path / 'wsj_0001.mrg'
    f.write_text(MRG, encoding='utf-8')
    ts = list(load_file(str(f)))
    assert len(ts) == 2
    assert tagged_yield(ts[0]) == [('The', 'DT'), ('dog', 'NN'), ('barked', 'VBD'), ('.', '.')]
    assert tagged_yield(ts[1]) == [('Go', 'VB'), ('home', 'RB'), ('!', '.')]
    print('[test_load_mrg] pass')


def test_load_bare(tmp_path):
    f = tmp_path / 'ftb.txt'
    f.write_text(BARE, encoding='utf-8')
    ts = list(load_file(str(f)))
    assert [t.label() for t in ts] == ['ROOT', 'ROOT']
    assert tagged_yield(ts[1])[0] == ('Paris', 'NPP')
    print('[test_load_bare] pass')


def test_load_directory(tmp_path):
    (tmp_path / '00').mkdir()
    (tmp_path / '00' / 'wsj_0001.mrg').write_text(MRG, encoding='utf-8')
    (tmp_path / '00' / 'notes.txt').write_text('not a tree', encoding='utf-8')
    bare = tmp_path / 'extra.txt'
    bare.write_text(BARE, encoding='utf-8')
    ts = list(load_trees([str(tmp_path), str(bare)]))
    assert len(ts) == 4
    print('[test_load_directory] pass')


def test_load_single_file(tmp_path):
    f = tmp_path / 'ftb.txt'
    f.write_text(BARE, encoding='utf-8')
    ts = list(load_trees([str(f)]))
    assert [tagged_yield(t)[-1] for t in ts] == [('.', 'PONCT'), ('.', 'PONCT')]
    # the pattern only filters directories
    assert len(list(load_trees([str(f)], pattern='*.mrg'))) == 2
    print('[test_load_single_file] pass')


def test_unbalanced_brackets(tmp_path):
    extra = tmp_path / 'extra.txt'
    extra.write_text('(NP (NN dog)))\n(NP (NN cat))\n', encoding='utf-8')
    with pytest.raises(ValueError) as e:
        list(load_file(str(extra)))
    assert 'extra.txt' in str(e.value)

    unclosed = tmp_path / 'unclosed.txt'
    unclosed.write_text('(NP (NN dog)\n', encoding='utf-8')
    with pytest.raises(ValueError) as e:
        list(load_trees([str(unclosed)]))
    assert 'unclosed.txt' in str(e.value)
    print('[test_unbalanced_brackets] pass')


def test_main(tmp_path, capsys):
    f = tmp_path / 'train.mrg'
    f.write_text(MRG * 3, encoding='utf-8')
    args = cli.parser().parse_args([str(f), '--fraction-before-unseen-counting', '0',
                                    '--words', 'Shelters', 'in', '1984'])
    model = cli.run(args)
    out = capsys.readouterr().out
    assert '6 trees' in out
    assert 'UNK-INITC-s' in out
    assert 'UNK-NUM' in out
    assert model.unknown_level == 5
    assert model.unseen.total == 7.0
    print('[test_main] pass')


def test_main_arabic(tmp_path, capsys):
    f = tmp_path / 'atb.mrg'
    f.write_text('(S (NP (NOUN AlktAb)) (NP (NOUN madrasap)) (NUM 1990))\n', encoding='utf-8')
    cli.main([str(f), '--language', 'arabic', '--unknown-level', '42', '--words', 'AlqAhrp'])
    captured = capsys.readouterr()
    assert 'level 10' in captured.out
    assert 'AlqAhrp\tUNK-Al-FEM-p' in captured.out
    assert 'invalid unknown word level 42' in captured.err
    print('[test_main_arabic] pass')


def test_doctests():
    failures, _ = doctest.testmod(trees)
    assert failures == 0
