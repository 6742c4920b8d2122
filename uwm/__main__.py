"""
Train an unknown word model on treebank files and inspect it.

  python -m uwm data/ftb/train/ --language french --top 30
  python -m uwm train.mrg --language arabic --unknown-level 10 --words AlktAb 1990

Prints the most frequent (signature, tag) cells, how much unseen-word mass
each signature received, and the signature of any words given on the command
line.

"""
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from arsenal import colors

from uwm.lexicon.events import make_index
from uwm.lexicon.model import UnknownWordModel
from uwm.lexicon.options import Options
from uwm.parsing.ptb import load_trees


def parser():
    p = ArgumentParser(description=__doc__, formatter_class=RawDescriptionHelpFormatter)
    p.add_argument('treebank', nargs='+', help='bracketed tree files or directories of them')
    p.add_argument('--pattern', default='*.mrg', help='file pattern inside directories')
    p.add_argument('--weight', type=float, default=1.0)
    p.add_argument('--top', type=int, default=20)
    p.add_argument('--words', nargs='*', default=[])
    Options.add_arguments(p)
    return p


def run(args):
    "Train on the treebank named in `args` and print the report."
    options = Options.from_args(args)
    model = UnknownWordModel(options, make_index(), make_index())
    trees = list(load_trees(args.treebank, pattern=args.pattern))
    if not trees:
        print(colors.yellow % '[warning] no trees found in %s' % ' '.join(args.treebank),
              file=sys.stderr)
    unseen = model.train(trees, weight=args.weight)

    print(colors.green % '%s trees, %s words, %s tags, level %s'
          % (len(trees), len(model.word_index), len(model.tag_index), model.unknown_level))

    df = unseen.to_frame(model.word_index, model.tag_index)
    if len(df):
        print()
        print(colors.yellow % '(signature, tag) counts')
        print(df.head(args.top).to_string(index=False))
        print()
        print(colors.yellow % 'signatures')
        by_sig = df.groupby('signature')['count'].sum().sort_values(ascending=False)
        print(by_sig.head(args.top).to_string())

    if args.words:
        print()
        for loc, w in enumerate(args.words):
            print('%s\t%s' % (w, model.signature(w, loc)))

    return model


def main(argv=None):
    run(parser().parse_args(argv))


if __name__ == '__main__':
    main()
