# Split a sense inventory into word#n#sense_id files for the evaluation script
import argparse
import os

from inventory_splitter.common import info, load_stopwords, load_nltk_stopwords
from inventory_splitter.global_variables import max_feature_num, stopwords_env_var, stopwords_file
from inventory_splitter.splitter import InventorySplitter, format_summary


def positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"'{value}' is not a positive integer")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog='split-inventory',
        description='Split a sense inventory into one feature file per word sense.')
    parser.add_argument('inventory', help='tab separated inventory: word, sense id, cluster words, features')
    parser.add_argument('output_dir', help='output directory with the split files')
    parser.add_argument('max_feature_num', nargs='?', type=positive_int, default=max_feature_num,
                        help=f'max number of features per sense (default: {max_feature_num})')
    parser.add_argument('--stopwords', default=os.environ.get(stopwords_env_var, stopwords_file),
                        help=f'stopword file, one per line (default: ${stopwords_env_var} or {stopwords_file})')
    parser.add_argument('--nltk-stopwords', metavar='LANG', default=None,
                        help='also filter the nltk stopword list for this language')
    parser.add_argument('--verbose', action='store_true', help='report unparsable features and collisions')
    return parser


def run(argv=None):
    args = build_parser().parse_args(argv)

    info(f'Input inventory: {args.inventory}')
    info(f'Output directory: {args.output_dir}')
    info(f'Max feature num.: {args.max_feature_num}')

    stopwords = load_stopwords(args.stopwords)
    if args.nltk_stopwords is not None:
        stopwords |= load_nltk_stopwords(args.nltk_stopwords)
    info(f'Loaded {len(stopwords)} stopwords')

    splitter = InventorySplitter(stopwords=stopwords, max_feature_num=args.max_feature_num, verbose=args.verbose)
    summary = splitter.split_inventory(args.inventory, args.output_dir)
    print(format_summary(summary))
    return summary


def main():
    run()


if __name__ == '__main__':
    main()
