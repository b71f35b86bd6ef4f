# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
"""Plagiarism detector

Usage:
    detect-plagiarism.py [options] <doc-a> <doc-b>
    detect-plagiarism.py [options] examples

Options:
    -h --help              show this screen
    -v --verbose           print more output
    --all-matches          also sum all non-overlapping matches
    --symmetric            matches must not overlap in either document
                           when summing
    --preview=<int>        characters of the match to show [default: 200]
    --encoding=<s>         encoding of the documents [default: utf-8]

Finds the longest text shared by the two documents and reports how
much of each document it covers.
"""
from docopt import docopt
from plagdetect.defs import EXAMPLE_PAIRS
from plagdetect.matching import SeparatorCollision
from plagdetect.report import analyze_documents, print_report
from plagdetect.utils import SP, load_document
from sys import exit

def analyze_and_print(doc_a, doc_b, args):
    try:
        report = analyze_documents(doc_a, doc_b,
                                   aggregate = args['--all-matches'],
                                   symmetric = args['--symmetric'])
    except SeparatorCollision as e:
        print('Error: Cannot compare the documents (%s)' % e)
        exit(1)
    print_report(report, parse_preview(args['--preview']))

def parse_preview(value):
    try:
        n = int(value)
    except ValueError:
        n = -1
    if n < 0:
        print('Error: --preview must be a non-negative integer, not %s'
              % value)
        exit(1)
    return n

def load_or_exit(path, encoding):
    try:
        text = load_document(path, encoding)
    except (OSError, UnicodeDecodeError) as e:
        print('Error: Cannot read %s (%s)' % (path, e))
        exit(1)
    if not text:
        print('Error: %s is empty.' % path)
        exit(1)
    return text

def main():
    args = docopt(__doc__, version = 'Plagiarism detector 1.0')
    SP.enabled = args['--verbose']
    parse_preview(args['--preview'])

    if args['examples']:
        for doc_a, doc_b in EXAMPLE_PAIRS:
            analyze_and_print(doc_a, doc_b, args)
    else:
        encoding = args['--encoding']
        doc_a = load_or_exit(args['<doc-a>'], encoding)
        doc_b = load_or_exit(args['<doc-b>'], encoding)
        print('Document A Length: %d' % len(doc_a))
        print('Document B Length: %d' % len(doc_b))
        analyze_and_print(doc_a, doc_b, args)

if __name__ == '__main__':
    main()
