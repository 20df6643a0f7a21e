#!/usr/bin/env python3


"""Computes weighted edit distances and edit scripts between strings."""


import argparse
import brew
import logging
import policies
import sys


from typing import IO, Iterable, List, Optional, Sequence, Tuple


def build_policy(args: argparse.Namespace) -> brew.Policy:
    policy = policies.weighted(
        delete=args.delete,
        insert=args.insert,
        substitute=args.substitute,
        match=args.match,
    )
    if args.ignore:
        policy = policies.ignoring(frozenset(args.ignore), policy)
    if args.ignore_case:
        policy = policies.ignore_case(policy)
    if args.ignore_punctuation:
        policy = policies.ignore_punctuation(policy)
    return policy


def compare(source: brew.String, target: brew.String, policy: brew.Policy,
        threshold: brew.Cost=float('inf')) -> Optional[brew.Result]:
    """Returns None if the threshold was exceeded."""
    try:
        return brew.edit_distance(source, target, policy, threshold)
    except brew.ThresholdExceeded as e:
        logging.warning('%r -> %r: %s', source, target, e)
        return None


def read_pairs(f1: IO, f2: IO) -> Iterable[Tuple[str, str]]:
    for line1, line2 in zip(f1, f2):
        yield line1.rstrip('\n'), line2.rstrip('\n')


def split(string: str, tokens: bool) -> Sequence[str]:
    if tokens:
        return string.split()
    return string


def arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('source', help='source string (or file with -f)')
    parser.add_argument('target', help='target string (or file with -f)')
    parser.add_argument('-f', '--files', action='store_true',
            help='Read source and target strings line by line from files.')
    parser.add_argument('-t', '--tokens', action='store_true',
            help='Compare whitespace-separated tokens instead of characters.')
    parser.add_argument('--delete', type=float, default=policies.DEL_COST,
            help='cost of a deletion')
    parser.add_argument('--insert', type=float, default=policies.INS_COST,
            help='cost of an insertion')
    parser.add_argument('--substitute', type=float, default=policies.SUB_COST,
            help='cost of a substitution')
    parser.add_argument('--match', type=float, default=policies.MATCH_COST,
            help='cost of a match')
    parser.add_argument('--ignore', default='', metavar='CHARS',
            help='characters whose edits are free')
    parser.add_argument('--ignore-case', action='store_true',
            help='Make substitutions that only change case free.')
    parser.add_argument('--ignore-punctuation', action='store_true',
            help='Make edits on punctuation free.')
    parser.add_argument('--threshold', type=float, default=float('inf'),
            help='Give up on a pair once no partial alignment is cheaper.')
    parser.add_argument('-v', '--verbose', action='count', default=0,
            help='Verbosity. Give once for info, twice for debugging.')
    return parser


def main(argv: Optional[List[str]]=None) -> int:
    args = arg_parser().parse_args(argv)
    if args.verbose == 1:
        logging.basicConfig(level=logging.INFO)
    elif args.verbose >= 2:
        logging.basicConfig(level=logging.DEBUG)
    policy = build_policy(args)
    if not args.files:
        result = compare(split(args.source, args.tokens),
                split(args.target, args.tokens), policy, args.threshold)
        if result is None:
            print('threshold exceeded')
            return 1
        print(result.cost, brew.pp_script(result.script))
        return 0
    total_pairs = 0
    aborted = 0
    total_distance = 0.0
    with open(args.source) as f1, open(args.target) as f2:
        for source, target in read_pairs(f1, f2):
            logging.info('Source: %s', source)
            logging.info('Target: %s', target)
            result = compare(split(source, args.tokens),
                    split(target, args.tokens), policy, args.threshold)
            total_pairs += 1
            if result is None:
                aborted += 1
                print('threshold exceeded')
                continue
            print(result.cost, brew.pp_script(result.script))
            total_distance += result.cost
    completed = total_pairs - aborted
    print(f'total pairs:       {total_pairs}')
    print(f'aborted pairs:     {aborted}')
    print(f'total distance:    {total_distance}')
    if completed:
        print(f'distance per pair: {total_distance / completed}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
