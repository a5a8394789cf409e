'''Solve a linear program stored as JSON from the command line.

The file holds the standard form problem max c @ x s.t. A @ x <= b:

.. code-block:: json

    {"c": [100, 85], "A": [[12, 24], [9, 5], [30, 30]], "b": [480, 180, 720]}
'''

import argparse
import json
import logging
import sys

from tabulate import tabulate

from rsimplex.simplex import simplex

def main(argv=None):
    '''Command line entry point, returns the exit code.'''
    p = argparse.ArgumentParser(
        prog='rsimplex',
        description='Revised simplex method for max c @ x s.t. A @ x <= b, x >= 0')
    p.add_argument('json', help='Path to JSON file with keys c, A and b')
    p.add_argument('--maxiter', type=int, default=50, help='Maximum number of pivots')
    p.add_argument('--disp', action='store_true', help='Print the dictionary after every pivot')
    p.add_argument('--verbose', action='store_true', help='Log solver progress')
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        with open(args.json, 'r') as f:
            prob = json.load(f)
    except OSError as e:
        p.error('cannot read %s: %s' % (args.json, e.strerror))
    except ValueError as e:
        p.error('invalid JSON in %s: %s' % (args.json, e))
    try:
        c, A, b = prob['c'], prob['A'], prob['b']
    except KeyError as e:
        p.error('missing key %s in %s' % (e, args.json))
    except TypeError:
        p.error('%s must hold a JSON object' % args.json)

    try:
        res = simplex(c, A, b, options={'maxiter': args.maxiter, 'disp': args.disp})
    except ValueError as e:
        p.error('invalid problem in %s: %s' % (args.json, e))

    print(res['message'])
    rows = [['x%d' % ii, v] for ii, v in enumerate(res['x'])]
    rows += [['s%d' % ii, v] for ii, v in enumerate(res['slack'])]
    print(tabulate(rows, headers=['variable', 'value'], tablefmt='orgtbl'))
    print('objective: %g' % res['fun'])
    print('pivots: %d' % res['nit'])
    return 0 if res['success'] else 1

if __name__ == '__main__':
    sys.exit(main())
