'''Utility functions for the revised simplex solver.'''

from time import time

import numpy as np
from scipy.optimize import OptimizeResult

class InvalidProblemError(ValueError):
    '''Objective, constraint matrix or RHS have incompatible shapes.'''

class SingularBasisError(np.linalg.LinAlgError):
    '''The current basis matrix cannot be inverted.'''

def _process_simplex_args(c, A, b):
    '''Sanitize input to CanonicalForm.

    Returns float copies of c (1-D), A (2-D, padded with zero columns
    up to c.size) and b (1-D).
    '''

    # Deal with coefficients:
    c = np.array(c, dtype=float)
    if not (c.ndim == 1 or (c.ndim == 2 and c.shape[0] == 1)):
        raise InvalidProblemError('Objective must be a single row!')
    c = c.flatten()

    # Deal with constraints:
    A = np.array(A, dtype=float)
    if A.ndim != 2:
        raise InvalidProblemError('Constraint matrix must be 2D!')
    if A.shape[1] > c.size: # pylint: disable=E1136
        raise InvalidProblemError(
            'Constraint matrix has more columns than objective has '
            'entries!')
    b = np.array(b, dtype=float).flatten()
    if b.size != A.shape[0]: # pylint: disable=E1136
        raise InvalidProblemError(
            'Constraint vector must match number of rows of matrix!')

    # Missing trailing columns have zero coefficients
    if A.shape[1] < c.size:
        A = np.concatenate(
            (A, np.zeros((A.shape[0], c.size - A.shape[1]))), axis=1)

    return c, A, b

# status -> message, mirrors scipy.optimize.linprog
_MESSAGES = {
    0 : [
        'Optimization terminated successfully.',
        'Optimization proceeding nominally.',
    ],
    1 : 'Iteration limit reached.',
    3 : 'Problem appears to be unbounded.',
}

def _make_result(cf, start_time, is_callback=False):
    '''Make an OptimizeResult object from a CanonicalForm.'''

    res = OptimizeResult()
    x, fun = cf.extract_result()

    if cf.status == 'unbounded':
        res['status'] = 3
        res['message'] = _MESSAGES[3]
    elif cf.status == 'optimal' or is_callback:
        res['status'] = 0
        res['message'] = _MESSAGES[0][is_callback]
    else:
        res['status'] = 1
        res['message'] = _MESSAGES[1]

    # Only an optimal dictionary counts as a success
    res['success'] = cf.status == 'optimal'
    res['x'] = x[:cf.n]
    res['slack'] = x[cf.n:]
    res['fun'] = fun
    res['nit'] = cf.nit
    res['basis'] = cf.basis.copy()

    # Simplex multipliers are the dual solution at the optimum
    res['dual'] = cf.find_y() if cf.status == 'optimal' else None
    res['execution_time'] = time() - start_time
    return res
