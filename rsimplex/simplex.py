'''Revised simplex method drivers.'''

import logging
from time import time
from warnings import warn

import numpy as np
from scipy.optimize import OptimizeWarning

from rsimplex.canonical_form import CanonicalForm
from rsimplex._simplex_utils import _make_result

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = {
    'maxiter': 50,
    'disp': False,
    'tol': 1e-9,
}

def solve(c, A, b, maxiter=50):
    '''Solve max c @ x s.t. A @ x <= b, x >= 0.

    Returns
    -------
    nit : int
        Number of pivots performed.
    x : 1-D array
        Values of the n structural and m slack variables.
    fun : float
        Objective value of ``x``.

    Notes
    -----
    Stops after ``maxiter`` pivots even if the dictionary is not yet
    optimal.  An unbounded problem stops early and returns the last
    basic feasible solution.
    '''
    cf = CanonicalForm(c, A, b)
    for _ii in range(maxiter):
        if cf.step():
            break
    x, fun = cf.extract_result()
    return cf.nit, x, fun

def simplex(c, A_ub, b_ub, callback=None, options=None):
    '''Maximize a linear objective using the revised simplex method.

    Parameters
    ----------
    c : 1-D array
        The coefficients of the linear objective function to be
        maximized.
    A_ub : 2-D array
        The inequality constraint matrix. Each row of ``A_ub``
        specifies the coefficients of a linear inequality constraint
        on ``x``.
    b_ub : 1-D array
        The inequality constraint vector. Each element represents an
        upper bound on the corresponding value of ``A_ub @ x``.  Must
        be nonnegative: the all-slack basis is the starting point.
    callback : callable, optional
        Called after every pivot with a
        `scipy.optimize.OptimizeResult` describing the current basic
        feasible solution (same fields as the returned result).
    options : dict, optional
        A dictionary of solver options:

            maxiter : int
                Maximum number of pivots. Default: ``50``.
            disp : bool
                Set to ``True`` to print the dictionary after every
                pivot. Default: ``False``.
            tol : float
                Threshold for treating reduced costs and direction
                entries as positive. Default: ``1e-9``.

    Returns
    -------
    res : OptimizeResult
        A :class:`scipy.optimize.OptimizeResult` consisting of the
        fields:

            x : 1-D array
                Values of the decision variables.
            slack : 1-D array
                Values of the slack variables, ``b_ub - A_ub @ x``.
            fun : float
                The objective value ``c @ x``.
            success : bool
                ``True`` when an optimal dictionary was reached.
            status : int
                ``0`` : Optimization terminated successfully.

                ``1`` : Iteration limit reached.

                ``3`` : Problem appears to be unbounded.

            nit : int
                Number of pivots performed.
            basis : 1-D array
                Augmented variable index basic in each row.
            dual : 1-D array or None
                Simplex multipliers ``cB @ inv(B)``, one per constraint;
                the dual solution when ``success`` is ``True``.
            execution_time : float
                Seconds spent solving.
            message : str
                A string descriptor of the exit status.

    Raises
    ------
    InvalidProblemError
        If the problem data have incompatible shapes.
    SingularBasisError
        If the basis matrix becomes singular.
    '''

    if options is None:
        options = {}
    unknown = set(options) - set(_DEFAULT_OPTIONS)
    if unknown:
        raise ValueError('Unknown options: %s' % ', '.join(sorted(unknown)))
    solver_options = dict(_DEFAULT_OPTIONS, **options)

    if np.any(np.asarray(b_ub, dtype=float) < 0):
        msg = ('b_ub has negative entries; the slack basis is infeasible '
               'and the result is meaningless.')
        warn(msg, OptimizeWarning)

    # The callback will always be called, so make sure it's actually
    # callable
    if callback is None:
        do_callback = lambda cf: None
    elif not callable(callback):
        warn('callback is not callable! Ignoring.', OptimizeWarning)
        do_callback = lambda cf: None
    else:
        do_callback = lambda cf: callback(_make_result(
            cf, start_time, is_callback=True))

    def on_pivot(cf):
        if solver_options['disp']:
            print(cf)
        do_callback(cf)

    start_time = time()
    cf = CanonicalForm(
        c, A_ub, b_ub, tol=solver_options['tol'], callback=on_pivot)
    if solver_options['disp']:
        print(cf)

    for _ii in range(solver_options['maxiter']):
        if cf.step():
            break
    else:
        logger.info(
            'Iteration limit of %d reached', solver_options['maxiter'])

    return _make_result(cf, start_time)

if __name__ == '__main__':

    logging.basicConfig(level=logging.DEBUG)

    # http://web.mit.edu/15.053/www/AMP-Chapter-02.pdf
    c = [6, 14, 13]
    A_ub = [
        [1/2, 2, 1],
        [1, 2, 4],
    ]
    b_ub = [24, 60]
    res = simplex(c, A_ub, b_ub, options={'disp': True})
    print(res)
