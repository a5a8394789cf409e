'''Canonical form dictionary for the revised simplex method.

References
----------
.. [1] Chvatal, Vasek. "Linear programming." W.H. Freeman (1983),
       chapter 7: the revised simplex method.
.. [2] https://en.wikipedia.org/wiki/Revised_simplex_method
'''

import logging

import numpy as np
from tabulate import tabulate

from rsimplex._simplex_utils import (
    _process_simplex_args, SingularBasisError)

logger = logging.getLogger(__name__)

class CanonicalForm:
    '''Revised simplex dictionary of a standard form LP.

    Solves

        maximize    c @ x
        subject to  A @ x <= b,  x >= 0

    after appending one slack variable per constraint.  Augmented
    variables are indexed 0..n-1 (structural) and n..n+m-1 (slack).

    The augmented matrix ``A`` holds the non-basis columns in its first
    n columns and the basis columns in its last m columns.  ``AN``,
    ``B``, ``cN`` and ``cB`` are numpy views into ``A`` and ``c``:
    a pivot exchanges column values between the views, it never
    rebinds them.  ``basis[row]`` and ``nonbasis[col]`` record which
    augmented variable currently lives in which column.

    Parameters
    ----------
    c : 1-D array
        Objective coefficients (a single row).
    A : 2-D array
        Constraint matrix with at most ``c.size`` columns.  Missing
        trailing columns are taken to be zero.
    b : 1-D array
        Right-hand side.  Assumed componentwise nonnegative so the
        slack basis is feasible; this is not checked.
    tol : float, optional
        Reduced costs and direction entries must exceed ``tol`` to be
        considered positive.
    callback : callable, optional
        Called as ``callback(cf)`` after every pivot.

    Raises
    ------
    InvalidProblemError
        If the inputs have incompatible shapes.
    '''

    def __init__(self, c, A, b, tol=1e-9, callback=None):

        c, A, b = _process_simplex_args(c, A, b)
        self.m, self.n = A.shape[:]
        m, n = self.m, self.n
        self.tol = tol
        self.callback = callback

        # Augmented system: slack variables form an identity block
        self.A = np.concatenate((A, np.eye(m)), axis=1)
        self.c = np.concatenate((c, np.zeros(m)))
        self.b = b
        self.b.flags.writeable = False

        # Costs in augmented variable order, c gets shuffled by pivots
        self._c0 = self.c.copy()
        self._c0.flags.writeable = False

        # Values of the basic variables
        self.xB_star = b.copy()

        # Views sharing storage with A and c
        self.AN = self.A[:, :n]
        self.B = self.A[:, n:]
        self.cN = self.c[:n]
        self.cB = self.c[n:]

        # Slack variables start out basic
        self.basis = np.arange(n, n+m)
        self.nonbasis = np.arange(n)

        self.status = 'continue'
        self.nit = 0

    @property
    def remap(self):
        '''Map of augmented variable index -> basis row.'''
        return {int(idx): row for row, idx in enumerate(self.basis)}

    def find_y(self):
        '''Simplex multipliers y = cB @ inv(B).'''
        try:
            BInv = np.linalg.inv(self.B)
        except np.linalg.LinAlgError as e:
            raise SingularBasisError(
                'Basis matrix is singular: %s' % e) from e
        y = self.cB @ BInv
        logger.debug('y: %s', y)
        return y

    def reduced_costs(self, y=None):
        '''Reduced costs of the non-basis columns, cN - y @ AN.'''
        if y is None:
            y = self.find_y()
        return self.cN - y @ self.AN

    def find_entering(self, y, enter=None):
        '''Choose the entering non-basis column.

        Dantzig's rule: the largest positive reduced cost, first index
        on ties.  ``enter`` forces a particular column as long as its
        reduced cost is positive.  Returns None if no reduced cost is
        positive, i.e., the dictionary is optimal.
        '''
        r = self.reduced_costs(y)
        logger.debug('reduced costs: %s', r)

        if enter is not None:
            if not 0 <= enter < self.n:
                raise IndexError(
                    'Entering index %d out of range for %d non-basis '
                    'columns' % (enter, self.n))
            if r[enter] > self.tol:
                return enter
            logger.warning(
                'Ignoring forced entering column %d with reduced cost '
                '%g', enter, r[enter])

        if not np.any(r > self.tol):
            return None
        # argmax returns the first occurrence of the maximum
        return int(np.argmax(r))

    def solve_bd(self, k):
        '''Direction d solving B @ d = AN[:, k].'''
        try:
            d = np.linalg.solve(self.B, self.AN[:, k])
        except np.linalg.LinAlgError as e:
            raise SingularBasisError(
                'Basis matrix is singular: %s' % e) from e
        logger.debug('d: %s', d)
        return d

    def find_leaving(self, d):
        '''Ratio test.

        Returns (step, row) for the smallest ratio xB_star[i]/d[i]
        over rows with d[i] > 0, first row on ties.  Returns
        (-1.0, None) when no row bounds the step (unbounded).
        '''
        step, row = np.inf, None
        for ii, d0 in enumerate(d):
            # Nonpositive entries never block the entering variable
            if d0 <= self.tol:
                continue
            ratio = self.xB_star[ii]/d0
            if ratio < step:
                step, row = ratio, ii
        if row is None:
            return -1.0, None
        logger.debug('leaving row %d with step %g', row, step)
        return step, row

    def pivot(self, d, step, k, row):
        '''Exchange non-basis column k with basis row ``row``.'''

        # Compute everything first so a failure leaves no trace
        xB_star = self.xB_star - step*d
        xB_star[row] = step
        entering_col = self.AN[:, k].copy()
        leaving_col = self.B[:, row].copy()
        entering_c, leaving_c = self.cN[k], self.cB[row]
        entering_idx, leaving_idx = self.nonbasis[k], self.basis[row]

        self.xB_star[:] = xB_star
        self.B[:, row] = entering_col
        self.AN[:, k] = leaving_col
        self.cB[row] = entering_c
        self.cN[k] = leaving_c
        self.basis[row] = entering_idx
        self.nonbasis[k] = leaving_idx
        self.nit += 1

        logger.debug(
            'pivot %d: %s enters at row %d, %s leaves',
            self.nit, self._label(entering_idx), row,
            self._label(leaving_idx))
        if self.callback is not None:
            self.callback(self)

    def step(self, enter=None):
        '''Perform one pivot.

        Parameters
        ----------
        enter : int, optional
            Non-basis column to force into the basis.

        Returns
        -------
        terminal : bool
            True once the dictionary is optimal or unbounded.  Further
            calls keep returning True without touching the dictionary.
        '''
        if self.status != 'continue':
            return True

        y = self.find_y()
        k = self.find_entering(y, enter)
        if k is None:
            logger.info('Optimal after %d pivots', self.nit)
            self.status = 'optimal'
            return True

        d = self.solve_bd(k)
        step, row = self.find_leaving(d)
        if row is None:
            logger.info(
                'Unbounded in the direction of %s',
                self._label(self.nonbasis[k]))
            self.status = 'unbounded'
            return True

        self.pivot(d, step, k, row)
        return False

    def extract_result(self):
        '''Current basic solution and its objective value.

        Returns
        -------
        x : 1-D array
            Values of all n+m augmented variables; non-basic ones are 0.
        fun : float
            Objective value, slack variables do not contribute.
        '''
        x = np.zeros(self.n + self.m)
        fun = 0.0
        for row, idx in enumerate(self.basis):
            x[idx] = self.xB_star[row]
            if idx < self.n:
                fun += self.xB_star[row]*self._c0[idx]
        return x, fun

    def _label(self, idx):
        if idx < self.n:
            return 'x%d' % idx
        return 's%d' % (idx - self.n)

    def __repr__(self):
        # Columns of the augmented matrix in variable order
        A = np.empty_like(self.A)
        A[:, self.nonbasis] = self.AN
        A[:, self.basis] = self.B
        hdr = ['basic'] + [
            self._label(ii) for ii in range(self.n + self.m)] + ['xB*']
        rows = [[''] + self._c0.tolist() + ['']]
        for row, idx in enumerate(self.basis):
            rows.append(
                [self._label(idx)] + A[row, :].tolist() +
                [self.xB_star[row]])
        return '\n' + tabulate(
            rows,
            headers=hdr,
            tablefmt='orgtbl',
            floatfmt='.1f') + '\n'
