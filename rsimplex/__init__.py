'''Revised simplex method for dense standard form linear programs.'''

from rsimplex.canonical_form import CanonicalForm
from rsimplex.simplex import simplex, solve
from rsimplex._simplex_utils import InvalidProblemError, SingularBasisError
