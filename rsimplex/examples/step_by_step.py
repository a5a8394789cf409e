'''Drive the revised simplex method one pivot at a time.'''

import json
import numpy as np
from rsimplex import CanonicalForm

if __name__ == '__main__':

    c = [7, 9, 18, 17]
    A = [
        [2, 4, 5, 7],
        [1, 1, 2, 2],
        [1, 2, 3, 3],
    ]
    b = [42, 17, 24]

    # Record the objective after every pivot
    history = []
    cf = CanonicalForm(
        c, A, b, callback=lambda cf: history.append(cf.extract_result()[1]))
    print(cf)

    # Force x2 in first, then let Dantzig's rule take over
    done = cf.step(enter=2)
    print(cf)
    while not done:
        done = cf.step()
        print(cf)

    x, fun = cf.extract_result()
    print(json.dumps({
        'status': cf.status,
        'x': np.round(x, 6).tolist(),
        'fun': fun,
        'history': history,
    }, indent=4))
