# Ensure repository root is on sys.path for imports like `from gauss_measure.density import ...`
# and the tests directory for `from fixtures import ...`.
import os
import sys

_TESTS_DIR = os.path.abspath(os.path.dirname(__file__))
_REPO_ROOT = os.path.abspath(os.path.join(_TESTS_DIR, os.pardir))
for _p in (_TESTS_DIR, _REPO_ROOT):
    if _p not in sys.path:
        sys.path.insert(0, _p)
