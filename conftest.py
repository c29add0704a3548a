"""Global configuration for pytest"""

import numpy as np
import pytest


@pytest.fixture(autouse=True, scope="session")
def numerical_exceptions():
    """
    Ensure any numerical errors raise in our test suite.
    Code that can legitimately hit such cases must handle them explicitly,
    preferably using local `with np.errstate(...)` constructs.
    """
    old = np.seterr(all="raise")
    yield
    np.seterr(**old)
