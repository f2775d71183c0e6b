import cleansc
import numpy as np


class TestTools:
    def test_to_db(self):
        x = np.array([1.0, 10.0, 100.0])
        np.testing.assert_allclose(cleansc.tools.to_db(x), [0, 10, 20])

        # Dynamic range
        np.testing.assert_allclose(
            cleansc.tools.to_db(x, dynamic_range_db=10), [10, 10, 20]
        )

        # No -inf for zeros
        assert np.all(np.isfinite(cleansc.tools.to_db(np.zeros(3))))
