import unittest

import numpy as np
import scipy.linalg

import gpemu.num as gnp
from gpemu.num import Matrix


def random_spd(n, seed=0):
    rng = np.random.default_rng(seed)
    G = rng.normal(size=(n, n))
    return G @ G.T + n * np.eye(n)


class TestCholesky(unittest.TestCase):
    def test_reconstructs_input(self):
        for n in (1, 2, 5, 20):
            A = random_spd(n, seed=n)
            L = gnp.linalg.cholesky(Matrix.from_numpy(A))
            LLt = gnp.dot(L, L.T).to_numpy()
            self.assertTrue(np.allclose(LLt, A, atol=1e-9))

    def test_lower_triangular_and_matches_scipy(self):
        A = random_spd(6, seed=42)
        L = gnp.linalg.cholesky(Matrix.from_numpy(A)).to_numpy()
        self.assertTrue(np.allclose(np.triu(L, 1), 0.0))
        self.assertTrue(np.allclose(L, scipy.linalg.cholesky(A, lower=True)))

    def test_not_positive_definite(self):
        A = Matrix(2, 2, [1.0, 2.0, 2.0, 1.0])
        with self.assertRaises(gnp.NotPositiveDefiniteError):
            gnp.linalg.cholesky(A)
        # a LinAlgError like numpy's own
        with self.assertRaises(np.linalg.LinAlgError):
            gnp.linalg.cholesky(Matrix(1, 1, [-1.0]))

    def test_requires_square(self):
        with self.assertRaises(gnp.ShapeMismatchError):
            gnp.linalg.cholesky(Matrix(2, 3))


class TestInverse(unittest.TestCase):
    def test_product_is_identity(self):
        rng = np.random.default_rng(7)
        for n in (1, 3, 8):
            A = rng.normal(size=(n, n)) + n * np.eye(n)
            Am = Matrix.from_numpy(A)
            Ainv = gnp.linalg.inv(Am)
            self.assertTrue(np.allclose(gnp.dot(Am, Ainv).to_numpy(), np.eye(n), atol=1e-9))
            self.assertTrue(np.allclose(Ainv.to_numpy(), scipy.linalg.inv(A)))

    def test_double_inverse(self):
        A = random_spd(5, seed=3)
        Ainvinv = gnp.linalg.inv(gnp.linalg.inv(Matrix.from_numpy(A)))
        self.assertTrue(np.allclose(Ainvinv.to_numpy(), A, atol=1e-9))

    def test_zero_pivot_row_swap(self):
        # a[0, 0] == 0 forces a swap with the second row
        A = np.array([[0.0, 2.0, 1.0], [1.0, 1.0, 0.0], [3.0, 0.0, 1.0]])
        Ainv = gnp.linalg.inv(Matrix.from_numpy(A)).to_numpy()
        self.assertTrue(np.allclose(A @ Ainv, np.eye(3)))
        self.assertTrue(np.allclose(Ainv, np.linalg.inv(A)))

    def test_permutation_matrix(self):
        P = np.array([[0.0, 1.0], [1.0, 0.0]])
        Pinv = gnp.linalg.inv(Matrix.from_numpy(P)).to_numpy()
        self.assertTrue(np.allclose(Pinv, P))

    def test_singular(self):
        with self.assertRaises(gnp.SingularMatrixError):
            gnp.linalg.inv(Matrix(2, 2, [1.0, 2.0, 2.0, 4.0]))
        with self.assertRaises(gnp.SingularMatrixError):
            gnp.linalg.inv(Matrix(2, 2))

    def test_requires_square(self):
        with self.assertRaises(gnp.ShapeMismatchError):
            gnp.linalg.inv(Matrix(3, 2))


def test_solve():
    A = random_spd(4, seed=11)
    b = np.arange(8.0).reshape(4, 2)
    X = gnp.linalg.solve(Matrix.from_numpy(A), Matrix.from_numpy(b))
    assert X.shape == (4, 2)
    assert np.allclose(X.to_numpy(), scipy.linalg.solve(A, b))


def test_solve_with_cholesky_factor():
    A = random_spd(5, seed=5)
    L = gnp.linalg.cholesky(Matrix.from_numpy(A))
    y = gnp.array([1.0, -1.0, 2.0, 0.5, 0.0])
    z = gnp.linalg.solve(L, y).to_numpy()
    expected = scipy.linalg.solve_triangular(L.to_numpy(), y.to_numpy(), lower=True)
    assert np.allclose(z, expected)


if __name__ == "__main__":
    unittest.main()
