"""
Test backend implementations and selection.

Both backends implement the same two strategies; the CPU backend in
float64, the exact backend over rationals.
"""

import logging
from fractions import Fraction

import pytest
import numpy as np
from pyechelon import Matrix
from pyechelon._backends import (
    get_backend,
    list_available_backends,
    print_backend_info,
    Ref,
    Singular,
)
from pyechelon._backends.cpu_fp64_backend import CPUBackendFP64
from pyechelon._backends.exact_backend import ExactBackend


ALL_BACKENDS = list_available_backends()


class TestBackendSelection:
    """Test backend lookup and diagnostics."""

    def test_list_backends(self):
        """Test backend listing."""
        backends = list_available_backends()
        assert isinstance(backends, list)
        assert backends == ['cpu', 'exact']

    def test_auto_is_cpu(self):
        """Test 'auto' resolves to the float64 backend."""
        backend = get_backend('auto')
        assert isinstance(backend, CPUBackendFP64)

    def test_instance_passthrough(self):
        """Test an existing backend instance is returned unchanged."""
        backend = ExactBackend()
        assert get_backend(backend) is backend

    def test_unknown_backend(self):
        """Test unknown names are rejected with the valid options."""
        with pytest.raises(ValueError, match="Unknown backend: 'gpu'"):
            get_backend('gpu')

    def test_print_backend_info(self, capsys):
        """Test diagnostic printing."""
        print_backend_info()
        captured = capsys.readouterr()
        assert 'Backend Status' in captured.out
        assert 'cpu' in captured.out
        assert 'exact' in captured.out


class TestCPUBackend:
    """Test CPU backend."""

    def test_cpu_backend_creation(self):
        """Test CPU backend initializes correctly."""
        backend = get_backend('cpu')
        assert backend.name == 'cpu_fp64'
        assert backend.precision == 'fp64'

    def test_cpu_device_info(self):
        """Test CPU backend device info."""
        info = get_backend('cpu').get_device_info()
        assert info['backend'] == 'cpu'
        assert info['precision'] == 'fp64'
        assert 'NumPy' in info['library']

    def test_gaussian_returns_singular_variant(self):
        """Test a zero pivot is reported as a value, not an exception."""
        backend = get_backend('cpu')
        outcome = backend.gaussian_elimination(Matrix([[2, 1], [4, 2]]))
        assert isinstance(outcome, Singular)
        assert outcome.column == 1
        assert outcome.swap_count == 1

    def test_leading_zero_column(self):
        """Test a zero first column is singular at column 0."""
        backend = get_backend('cpu')
        outcome = backend.gaussian_elimination(Matrix([[0, 1], [0, 2]]))
        assert outcome == Singular(column=0, swap_count=0)

    def test_result_dtype(self):
        """Test the reduced matrix is float64."""
        result = get_backend('cpu').decompose(Matrix([[1, 2], [3, 4]]))
        assert result.reduced.dtype == np.float64


class TestExactBackend:
    """Test exact rational backend."""

    def test_exact_backend_creation(self):
        """Test exact backend initializes correctly."""
        backend = get_backend('exact')
        assert backend.name == 'exact'
        assert backend.precision == 'rational'
        assert get_backend('exact').get_device_info()['backend'] == 'exact'

    def test_entries_are_fractions(self):
        """Test results hold Fraction entries."""
        result = get_backend('exact').decompose(Matrix([[2, 1], [4, 2]]))
        assert result.reduced.dtype == object
        assert all(isinstance(x, Fraction) for x in result.reduced.to_array().ravel())
        assert result.reduced[0, 1] == Fraction(1, 2)

    def test_exact_elimination(self):
        """Test elimination without rounding."""
        result = get_backend('exact').decompose(Matrix([[1, 2], [3, 4]]))
        assert result.method == 'gaussian'
        assert result.reduced.tolist() == [
            [Fraction(3), Fraction(4)],
            [Fraction(0), Fraction(2, 3)],
        ]
        assert result.swap_count == 1

    def test_float_input_converted_exactly(self):
        """Test float entries become their exact binary value."""
        result = get_backend('exact').row_reduction(Matrix([[0.1]]))
        assert result.reduced[0, 0] == 1
        result = get_backend('exact').gaussian_elimination(Matrix([[0.1]]))
        assert result.reduced[0, 0] == Fraction(0.1)


@pytest.mark.parametrize('name', ALL_BACKENDS)
class TestBackendAgreement:
    """Both backends follow the same pivoting and swap rules."""

    def test_gaussian_swaps(self, name):
        """Test a permutation matrix needs two swaps either way."""
        backend = get_backend(name)
        A = Matrix([[0, 1, 0], [0, 0, 1], [1, 0, 0]])
        assert backend.gaussian_elimination(A).swap_count == 2
        assert backend.row_reduction(A).swap_count == 2

    def test_fallback_on_duplicate_rows(self, name):
        """Test identical rows force the row reduction fallback."""
        backend = get_backend(name)
        A = Matrix([[1, 2, 3], [1, 2, 3], [4, 5, 6]])
        result = backend.decompose(A)
        assert result.method == 'row_reduction'
        assert result.swap_count == 1
        np.testing.assert_allclose(
            np.asarray(result.reduced, dtype=np.float64),
            [[1, 2, 3], [0, 1, 2], [0, 0, 0]],
        )

    def test_fallback_is_logged(self, name, caplog):
        """Test the fallback is logged at DEBUG."""
        backend = get_backend(name)
        with caplog.at_level(logging.DEBUG, logger='pyechelon._backends.base'):
            backend.decompose(Matrix([[1, 2], [0, 0]]))
        assert 'falling back to row reduction' in caplog.text
        assert 'column 1' in caplog.text

    def test_results_are_refs(self, name):
        """Test both strategies return Ref objects."""
        backend = get_backend(name)
        A = Matrix([[1, 2], [3, 4]])
        assert isinstance(backend.gaussian_elimination(A), Ref)
        assert isinstance(backend.row_reduction(A), Ref)
