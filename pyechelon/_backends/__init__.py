"""
Backend selection and management.

Provides a unified interface for the float64 NumPy backend and the exact
rational backend.
"""

from .base import BackendBase, EliminationOutcome, Ref, Singular
from .cpu_fp64_backend import CPUBackendFP64
from .exact_backend import ExactBackend


BACKENDS = {
    'cpu': CPUBackendFP64,
    'exact': ExactBackend,
}


def get_backend(backend: str = 'auto') -> BackendBase:
    """
    Get computational backend.

    Parameters
    ----------
    backend : str
        Backend selection:
        - 'auto': Default backend (currently 'cpu')
        - 'cpu': NumPy, float64
        - 'exact': Rational arithmetic with fractions.Fraction

    Returns
    -------
    BackendBase
        Backend instance

    Examples
    --------
    >>> backend = get_backend('auto')

    >>> # Exact arithmetic, no rounding in the pivot tests
    >>> backend = get_backend('exact')
    """
    if isinstance(backend, BackendBase):
        return backend

    if backend == 'auto':
        return CPUBackendFP64()

    try:
        return BACKENDS[backend]()
    except (KeyError, TypeError):
        raise ValueError(
            f"Unknown backend: '{backend}'\n"
            f"Valid options: 'auto', {', '.join(repr(b) for b in BACKENDS)}"
        ) from None


def list_available_backends() -> list:
    """List names of available backends."""
    return list(BACKENDS)


def print_backend_info():
    """Print detailed backend information (diagnostic)."""
    print("PyEchelon Backend Status")
    print("=" * 50)
    print(f"\nAvailable Backends:")
    for name in list_available_backends():
        info = get_backend(name).get_device_info()
        print(f"  {name:<8} {info['precision']:<10} - {info['library']}")

    print(f"\nDefault Backend:")
    print(f"  {get_backend('auto').name}")


__all__ = [
    'get_backend',
    'list_available_backends',
    'print_backend_info',
    'BackendBase',
    'EliminationOutcome',
    'Ref',
    'Singular',
    'CPUBackendFP64',
    'ExactBackend',
]


if __name__ == "__main__":
    print_backend_info()
