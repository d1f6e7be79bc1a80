"""Direct DFT harmonic extraction for hand-drawn and synthesized waveforms.

Provides a truncated discrete Fourier transform with standard ``DFT/N``
normalisation, computed directly from cosine/sine sums. No FFT is used: the
waveforms handled here are tens of samples long, and the direct sums keep the
numeric output identical across implementations.

Functions
---------
direct_dft
    Complex Fourier coefficients for orders ``0..n_max`` (O(N * (n_max+1))).
analyze_waveform
    First :data:`MAX_COMPONENTS` harmonics as magnitude/phase components plus
    their summed energy.
full_spectrum_energy
    Parseval total over every order.
to_synthesis_components
    Convert two-sided DFT components into one-sided sine components for the
    synthesizer.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union

import numpy as np

from wave_prism.models.spectrum import SpectralComponent, SpectralResult

#: Number of harmonics (``k = 0..5``) the editor exposes.
MAX_COMPONENTS = 6

ArrayLike = Union[Sequence[float], np.ndarray]


def _as_samples(samples: ArrayLike) -> np.ndarray:
    x = np.asarray(samples, dtype=float)
    if x.ndim != 1:
        raise ValueError(f"samples must be 1D, got shape {x.shape}")
    return x


def direct_dft(samples: ArrayLike, *, n_max: Optional[int] = None) -> np.ndarray:
    r"""Compute discrete Fourier coefficients by explicit summation.

    Parameters
    ----------
    samples:
        1D sequence of ``N`` real samples covering one period.
    n_max:
        Maximum harmonic order to keep (inclusive). Default keeps all orders ``0..N-1``.

    Returns
    -------
    np.ndarray
        Complex coefficients of shape ``(n_max + 1,)`` with
        \(X[k] = \frac{1}{N}\sum_n x[n] e^{-i 2\pi k n / N}\).

    Notes
    -----
    Cost is ``O(N * (n_max + 1))``, i.e. ``O(N**2)`` for the full transform.
    """
    x = _as_samples(samples)
    N = int(x.size)
    if N == 0:
        return np.zeros(0, dtype=complex)

    if n_max is None:
        n_max = N - 1
    n_max = int(n_max)
    if not (0 <= n_max <= N - 1):
        raise ValueError(f"n_max must be in [0, {N-1}], got {n_max}")

    n = np.arange(N, dtype=float)
    k = np.arange(n_max + 1, dtype=float)[:, None]
    angle = (-2.0 * np.pi * k * n) / N

    real = np.sum(x * np.cos(angle), axis=1)
    imag = np.sum(x * np.sin(angle), axis=1)
    return (real + 1j * imag) / N


def complex_magnitude(c: Union[complex, np.ndarray]) -> Union[float, np.ndarray]:
    return np.sqrt(np.real(c) ** 2 + np.imag(c) ** 2)


def complex_phase_deg(c: Union[complex, np.ndarray]) -> Union[float, np.ndarray]:
    """Phase ``atan2(imag, real)`` in degrees, in ``(-180, 180]``."""
    return np.degrees(np.arctan2(np.imag(c), np.real(c)))


def analyze_waveform(samples: ArrayLike, *, max_samples: Optional[int] = None) -> SpectralResult:
    """Analyse one period of samples into its lowest harmonics.

    Parameters
    ----------
    samples:
        1D sequence of real samples. May be empty.
    max_samples:
        Optional upper bound on ``len(samples)``. The transform is quadratic in
        the sample count, so callers accepting untrusted input should set this.

    Returns
    -------
    SpectralResult
        Components for ``k = 0..min(MAX_COMPONENTS, N) - 1`` in ascending order.
        ``energy`` sums ``amplitude**2`` over the returned components only.
        An empty input gives an empty result with zero energy.
    """
    x = _as_samples(samples)
    N = int(x.size)
    if max_samples is not None and N > int(max_samples):
        raise ValueError(
            f"analysis of {N} samples exceeds max_samples={int(max_samples)} "
            f"(direct DFT cost grows as N**2)"
        )
    if N == 0:
        return SpectralResult.empty()

    n_keep = min(MAX_COMPONENTS, N)
    coeff = direct_dft(x, n_max=n_keep - 1)
    mag = complex_magnitude(coeff)
    phase = complex_phase_deg(coeff)

    components = tuple(
        SpectralComponent(k=k, amplitude=float(mag[k]), phase=float(phase[k])) for k in range(n_keep)
    )
    energy = float(np.sum(mag**2))
    return SpectralResult(components=components, energy=energy, n_samples=N)


def full_spectrum_energy(samples: ArrayLike) -> float:
    """Sum of ``|X[k]|**2`` over all ``N`` orders.

    With ``DFT/N`` normalisation this equals the mean square of the samples
    (Parseval). Unlike :attr:`SpectralResult.energy` nothing is truncated.
    """
    coeff = direct_dft(samples)
    if coeff.size == 0:
        return 0.0
    return float(np.sum(complex_magnitude(coeff) ** 2))


def to_synthesis_components(result: SpectralResult) -> Tuple[SpectralComponent, ...]:
    """Convert analyzer output into components the synthesizer reproduces.

    The analyzer reports two-sided coefficients of a cosine expansion: a real
    harmonic ``A sin(k t + p)`` shows up as ``|X[k]| = A/2`` in both bin ``k``
    and bin ``N - k``, with phase ``p - 90`` in bin ``k``. For ``0 < k < N/2``
    this doubles the amplitude and adds 90 degrees (phase wrapped into
    ``[0, 360)``). The Nyquist order ``k = N/2`` has no mirror and keeps its
    amplitude. Orders ``k > N/2`` are the mirror images of lower orders already
    counted and are dropped. DC is passed through unchanged.
    """
    N = int(result.n_samples)
    out = []
    for c in result.components:
        if c.k == 0:
            out.append(c)
            continue
        if 2 * c.k > N:
            continue
        amplitude = 2.0 * c.amplitude if 2 * c.k < N else c.amplitude
        phase = float(np.mod(c.phase + 90.0, 360.0))
        out.append(SpectralComponent(k=c.k, amplitude=amplitude, phase=phase))
    return tuple(out)
