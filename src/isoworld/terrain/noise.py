"""Seeded 2D gradient noise and fractal octave layering.

All functions accept Python floats or numpy arrays (broadcast together)
and return a float for scalar input, an array otherwise.
"""

from functools import lru_cache

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Ken Perlin's reference permutation of 0..255
GRADIENT_TABLE: NDArray[np.int64] = np.array([
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
], dtype=np.int64)
GRADIENT_TABLE.flags.writeable = False

# Eight gradient directions, indexed by the low 3 bits of a hash
_GRADIENT_X = np.array([1.0, -1.0, 1.0, -1.0, 1.0, -1.0, 0.0, 0.0])
_GRADIENT_Y = np.array([1.0, 1.0, -1.0, -1.0, 0.0, 0.0, 1.0, -1.0])


def _scalar_or_array(value: NDArray[np.float64]) -> float | NDArray[np.float64]:
    if np.ndim(value) == 0:
        return float(value)
    return value


def _canonical_gradient(
    h: NDArray[np.int64], dx: NDArray[np.float64], dy: NDArray[np.float64]
) -> NDArray[np.float64]:
    h = h & 7
    return _GRADIENT_X[h] * dx + _GRADIENT_Y[h] * dy


def _legacy_gradient(
    h: NDArray[np.int64], dx: NDArray[np.float64], dy: NDArray[np.float64]
) -> NDArray[np.float64]:
    h = h & 15
    u = np.where(h < 8, dx, dy)
    # Residues 4..11, 13 and 15 fall through to a zero v term
    v = np.where(h < 4, dy, np.where((h == 12) | (h == 14), dx, 0.0))
    return np.where((h & 1) == 0, u, -u) + np.where((h & 2) == 0, v, -v)


def gradient(hash: ArrayLike, dx: ArrayLike, dy: ArrayLike) -> float | NDArray[np.float64]:
    """Dot product of a hashed lattice gradient with a corner offset.

    Every hash residue selects one of the eight directions
    (±1, ±1), (±1, 0), (0, ±1); none collapses to a zero gradient.

    Args:
        hash: Integer hash of the lattice corner.
        dx: X offset from the corner.
        dy: Y offset from the corner.

    Returns:
        Gradient contribution of the corner.
    """
    result = _canonical_gradient(
        np.asarray(hash, dtype=np.int64),
        np.asarray(dx, dtype=np.float64),
        np.asarray(dy, dtype=np.float64),
    )
    return _scalar_or_array(result)


def legacy_gradient(hash: ArrayLike, dx: ArrayLike, dy: ArrayLike) -> float | NDArray[np.float64]:
    """Gradient contribution using the classic 3D branch rule with z = 0.

    Kept for output parity with older worlds. Unlike `gradient`, several
    residues (13 and 15 among them) lose their second axis term.
    """
    result = _legacy_gradient(
        np.asarray(hash, dtype=np.int64),
        np.asarray(dx, dtype=np.float64),
        np.asarray(dy, dtype=np.float64),
    )
    return _scalar_or_array(result)


def fade(t):
    """Quintic smoothstep 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(a, b, t):
    """Linear interpolation between a and b."""
    return a + t * (b - a)


def seeded_permutation(seed: int) -> NDArray[np.int64]:
    """Shuffle the gradient table with a seeded generator.

    Fisher-Yates over raw PCG64 output words. The raw stream of a bit
    generator is stable across numpy releases, unlike `Generator`
    methods, so a seed maps to the same permutation after upgrades.

    The 256-entry shuffle is duplicated to 512 entries so corner lookups
    never wrap.

    Args:
        seed: Noise seed. Only the low 32 bits are used.

    Returns:
        Read-only permutation array of length 512.
    """
    size = len(GRADIENT_TABLE)
    words = np.random.PCG64(seed & 0xFFFFFFFF).random_raw(size - 1)
    shuffled = GRADIENT_TABLE.copy()
    for step, i in enumerate(range(size - 1, 0, -1)):
        j = int(words[step]) % (i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    permutation = np.concatenate([shuffled, shuffled])
    permutation.flags.writeable = False
    return permutation


class NoiseContext:
    """Seeded gradient noise source.

    Holds the seeded permutation for a single seed. Contexts are immutable
    after construction and may be shared freely.
    """

    def __init__(self, seed: int, legacy_gradient: bool = False):
        self.seed = seed
        self.legacy_gradient = legacy_gradient
        self.permutation = seeded_permutation(seed)
        self._gradient = _legacy_gradient if legacy_gradient else _canonical_gradient

    def __repr__(self) -> str:
        return f"NoiseContext(seed={self.seed}, legacy_gradient={self.legacy_gradient})"

    def perlin(self, x: ArrayLike, y: ArrayLike) -> float | NDArray[np.float64]:
        """Single-octave 2D gradient noise, roughly in [-1, 1].

        Args:
            x: Sample x coordinate(s).
            y: Sample y coordinate(s).

        Returns:
            Noise value(s), zero at every integer lattice point.
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        x, y = np.broadcast_arrays(x, y)

        x_floor = np.floor(x)
        y_floor = np.floor(y)

        # True modulo keeps negative coordinates in 0..255
        cell_x = np.mod(x_floor, 256).astype(np.int64)
        cell_y = np.mod(y_floor, 256).astype(np.int64)

        fx = x - x_floor
        fy = y - y_floor

        p = self.permutation
        a = p[cell_x] + cell_y
        b = p[cell_x + 1] + cell_y

        grad = self._gradient
        u = fade(fx)
        v = fade(fy)

        bottom = lerp(grad(p[a], fx, fy), grad(p[b], fx - 1, fy), u)
        top = lerp(grad(p[a + 1], fx, fy - 1), grad(p[b + 1], fx - 1, fy - 1), u)
        return _scalar_or_array(lerp(bottom, top, v))


@lru_cache(maxsize=64)
def noise_context(seed: int, legacy_gradient: bool = False) -> NoiseContext:
    """Shared NoiseContext for a seed."""
    return NoiseContext(seed, legacy_gradient=legacy_gradient)


def perlin(
    x: ArrayLike, y: ArrayLike, seed: int, legacy_gradient: bool = False
) -> float | NDArray[np.float64]:
    """Single-octave 2D gradient noise for a seed.

    Pure function of (x, y, seed).
    """
    return noise_context(seed, legacy_gradient).perlin(x, y)


def layered_noise(
    x: ArrayLike,
    y: ArrayLike,
    octaves: int,
    persistence: float,
    scale: float,
    seed: int,
    legacy_gradient: bool = False,
) -> float | NDArray[np.float64]:
    """Fractal sum of gradient noise octaves.

    Octave i samples at frequency scale * 2**i with amplitude
    persistence**i, using seed + i so each octave reads a different
    gradient field.

    Args:
        x: Sample x coordinate(s).
        y: Sample y coordinate(s).
        octaves: Number of octaves to sum.
        persistence: Amplitude multiplier between octaves.
        scale: Frequency of the first octave.
        seed: Base seed.
        legacy_gradient: Use the legacy gradient rule.

    Returns:
        Amplitude-normalized noise, roughly in [-1, 1]. Exactly 0 when
        octaves <= 0.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    total = np.zeros(np.broadcast_shapes(x.shape, y.shape))
    amplitude = 1.0
    frequency = scale
    max_value = 0.0

    for i in range(octaves):
        total += amplitude * np.asarray(
            perlin(x * frequency, y * frequency, seed + i, legacy_gradient)
        )
        max_value += amplitude
        amplitude *= persistence
        frequency *= 2.0

    if max_value <= 0:
        return _scalar_or_array(np.zeros_like(total))
    return _scalar_or_array(total / max_value)
