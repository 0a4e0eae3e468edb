"""
Projective Geometric Algebra (PGA) implementation for G(2,0,1).

PGA2D is an algebra with 8 basis elements organized by grade:
- Grade 0 (scalar): 1
- Grade 1 (vectors/lines): e₀, e₁, e₂
- Grade 2 (bivectors/points): e₀₁, e₂₀, e₁₂
- Grade 3 (pseudoscalar): e₀₁₂

The metric signature is (2,0,1) meaning:
- e₁² = e₂² = +1 (Euclidean)
- e₀² = 0 (degenerate/null direction)

The null e₀ is what separates finite elements from ideal ones: a point
with no e₁₂ weight lives at infinity and behaves as a pure direction.

Component ordering:
[s, e0, e1, e2, e01, e20, e12, e012]
 0   1   2   3   4    5    6    7
"""

from __future__ import annotations
from typing import Dict, Sequence, Tuple, Union
import math
import torch

from ..core.constants import DEFAULT_DTYPE, DEFAULT_EPS_NORM, NUM_COMPONENTS, BASIS_NAMES
from ..core.exceptions import DegenerateInputError


# Component indices for each basis element
IDX_S = 0      # Scalar (grade 0)
IDX_E0 = 1     # e₀
IDX_E1 = 2     # e₁
IDX_E2 = 3     # e₂
IDX_E01 = 4    # e₀₁
IDX_E20 = 5    # e₂₀
IDX_E12 = 6    # e₁₂
IDX_E012 = 7   # e₀₁₂

# Grade masks for extraction
GRADE_0_MASK = [IDX_S]
GRADE_1_MASK = [IDX_E0, IDX_E1, IDX_E2]
GRADE_2_MASK = [IDX_E01, IDX_E20, IDX_E12]
GRADE_3_MASK = [IDX_E012]
GRADE_MASKS = (GRADE_0_MASK, GRADE_1_MASK, GRADE_2_MASK, GRADE_3_MASK)

# Grade of each storage slot
BLADE_GRADES = (0, 1, 1, 1, 2, 2, 2, 3)

# Basis blades as generator index tuples. e20 is stored as e2∧e0 (NOT e02),
# which makes the Poincaré dual a plain reversal of the coefficient array.
BASIS_BLADES = (
    (),          # s
    (0,),        # e0
    (1,),        # e1
    (2,),        # e2
    (0, 1),      # e01
    (2, 0),      # e20
    (1, 2),      # e12
    (0, 1, 2),   # e012
)

# Metric: e0^2 = 0, e1^2 = e2^2 = 1
METRIC = {0: 0, 1: 1, 2: 1}

# Reversion sign table: grade k has sign (-1)^(k*(k-1)/2)
# Grade 0: +1, Grade 1: +1, Grade 2: -1, Grade 3: -1
REVERSION_SIGNS = torch.tensor(
    [(-1) ** (k * (k - 1) // 2) for k in BLADE_GRADES], dtype=DEFAULT_DTYPE
)

# Grade involution sign table: odd grades get negated
INVOLUTION_SIGNS = torch.tensor(
    [(-1) ** k for k in BLADE_GRADES], dtype=DEFAULT_DTYPE
)

# Clifford conjugation: reversion + grade involution
CONJUGATION_SIGNS = REVERSION_SIGNS * INVOLUTION_SIGNS


def _canonical_blade(blade: Sequence[int]) -> Tuple[Tuple[int, ...], int]:
    """Sort a blade's generators, returning (sorted blade, permutation sign)."""
    blade = list(blade)
    sign = 1
    for i in range(len(blade)):
        for j in range(len(blade) - 1 - i):
            if blade[j] > blade[j + 1]:
                blade[j], blade[j + 1] = blade[j + 1], blade[j]
                sign *= -1
    return tuple(blade), sign


def _multiply_blades(a: Sequence[int], b: Sequence[int]) -> Tuple[Tuple[int, ...], int]:
    """
    Multiply two blades, returning (result_blade, sign).

    Bubble-sorts the concatenated generators into canonical order,
    contracting equal adjacent pairs with the metric. Each swap of
    distinct generators flips the sign; contracting e0 gives zero.
    """
    combined = list(a) + list(b)
    sign = 1

    changed = True
    while changed:
        changed = False
        i = 0
        while i < len(combined) - 1:
            if combined[i] == combined[i + 1]:
                m = METRIC[combined[i]]
                if m == 0:
                    return (), 0
                sign *= m
                combined.pop(i + 1)
                combined.pop(i)
                changed = True
            elif combined[i] > combined[i + 1]:
                combined[i], combined[i + 1] = combined[i + 1], combined[i]
                sign *= -1
                changed = True
                i += 1
            else:
                i += 1

    return tuple(combined), sign


def _build_cayley_table() -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Build the Cayley table for the geometric product in PGA2D.

    The Cayley table defines: e_i * e_j = sign * e_k

    Returns:
        signs: (8, 8) tensor of signs (+1, -1, or 0)
        indices: (8, 8) tensor of result indices
    """
    lookup: Dict[Tuple[int, ...], Tuple[int, int]] = {}
    for idx, blade in enumerate(BASIS_BLADES):
        canonical, orientation = _canonical_blade(blade)
        lookup[canonical] = (idx, orientation)

    signs = torch.zeros(NUM_COMPONENTS, NUM_COMPONENTS, dtype=DEFAULT_DTYPE)
    indices = torch.zeros(NUM_COMPONENTS, NUM_COMPONENTS, dtype=torch.long)

    for i, blade_i in enumerate(BASIS_BLADES):
        for j, blade_j in enumerate(BASIS_BLADES):
            result, sign = _multiply_blades(blade_i, blade_j)
            if sign == 0:
                continue
            k, orientation = lookup[result]
            signs[i, j] = sign * orientation
            indices[i, j] = k

    return signs, indices


# Build Cayley tables at module load time
CAYLEY_SIGNS, CAYLEY_INDICES = _build_cayley_table()


def _build_product_table(keep) -> torch.Tensor:
    """
    Expand the Cayley table into a dense (8, 8, 8) product tensor.

    keep(r, s, k) decides whether the term e_i * e_j of grades r, s
    landing on a grade-k blade contributes to the product.
    """
    table = torch.zeros(NUM_COMPONENTS, NUM_COMPONENTS, NUM_COMPONENTS, dtype=DEFAULT_DTYPE)
    for i in range(NUM_COMPONENTS):
        for j in range(NUM_COMPONENTS):
            k = int(CAYLEY_INDICES[i, j])
            if keep(BLADE_GRADES[i], BLADE_GRADES[j], BLADE_GRADES[k]):
                table[i, j, k] = CAYLEY_SIGNS[i, j]
    return table


GEOMETRIC_TABLE = _build_product_table(lambda r, s, k: True)
OUTER_TABLE = _build_product_table(lambda r, s, k: k == r + s)
INNER_TABLE = _build_product_table(lambda r, s, k: k == abs(r - s))


class Multivector:
    """
    A multivector in the Projective Geometric Algebra G(2,0,1).

    Components are stored as a tensor of shape (8,) holding the
    coefficient of each basis blade. Multivectors are values: every
    operation returns a new instance and the constructor copies its
    input, so two elements never share storage.

    The algebra supports:
    - Geometric product (multiplication)
    - Outer (wedge) product
    - Inner (dot) product
    - Regressive (vee) product
    - Reversion, dual, conjugation
    - Magnitude and normalization
    """

    def __init__(self, components: Union[torch.Tensor, Sequence[float]]):
        """
        Initialize a multivector from its components.

        Args:
            components: Tensor or sequence of 8 coefficients in order:
                       [s, e0, e1, e2, e01, e20, e12, e012]
        """
        if not isinstance(components, torch.Tensor):
            components = torch.as_tensor(components, dtype=DEFAULT_DTYPE)
        elif not components.is_floating_point():
            components = components.to(DEFAULT_DTYPE)
        if components.shape != (NUM_COMPONENTS,):
            got = components.shape[-1] if components.dim() > 0 else 0
            raise ValueError(f"Expected {NUM_COMPONENTS} components, got {got}")
        self.mv = components.detach().clone()

    @classmethod
    def _from_components(cls, components: torch.Tensor) -> 'Multivector':
        """Wrap raw coefficients in ``cls`` without going through its constructor."""
        obj = cls.__new__(cls)
        Multivector.__init__(obj, components)
        return obj

    def _like(self, components: torch.Tensor) -> 'Multivector':
        """Same-type result for grade-preserving operations."""
        return type(self)._from_components(components)

    def as_multivector(self) -> 'Multivector':
        """Return a plain Multivector copy, dropping any primitive view."""
        return Multivector(self.mv)

    @property
    def dtype(self) -> torch.dtype:
        return self.mv.dtype

    def clone(self) -> 'Multivector':
        """Create a copy."""
        return self._like(self.mv)

    def tolist(self) -> list:
        """Coefficients as a list of floats."""
        return [float(c) for c in self.mv]

    # === Grade extraction ===

    def scalar(self) -> float:
        """Extract scalar (grade 0) component."""
        return float(self.mv[IDX_S])

    def vector(self) -> torch.Tensor:
        """Extract vector (grade 1) components: [e0, e1, e2]."""
        return self.mv[GRADE_1_MASK]

    def bivector(self) -> torch.Tensor:
        """Extract bivector (grade 2) components: [e01, e20, e12]."""
        return self.mv[GRADE_2_MASK]

    def pseudoscalar(self) -> float:
        """Extract pseudoscalar (grade 3) component."""
        return float(self.mv[IDX_E012])

    def grade(self, k: int) -> 'Multivector':
        """Extract grade-k part of the multivector."""
        result = torch.zeros_like(self.mv)
        if 0 <= k < len(GRADE_MASKS):
            mask = GRADE_MASKS[k]
            result[mask] = self.mv[mask]
        return Multivector(result)

    def grades(self, eps: float = 0.0) -> Tuple[int, ...]:
        """Grades with at least one coefficient larger than eps in magnitude."""
        present = []
        for k, mask in enumerate(GRADE_MASKS):
            if torch.any(self.mv[mask].abs() > eps):
                present.append(k)
        return tuple(present)

    # === Unary operations ===

    def reverse(self) -> 'Multivector':
        """
        Reversion: ~M

        Reverses the order of basis vectors in each term.
        Grade k gets sign (-1)^(k(k-1)/2).
        """
        return self._like(self.mv * REVERSION_SIGNS.to(self.dtype))

    def __invert__(self) -> 'Multivector':
        """Operator ~: reversion."""
        return self.reverse()

    def conjugate(self) -> 'Multivector':
        """Clifford conjugation: reversion + grade involution."""
        return self._like(self.mv * CONJUGATION_SIGNS.to(self.dtype))

    def involute(self) -> 'Multivector':
        """Grade involution: negate odd grades."""
        return self._like(self.mv * INVOLUTION_SIGNS.to(self.dtype))

    def dual(self) -> 'Multivector':
        """
        Poincaré dual (right complement).

        With the e20 ordering the complement pairs are
        s <-> e012, e0 <-> e12, e1 <-> e20, e2 <-> e01,
        all with positive sign, so the dual reverses the coefficients.
        """
        return Multivector(self.mv.flip(-1))

    def norm_squared(self) -> float:
        """
        Compute ⟨M ~M⟩₀

        Returns the scalar part of M * ~M.
        """
        return (self * self.reverse()).scalar()

    def magnitude(self) -> float:
        """
        Compute |M| = √|⟨M ~M⟩₀|

        Uses the absolute value since bivectors square to negative
        scalars. Ideal elements have zero magnitude.
        """
        return math.sqrt(abs(self.norm_squared()))

    def ideal_norm(self) -> float:
        """Magnitude of the dual; the meaningful norm of ideal elements."""
        return self.dual().magnitude()

    def normalized(self, eps: float = DEFAULT_EPS_NORM) -> 'Multivector':
        """
        Return unit multivector: M / |M|

        Raises:
            DegenerateInputError: If M is a null element (e.g. an ideal
                point), which has no metric normalization.
        """
        n = self.magnitude()
        if n < eps:
            raise DegenerateInputError(
                f"Cannot normalize null element {self!r} (magnitude {n:.3g})"
            )
        return self._like(self.mv / n)

    def inverse(self, eps: float = DEFAULT_EPS_NORM) -> 'Multivector':
        """
        Multiplicative inverse for versors: ~M / ⟨M ~M⟩₀
        """
        norm_sq = self.norm_squared()
        if abs(norm_sq) < eps:
            raise DegenerateInputError(f"Null element {self!r} has no inverse")
        return self.reverse().as_multivector() / norm_sq

    # === Binary operations ===

    def __mul__(self, other: Union['Multivector', float, torch.Tensor]) -> 'Multivector':
        """Geometric product, or scaling by a number."""
        if isinstance(other, Multivector):
            return geometric_product(self, other)
        if isinstance(other, (int, float)):
            return self._like(self.mv * other)
        if isinstance(other, torch.Tensor) and other.dim() == 0:
            return self._like(self.mv * other)
        return NotImplemented

    def __rmul__(self, other: Union[float, torch.Tensor]) -> 'Multivector':
        """Left multiplication by a number."""
        if isinstance(other, Multivector):
            return NotImplemented
        return self.__mul__(other)

    def __add__(self, other: 'Multivector') -> 'Multivector':
        """Addition."""
        if isinstance(other, Multivector):
            return Multivector(self.mv + other.mv)
        return NotImplemented

    def __sub__(self, other: 'Multivector') -> 'Multivector':
        """Subtraction."""
        if isinstance(other, Multivector):
            return Multivector(self.mv - other.mv)
        return NotImplemented

    def __neg__(self) -> 'Multivector':
        """Negation."""
        return self._like(-self.mv)

    def __truediv__(self, other: Union[float, torch.Tensor]) -> 'Multivector':
        """Division by a number."""
        if isinstance(other, (int, float)) or (
            isinstance(other, torch.Tensor) and other.dim() == 0
        ):
            return self._like(self.mv / other)
        return NotImplemented

    def __xor__(self, other: 'Multivector') -> 'Multivector':
        """Outer (wedge) product: a ^ b."""
        return outer_product(self, other)

    def __or__(self, other: 'Multivector') -> 'Multivector':
        """Inner (dot) product: a | b."""
        return inner_product(self, other)

    def __and__(self, other: 'Multivector') -> 'Multivector':
        """Regressive (vee) product: a & b."""
        return regressive_product(self, other)

    def outer(self, other: 'Multivector') -> 'Multivector':
        """Outer (wedge) product."""
        return outer_product(self, other)

    def inner(self, other: 'Multivector') -> 'Multivector':
        """Inner (dot) product."""
        return inner_product(self, other)

    def regressive(self, other: 'Multivector') -> 'Multivector':
        """Regressive (vee) product."""
        return regressive_product(self, other)

    def allclose(self, other: 'Multivector', atol: float = 1e-9) -> bool:
        """Coefficient-wise comparison within an absolute tolerance."""
        return bool(torch.allclose(self.mv, other.mv.to(self.dtype), atol=atol, rtol=0.0))

    def __repr__(self) -> str:
        terms = [
            f"{float(c):g}" if name == "1" else f"{float(c):g}*{name}"
            for c, name in zip(self.mv, BASIS_NAMES)
            if float(c) != 0.0
        ]
        body = " + ".join(terms) if terms else "0"
        return f"{type(self).__name__}({body})"


def _product(a: Multivector, b: Multivector, table: torch.Tensor) -> Multivector:
    """Contract both operands against a (8, 8, 8) product table."""
    dtype = torch.promote_types(a.dtype, b.dtype)
    result = torch.einsum(
        'i,j,ijk->k', a.mv.to(dtype), b.mv.to(dtype), table.to(dtype)
    )
    return Multivector(result)


def geometric_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the geometric product a * b.

    Uses the Cayley table expanded into a dense product tensor.
    """
    return _product(a, b, GEOMETRIC_TABLE)


def outer_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the outer (wedge) product a ∧ b.

    The outer product keeps the grade-raising part of the geometric product:
    for grade-r and grade-s elements, (a ∧ b) has grade r + s.
    Two lines wedge to their intersection point.
    """
    return _product(a, b, OUTER_TABLE)


def inner_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the symmetric inner (dot) product a · b.

    For grade-r and grade-s elements the result has grade |r - s|.
    Two normalized lines dot to the cosine of their angle; a line
    dotted with a point gives the perpendicular through the point.
    """
    return _product(a, b, INNER_TABLE)


def regressive_product(a: Multivector, b: Multivector) -> Multivector:
    """
    Compute the regressive (vee) product a ∨ b.

    Defined as: a ∨ b = (a* ∧ b*)*
    where * denotes the dual. Two points vee to the line joining them.
    """
    return outer_product(a.dual(), b.dual()).dual()


def sandwich(motor: Multivector, element: Multivector) -> Multivector:
    """
    Compute the sandwich product: M * X * ~M

    This is the fundamental operation for applying transformations in GA.
    """
    return motor * element * motor.reverse()


# === Factory functions for basis elements ===

def _basis(idx: int, coeff: float = 1.0) -> Multivector:
    """Create a basis element multivector."""
    mv = torch.zeros(NUM_COMPONENTS, dtype=DEFAULT_DTYPE)
    mv[idx] = coeff
    return Multivector(mv)


def scalar(s: float) -> Multivector:
    """Create a scalar multivector."""
    return _basis(IDX_S, s)


def e0(coeff: float = 1.0) -> Multivector:
    """Create e₀ basis element (degenerate direction, the line at infinity)."""
    return _basis(IDX_E0, coeff)


def e1(coeff: float = 1.0) -> Multivector:
    """Create e₁ basis element."""
    return _basis(IDX_E1, coeff)


def e2(coeff: float = 1.0) -> Multivector:
    """Create e₂ basis element."""
    return _basis(IDX_E2, coeff)


def e01(coeff: float = 1.0) -> Multivector:
    """Create e₀₁ basis bivector."""
    return _basis(IDX_E01, coeff)


def e20(coeff: float = 1.0) -> Multivector:
    """Create e₂₀ basis bivector."""
    return _basis(IDX_E20, coeff)


def e12(coeff: float = 1.0) -> Multivector:
    """Create e₁₂ basis bivector (the origin point)."""
    return _basis(IDX_E12, coeff)


def e012(coeff: float = 1.0) -> Multivector:
    """Create e₀₁₂ basis element (the PGA pseudoscalar)."""
    return _basis(IDX_E012, coeff)
