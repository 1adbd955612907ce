"""
DistributionSpec: tagged union identifying a distribution family and its
parameters.

The `family` field identifies which parameters are meaningful. Factory
classmethods build one spec per family. Construction never raises on
out-of-range values: callers rebuilding a spec from URL parameters need
to ask whether it is valid (`is_valid_params`) before computing with it,
and every engine entry point calls `require_valid` first.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from snakemath.core.exceptions import ValidationError


class Family(str, Enum):
    """The five supported distribution families."""
    NORMAL = "normal"
    BINOMIAL = "binomial"
    POISSON = "poisson"
    EXPONENTIAL = "exponential"
    UNIFORM = "uniform"


# Parameter names per family, in canonical order
FAMILY_PARAMS: dict[Family, tuple[str, ...]] = {
    Family.NORMAL: ("mu", "sigma"),
    Family.BINOMIAL: ("n", "p"),
    Family.POISSON: ("lambda",),
    Family.EXPONENTIAL: ("lambda",),
    Family.UNIFORM: ("a", "b"),
}

DISCRETE_FAMILIES = frozenset({Family.BINOMIAL, Family.POISSON})


def parse_family(value: Family | str) -> Family:
    """Map a family tag to Family, rejecting unknown tags."""
    if isinstance(value, Family):
        return value
    try:
        return Family(str(value).lower())
    except ValueError:
        valid = ", ".join(f.value for f in Family)
        raise ValidationError(
            f"Unknown distribution family {value!r}; expected one of: {valid}"
        ) from None


@dataclass(frozen=True)
class ParamIssue:
    """One violated parameter constraint."""
    param: str
    message: str


@dataclass(frozen=True)
class DistributionSpec:
    """
    Immutable distribution family + parameters.

    Use the factory classmethods (`normal`, `binomial`, `poisson`,
    `exponential`, `uniform`) or `from_dict`. Parameter values are
    available as properties; accessing a parameter the family does not
    have raises AttributeError. `params` is a read-only view of a private
    copy, so specs are hashable and can key caches.
    """
    family: Family
    params: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __hash__(self) -> int:
        return hash((self.family, tuple(sorted(self.params.items()))))

    # --- Factory classmethods ---

    @classmethod
    def normal(cls, mu: float = 0.0, sigma: float = 1.0) -> DistributionSpec:
        return cls(Family.NORMAL, {"mu": mu, "sigma": sigma})

    @classmethod
    def binomial(cls, n: int, p: float) -> DistributionSpec:
        return cls(Family.BINOMIAL, {"n": n, "p": p})

    @classmethod
    def poisson(cls, lam: float) -> DistributionSpec:
        return cls(Family.POISSON, {"lambda": lam})

    @classmethod
    def exponential(cls, lam: float) -> DistributionSpec:
        return cls(Family.EXPONENTIAL, {"lambda": lam})

    @classmethod
    def uniform(cls, a: float = 0.0, b: float = 1.0) -> DistributionSpec:
        return cls(Family.UNIFORM, {"a": a, "b": b})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DistributionSpec:
        """
        Build from `{'type': 'normal', 'params': {'mu': 0, 'sigma': 1}}`.

        Numeric strings are accepted for parameter values. Unknown family
        tags, missing parameters and non-numeric values raise
        ValidationError. Range constraints are not checked here.
        """
        if "type" not in data:
            raise ValidationError("Distribution dict needs a 'type' key")
        family = parse_family(data["type"])
        raw = data.get("params", {})
        params: dict[str, float] = {}
        for name in FAMILY_PARAMS[family]:
            if name not in raw:
                raise ValidationError(f"{family.value}: missing parameter {name!r}")
            try:
                params[name] = float(raw[name])
            except (TypeError, ValueError):
                raise ValidationError(
                    f"{family.value}: parameter {name!r} is not numeric: {raw[name]!r}"
                ) from None
        return cls(family, params)

    def to_dict(self) -> dict[str, Any]:
        """Inverse of from_dict."""
        return {"type": self.family.value, "params": dict(self.params)}

    # --- Parameter access ---

    def _get(self, name: str) -> float:
        if name not in FAMILY_PARAMS[self.family]:
            raise AttributeError(
                f"{self.family.value} distribution has no parameter {name!r}"
            )
        return self.params[name]

    @property
    def mu(self) -> float:
        return self._get("mu")

    @property
    def sigma(self) -> float:
        return self._get("sigma")

    @property
    def n(self) -> int:
        return self._get("n")

    @property
    def p(self) -> float:
        return self._get("p")

    @property
    def lam(self) -> float:
        """Rate parameter lambda (Poisson / exponential)."""
        return self._get("lambda")

    @property
    def a(self) -> float:
        return self._get("a")

    @property
    def b(self) -> float:
        return self._get("b")

    @property
    def is_discrete(self) -> bool:
        return self.family in DISCRETE_FAMILIES

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.params.items())
        return f"DistributionSpec.{self.family.value}({args})"


# --- Validation ---

def _is_real(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def validate_params(spec: DistributionSpec) -> list[ParamIssue]:
    """
    List every violated constraint of `spec`; empty when valid.

    Constraints:
        normal      sigma > 0
        binomial    n integer >= 0, 0 <= p <= 1
        poisson     lambda > 0
        exponential lambda > 0
        uniform     a < b
    All parameters must also be present and finite.
    """
    family = spec.family
    issues: list[ParamIssue] = []

    for name in FAMILY_PARAMS[family]:
        if name not in spec.params:
            issues.append(ParamIssue(name, "Parameter is missing"))
        elif not _is_real(spec.params[name]):
            issues.append(ParamIssue(name, f"Must be a finite number, got {spec.params[name]!r}"))
    if issues:
        return issues

    values = spec.params
    if family == Family.NORMAL:
        if values["sigma"] <= 0:
            issues.append(ParamIssue("sigma", "Standard deviation must be positive"))
    elif family == Family.BINOMIAL:
        if values["n"] < 0 or float(values["n"]) != math.floor(values["n"]):
            issues.append(ParamIssue("n", "Number of trials must be a non-negative integer"))
        if not 0.0 <= values["p"] <= 1.0:
            issues.append(ParamIssue("p", "Probability must be between 0 and 1"))
    elif family == Family.POISSON:
        if values["lambda"] <= 0:
            issues.append(ParamIssue("lambda", "Rate parameter must be positive"))
    elif family == Family.EXPONENTIAL:
        if values["lambda"] <= 0:
            issues.append(ParamIssue("lambda", "Rate parameter must be positive"))
    elif family == Family.UNIFORM:
        if values["a"] >= values["b"]:
            issues.append(ParamIssue("a", "Lower bound must be less than upper bound"))
    else:
        raise ValueError(f"Unknown family: {family!r}")

    return issues


def is_valid_params(spec: DistributionSpec) -> bool:
    """True iff `spec` satisfies all constraints of its family."""
    return not validate_params(spec)


def require_valid(spec: DistributionSpec) -> DistributionSpec:
    """
    Raise ValidationError listing every issue if `spec` is invalid.

    Returns the spec unchanged so it can be used inline.
    """
    if not isinstance(spec, DistributionSpec):
        raise ValidationError(
            f"Expected a DistributionSpec, got {type(spec).__name__}"
        )
    issues = validate_params(spec)
    if issues:
        details = "; ".join(f"{i.param}: {i.message}" for i in issues)
        raise ValidationError(f"Invalid {spec.family.value} parameters: {details}")
    return spec
