"""Real polynomials evaluated with Horner's scheme."""

from planisphere.errors import InvariantViolation


class Polynomial:
    """Polynomial given by its coefficients, highest degree first."""

    __slots__ = ("_coefficients",)

    def __init__(self, coefficient_n: float, *coefficients: float) -> None:
        if coefficient_n == 0:
            raise InvariantViolation("leading coefficient must not be zero")
        self._coefficients: tuple[float, ...] = (coefficient_n, *coefficients)

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def at(self, x: float) -> float:
        value = 0.0
        for c in self._coefficients:
            value = value * x + c
        return value

    def __str__(self) -> str:
        terms: list[str] = []
        for i, c in enumerate(self._coefficients):
            if c == 0:
                continue
            power = self.degree - i
            coefficient = repr(float(abs(c)))
            if power > 0 and abs(c) == 1:
                coefficient = ""
            variable = "" if power == 0 else "x" if power == 1 else f"x^{power}"
            sign = "-" if c < 0 else "+" if terms else ""
            terms.append(f"{sign}{coefficient}{variable}")
        return "".join(terms)

    def __eq__(self, other: object) -> bool:
        raise TypeError("Polynomial does not support equality")

    __hash__ = None  # type: ignore[assignment]
