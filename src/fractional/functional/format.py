from fractional.core.fraction import Fraction


def describe(x: Fraction) -> str:
    if x.is_nan:
        return "NaN"
    if x.is_infinite:
        return ("+" if x >= 0 else "-") + "Inf"
    if x.denominator == 1:
        return f"{x.numerator}"
    return f"{x.numerator}/{x.denominator}"
