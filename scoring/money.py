from decimal import ROUND_HALF_UP, Decimal
from typing import List, Sequence, Union

CENT = Decimal("0.01")

Amount = Union[Decimal, int, float, str]


def to_money(amount: Amount) -> Decimal:
    """Normalize an amount to a two-place Decimal."""
    return Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)


def allocate(total: Amount, weights: Sequence[int]) -> List[Decimal]:
    """Split ``total`` proportionally to ``weights`` in whole cents.

    Uses the largest-remainder method, so the shares always sum exactly to
    ``total``. Equal remainders favor the earlier weight.
    """
    cents = int(to_money(total) / CENT)
    weight_sum = sum(weights)
    if not weights or weight_sum <= 0:
        return [Decimal("0.00") for _ in weights]

    shares = [cents * w // weight_sum for w in weights]
    leftover = cents - sum(shares)
    by_remainder = sorted(
        range(len(weights)),
        key=lambda i: (-(cents * weights[i] % weight_sum), i),
    )
    for i in by_remainder[:leftover]:
        shares[i] += 1
    return [(Decimal(share) * CENT).quantize(CENT) for share in shares]
