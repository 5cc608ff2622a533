"""Möbius function by sieving."""

__all__ = ["mobius_sieve"]


def mobius_sieve(limit: int) -> list[int]:
    """Möbius function values for ``0 .. limit``.

    Entry 0 is 1, as the sieve leaves it: zero has no counted prime factors.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    # Distinct prime factor count per number, or -1 when a square divides it.
    factors = [0] * (limit + 1)
    for k in range(2, limit + 1):
        if factors[k]:
            continue
        square = k * k
        for j in range(k, limit + 1, k):
            if j % square == 0:
                factors[j] = -1
            elif factors[j] != -1:
                factors[j] += 1
    return [0 if count == -1 else (1 if count % 2 == 0 else -1) for count in factors]