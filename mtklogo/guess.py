"""
mtklogo guess --size 3686400

Lists every w x h a blob of that many (inflated) bytes could be, for each
bytes-per-pixel of the known colour modes. Slow for big prime sizes.
"""

from itertools import groupby
from typing import Dict, List, Tuple

from .color import ColorMode
from .console import cmd, console, data, data2, data3, emph


def factorize(n: int) -> List[Tuple[int, int]]:
    """Prime decomposition as (prime, power) pairs."""
    factors = []
    f = 2
    while f * f <= n:
        power = 0
        while n % f == 0:
            n //= f
            power += 1
        if power:
            factors.append((f, power))
        f += 1
    if n > 1:
        factors.append((n, 1))
    return factors


def divisor_pairs(n: int) -> List[Tuple[int, int]]:
    """All (w, h) with w * h == n, w ascending."""
    if n <= 0:
        return []
    divisors = [1]
    for prime, power in factorize(n):
        divisors = [d * prime ** p for d in divisors for p in range(power + 1)]
    return [(w, n // w) for w in sorted(divisors)]


def format_factors(factors) -> str:
    if not factors:
        return data(1)
    return " x ".join(data(p) if k == 1 else f"{data(p)}^{data(k)}" for p, k in factors)


def modes_by_bpp() -> Dict[int, List[ColorMode]]:
    modes = sorted(ColorMode.enumerate(), key=lambda m: m.bytes_per_pixel)
    return {bpp: list(group) for bpp, group in groupby(modes, key=lambda m: m.bytes_per_pixel)}


def run_guess(size: int) -> Dict[int, List[Tuple[int, int]]]:
    console.print(f"{cmd('guess')} possible dimensions of a {data(size)} bytes blob")
    found = {}
    for bpp, modes in modes_by_bpp().items():
        names = ",".join(emph(m) for m in modes)
        if size % bpp:
            console.print(f"if {data(bpp)} bytes per pixel (modes: {names}), {data3(size)} bytes "
                          "is not a whole number of pixels.")
            found[bpp] = []
            continue
        pixels = size // bpp
        console.print(f"if {data(bpp)} bytes per pixel (modes: {names}), {data3(size)} bytes is "
                      f"{data2(pixels)} pixels and has following divisors: "
                      f"{format_factors(factorize(pixels))}.")
        pairs = divisor_pairs(pixels)
        for w, h in pairs:
            console.print(f"  it could be {data3(w)} x {data3(h)}")
        found[bpp] = pairs
    return found
