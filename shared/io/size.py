"""
shared/io/size.py - 바이트 크기 포맷팅

사람이 읽기 쉬운 크기 문자열을 생성합니다.

    SI  (1000 단위): "1.5 kB", "82 MB"
    IEC (1024 단위): "1.5 KiB", "78 MiB"

10 미만 값은 소수점 한 자리, 그 이상은 반올림한 정수로 표시합니다.
"""

from __future__ import annotations

import math

SI_SIZES = ("B", "kB", "MB", "GB", "TB", "PB", "EB")
IEC_SIZES = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def _humanize(value: int, base: float, sizes: tuple[str, ...]) -> str:
    if value < 10:
        return f"{value} B"

    exponent = min(int(math.floor(math.log(value) / math.log(base))), len(sizes) - 1)
    suffix = sizes[exponent]
    val = math.floor(value / math.pow(base, exponent) * 10 + 0.5) / 10

    if val < 10:
        return f"{val:.1f} {suffix}"
    return f"{val:.0f} {suffix}"


def format_size(value: int, iec: bool = False) -> str:
    """바이트 크기를 문자열로 변환

    Args:
        value: 바이트 수 (음수는 0으로 취급)
        iec: True이면 IEC(1024) 단위, False이면 SI(1000) 단위

    Returns:
        포맷팅된 크기 문자열 (예: "1.2 MB")

    Example:
        >>> format_size(1500)
        '1.5 kB'
        >>> format_size(1536, iec=True)
        '1.5 KiB'
    """
    value = max(int(value), 0)
    if iec:
        return _humanize(value, 1024, IEC_SIZES)
    return _humanize(value, 1000, SI_SIZES)
