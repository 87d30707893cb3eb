"""Fixed-point IIR low-pass filters for temperature readings.

Temperatures are integers. Internally the filters keep 16 extra fraction
bits ("precise" values), so a regular value ``v`` is ``v << 16`` in precise
form.

A single section has the transfer function::

    H(z) = 2^-a (1 + 2 z^-1 + z^-2) / (1 + (-2 + 2^-b) z^-1 + (1 - 2^-b + 4 * 2^-a) z^-2)

with ``a = 2b + 4``. Every coefficient is a power of two, the DC gain is
exactly 1 and the poles are real, so a step response does not overshoot.
The step delay of one section grows roughly as 3.33 * 2^b samples;
cascading sections multiplies the delay by the number of sections.
"""

from __future__ import annotations

from typing import List, Optional

from brewcontrol.applog import log

PRECISE_SHIFT = 16
NUM_FILTER_SECTIONS = 3


def _to_precise(value: int) -> int:
    return int(value) << PRECISE_SHIFT


def _to_regular(value: int) -> int:
    return value >> PRECISE_SHIFT


class FixedFilter:
    """One second-order low-pass section working on precise integers."""

    def __init__(self, b_value: int = 20) -> None:
        log.verbose("BREW: Creating FixedFilter.\n")
        self._xv: List[int] = [0, 0, 0]
        self._yv: List[int] = [0, 0, 0]
        self.a = 0
        self.b = 0
        self.set_coefficients(b_value)

    def set_coefficients(self, b_value: int) -> None:
        """Choose the filter strength; ``a`` follows as ``2 * b + 4``."""
        log.verbose("BREW: Setting coefficients on FixedFilter to %d.\n", b_value)
        b_value = int(b_value)
        if b_value < 0:
            raise ValueError(f"filter coefficient must not be negative: {b_value}")
        self.b = b_value
        self.a = b_value * 2 + 4

    def init(self, value: int) -> None:
        """Settle the filter at ``value``, as if it had always been the input."""
        log.verbose("BREW: Initialize FixedFilter using %d.\n", value)
        precise = _to_precise(value)
        self._xv = [precise, precise, precise]
        self._yv = [precise, precise, precise]

    def add(self, value: int) -> int:
        """Feed a regular value and return the new regular output."""
        log.verbose("BREW: Adding %d to FixedFilter.\n", value)
        return _to_regular(self.add_precise(_to_precise(value)))

    def add_precise(self, value: int) -> int:
        """Feed a precise value and return the new precise output."""
        log.verbose("BREW: Adding %d (double) to FixedFilter.\n", value)
        a, b = self.a, self.b
        self._xv = [int(value), self._xv[0], self._xv[1]]
        x0, x1, x2 = self._xv
        y1, y2 = self._yv[0], self._yv[1]
        # Ordered to keep intermediate values small.
        y0 = (
            ((y1 - y2) + y1)
            - (y1 >> b)
            + (y2 >> b)
            + (x0 >> a)
            + (x1 >> (a - 1))
            + (x2 >> a)
            - (y2 >> (a - 2))
        )
        self._yv = [y0, y1, y2]
        return y0

    def read_output(self) -> int:
        return _to_regular(self._yv[0])

    def read_input(self) -> int:
        return _to_regular(self._xv[0])

    def read_output_precise(self) -> int:
        return self._yv[0]

    def read_prev_output_precise(self) -> int:
        return self._yv[1]

    def detect_pos_peak(self) -> Optional[int]:
        """The previous output if it was a maximum, otherwise None."""
        y0, y1, y2 = self._yv
        if y0 < y1 and y1 >= y2:
            return _to_regular(y1)
        return None

    def detect_neg_peak(self) -> Optional[int]:
        """The previous output if it was a minimum, otherwise None."""
        y0, y1, y2 = self._yv
        if y0 > y1 and y1 <= y2:
            return _to_regular(y1)
        return None


class CascadedFilter:
    """Three identical sections in series for stronger attenuation."""

    def __init__(self, b_value: int = 2) -> None:
        log.verbose("BREW: Creating CascadedFilter.\n")
        self.sections = [FixedFilter() for _ in range(NUM_FILTER_SECTIONS)]
        self.set_coefficients(b_value)

    @property
    def _last(self) -> FixedFilter:
        return self.sections[-1]

    def set_coefficients(self, b_value: int) -> None:
        log.verbose("BREW: Setting coefficients on CascadedFilter to %d.\n", b_value)
        for section in self.sections:
            section.set_coefficients(b_value)

    def init(self, value: int) -> None:
        log.verbose("BREW: Initialize CascadedFilter with %d.\n", value)
        for section in self.sections:
            section.init(value)

    def add(self, value: int) -> int:
        """Feed a regular value and return the new regular output."""
        log.verbose("BREW: Adding temp %d to CascadedFilter.\n", value)
        return _to_regular(self.add_precise(_to_precise(value)))

    def add_precise(self, value: int) -> int:
        """Feed a precise value through every section; return the final output."""
        log.verbose("BREW: Adding temp %d (double) to CascadedFilter.\n", value)
        result = int(value)
        for section in self.sections:
            result = section.add_precise(result)
        return result

    def read_input(self) -> int:
        return self.sections[0].read_input()

    def read_output(self) -> int:
        return self._last.read_output()

    def read_output_precise(self) -> int:
        return self._last.read_output_precise()

    def read_prev_output_precise(self) -> int:
        return self._last.read_prev_output_precise()

    def detect_pos_peak(self) -> Optional[int]:
        return self._last.detect_pos_peak()

    def detect_neg_peak(self) -> Optional[int]:
        return self._last.detect_neg_peak()