"""Type aliases using modern PEP 695 syntax."""

from collections.abc import Callable

# Filesystem device identifier (st_dev) of the scan root
type DeviceId = int

# Size formatting strategy: byte count in, fixed-width display text out
type SizeFormatter = Callable[[int], str]
