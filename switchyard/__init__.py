"""Power-envelope arithmetic, SoC derating, command delay, slew-rate ramps and phase helpers for microgrid simulation."""

__version__ = "0.1.0"