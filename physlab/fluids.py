"""
Bernoulli's theorem for steady, incompressible, inviscid flow.

    p + ½ρv² + ρgh = const
"""
from typing import Final

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
GRAVITY: Final[float] = 9.80665  # standard gravity (m/s²)


def dynamic_pressure(density: float, velocity: float) -> float:
    """½ρv² (Pa)"""
    return 0.5 * density * velocity ** 2


def hydrostatic_pressure(density: float, height: float,
                         gravity: float = GRAVITY) -> float:
    """ρgh (Pa)"""
    return density * gravity * height


def total_pressure(pressure: float, density: float, velocity: float,
                   height: float, gravity: float = GRAVITY) -> float:
    """
    Total pressure along a streamline.

    Args:
        pressure: Static pressure (Pa)
        density: Fluid density (kg/m³)
        velocity: Flow speed (m/s)
        height: Height above the reference level (m)
        gravity: Gravitational acceleration (m/s²)

    Returns:
        Total pressure (Pa)
    """
    return (pressure
            + dynamic_pressure(density, velocity)
            + hydrostatic_pressure(density, height, gravity))


if __name__ == "__main__":
    # air at sea level, 10 m/s, 5 m up
    print(f"{total_pressure(101325.0, 1.225, 10.0, 5.0):.1f} Pa")   # 101446.3
