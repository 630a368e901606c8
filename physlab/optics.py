"""
Polarisation optics: Brewster's angle and Malus' law.

Angles cross the public API in degrees; trigonometry runs in radians.
"""
import numpy as np


def radians_to_degrees(radians: float) -> float:
    return float(np.degrees(radians))


def degrees_to_radians(degrees: float) -> float:
    return float(np.radians(degrees))


def brewster_angle(refractive_index_1: float, refractive_index_2: float) -> float:
    """
    Angle of incidence at which reflected light is completely polarised.

    Args:
        refractive_index_1: Index of the medium the light comes from
        refractive_index_2: Index of the medium it reflects off

    Returns:
        Brewster angle in degrees, tan(θ_B) = n2 / n1
    """
    if refractive_index_1 <= 0 or refractive_index_2 <= 0:
        raise ValueError(
            f"refractive indices must be positive, got "
            f"{refractive_index_1} and {refractive_index_2}")
    return radians_to_degrees(np.arctan(refractive_index_2 / refractive_index_1))


def transmitted_intensity(initial_intensity: float, angle: float) -> float:
    """
    Malus' law, I = I0 · cos²θ.

    Args:
        initial_intensity: Intensity of the polarised beam
        angle: Angle between polariser and analyser (degrees)
    """
    theta = degrees_to_radians(angle)
    return float(initial_intensity * np.cos(theta) ** 2)


if __name__ == "__main__":
    print(f"Brewster air → glass: {brewster_angle(1.0, 1.5):.2f} degrees")
    for a in (0.0, 45.0, 90.0):
        print(f"Malus I0=100 @ {a:4.1f}°: {transmitted_intensity(100.0, a):.3f}")
