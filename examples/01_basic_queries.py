"""
Example 01: Basic Geometry Queries

Demonstrates:
1. Building points and lines, joining and intersecting them.
2. Distances, angles and signed areas as compositions of wedge, vee and dot.
3. Projection, reflection and containment tests.
4. Plotting the resulting scene with matplotlib.

Every query below is a short composition of the three PGA products; no
query uses a separate closed-form formula.
"""

import math
import os

import matplotlib.pyplot as plt

from pga2d import (
    Point2D,
    Dir2D,
    join,
    intersect,
    distance,
    angle,
    area_triangle,
    project,
    reflect,
    point_in_triangle,
    point_segment_distance,
    segment_segment_intersect,
    rotate,
)
from pga2d.utils.config import Config, save_config
from pga2d.utils.visualization import plot_scene


OUTPUT_DIR = "output/01_basic_queries"


def main():
    os.makedirs(OUTPUT_DIR, exist_ok=True)
    config = Config(extra={"bounds": [-1.0, 4.0, -1.0, 4.0]})
    save_config(config, os.path.join(OUTPUT_DIR, "config.json"))

    # =========================================================================
    # 1. Points, lines, intersection
    # =========================================================================
    a, b = Point2D(0.0, 0.0), Point2D(2.0, 2.0)
    c, d = Point2D(0.0, 2.0), Point2D(2.0, 0.0)
    l1, l2 = join(a, b), join(c, d)
    center = intersect(l1, l2, eps=config.eps)
    print(f"Diagonals meet at {center.cartesian(config.eps_norm)}")
    print(f"Segments cross: {segment_segment_intersect(a, b, c, d, eps=config.eps)}")

    # =========================================================================
    # 2. Metric queries
    # =========================================================================
    print(f"|ab| = {distance(a, b):.4f}")
    print(f"angle(l1, l2) = {math.degrees(angle(l1, l2)):.1f} deg")
    print(f"area(a, d, b) = {area_triangle(a, d, b):.2f}")

    q = Point2D(3.0, 0.5)
    print(f"dist(q, segment ad) = {point_segment_distance(q, a, d):.4f}")

    # =========================================================================
    # 3. Projection, reflection, containment
    # =========================================================================
    foot = project(q, l1)
    mirrored = reflect(q, l1)
    moved = rotate(q + Dir2D(-1.0, 0.0), math.pi / 4, center=center)
    print(f"foot = {foot.cartesian()}, mirror = {mirrored.cartesian()}")
    print(f"rotated = {moved.cartesian()}")
    print(f"center inside triangle (a, d, b): {point_in_triangle(center, a, d, b, eps=config.eps)}")

    # =========================================================================
    # 4. Plot
    # =========================================================================
    ax = plot_scene(
        points=[a, b, c, d, center, q, foot, mirrored, moved],
        lines=[l1, l2],
        polygons=[[a, d, b]],
        bounds=tuple(config.extra["bounds"]),
        title="PGA2D basic queries",
    )
    path = os.path.join(OUTPUT_DIR, "scene.png")
    ax.figure.savefig(path)
    plt.close(ax.figure)
    print(f"Saved {path}")


if __name__ == "__main__":
    main()
