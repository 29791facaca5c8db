"""Tests for geometries and particle generation."""

import numpy as np
import pytest


def test_sphere_contains_its_surface():
    from pointmpm.mpm.generator.Geometry import Sphere
    sphere = Sphere([0., 0., 0.], 1., materialID=0, density=10.)
    inside = sphere.particle_in_geometry([[0., 0., 1.], [0.5, 0.5, 0.5], [1., 1., 0.]])
    assert inside.tolist() == [True, True, False]


def test_box_bounds_are_inclusive():
    from pointmpm.mpm.generator.Geometry import Box
    box = Box([0., 1., 0., 2., 0., 3.])
    inside = box.particle_in_geometry([[0., 0., 0.], [1., 2., 3.], [0.5, 2.5, 1.], [-0.1, 1., 1.]])
    assert inside.tolist() == [True, True, False, False]
    with pytest.raises(ValueError):
        Box([1., 0., 0., 1., 0., 1.])


def test_geometry_factory():
    from pointmpm.mpm.generator.Geometry import Box, GeometryFactory, Sphere
    sphere = GeometryFactory({"Type": "Sphere", "Center": [1., 1., 1.], "Radius": 0.5, "Density": 2000., "materialid": 2})
    assert isinstance(sphere, Sphere)
    assert sphere.materialID == 2
    assert sphere.density == 2000.

    box = GeometryFactory({"Type": "Box", "BoundingBoxPoint": [0., 0., 0.], "BoundingBoxSize": [1., 2., 3.], "Density": 1.})
    assert isinstance(box, Box)
    assert box.upper.tolist() == [1., 2., 3.]

    with pytest.raises(RuntimeError):
        GeometryFactory({"Type": "Cylinder", "Density": 1.})
    with pytest.raises(KeyError):
        GeometryFactory({"Type": "Sphere", "Radius": 1., "Density": 1.})


def test_first_matching_geometry_wins():
    """Overlapping geometries: the earlier one claims the shared candidates."""
    from pointmpm.mpm.elements.HexahedronElement8Nodes import HexahedronElement8Nodes
    from pointmpm.mpm.GenerateManager import GenerateManager
    from pointmpm.mpm.generator.Geometry import Box, Sphere

    element = HexahedronElement8Nodes()
    element.create_nodes((4, 4, 4), 0.25)
    first = Box([0., 0.5, 0., 1., 0., 1.], materialID=1, density=100., init_v=[1., 0., 0.])
    second = Sphere([0.5, 0.5, 0.5], 10., materialID=0, density=50.)

    generator = GenerateManager()
    particles = generator.initialize(element, 1, [first, second])
    assert len(particles) == 64
    in_first = particles.position[:, 0] < 0.5
    assert np.all(particles.materialID[in_first] == 1)
    assert np.all(particles.materialID[~in_first] == 0)
    assert np.allclose(particles.mass[in_first], 100. * 0.25 ** 3)
    assert np.allclose(particles.mass[~in_first], 50. * 0.25 ** 3)
    assert np.allclose(particles.velocity[in_first], [1., 0., 0.])
    assert np.allclose(particles.velocity[~in_first], 0.)


def test_generation_keeps_cell_order_and_drops_unclaimed():
    from pointmpm.mpm.elements.HexahedronElement8Nodes import HexahedronElement8Nodes
    from pointmpm.mpm.GenerateManager import GenerateManager
    from pointmpm.mpm.generator.Geometry import Sphere

    element = HexahedronElement8Nodes()
    element.create_nodes((3, 3, 3), 1.)
    generator = GenerateManager(chunk_size=8)
    generator.add_geometry(Sphere([1.5, 1.5, 1.5], 1.2, density=1.), log=False)
    particles = generator.initialize(element, 2)

    positions, _ = element.initialize_particles(np.arange(element.total_num_cells()), 2)
    expected = positions[np.sum((positions - 1.5) ** 2, axis=1) <= 1.44]
    assert np.allclose(particles.position, expected)
    assert np.allclose(particles.volume, 0.125)


def test_generation_without_particles():
    from pointmpm.mpm.elements.HexahedronElement8Nodes import HexahedronElement8Nodes
    from pointmpm.mpm.GenerateManager import GenerateManager
    from pointmpm.mpm.generator.Geometry import Sphere

    element = HexahedronElement8Nodes()
    element.create_nodes((1, 1, 1), 1.)
    generator = GenerateManager()
    with pytest.raises(RuntimeError):
        generator.initialize(element, 1)
    with pytest.raises(RuntimeError):
        generator.initialize(element, 1, [Sphere([5., 5., 5.], 0.1)])
