"""Tests for the face boundary operators."""

import numpy as np
import pytest


def make_fields(scene):
    scene.node.momentum.from_numpy(np.ones((scene.element.total_num_nodes(), 3)))
    scene.node.impulse.from_numpy(2. * np.ones((scene.element.total_num_nodes(), 3)))


def test_free_boundary_leaves_fields(scene_builder):
    from pointmpm.mpm.boundaries.BoundaryConstraint import FreeBoundary
    sims, scene, engine = scene_builder([[0.5, 0.5, 0.5]])
    make_fields(scene)
    boundary = FreeBoundary()
    for face in range(6):
        boundary.evaluate_momentum_condition(scene.element, face, scene.node.m, scene.node.momentum)
        boundary.evaluate_impulse_condition(scene.element, face, scene.node.m, scene.node.impulse)
    assert np.allclose(scene.node.momentum.to_numpy(), 1.)
    assert np.allclose(scene.node.impulse.to_numpy(), 2.)


def test_no_slip_boundary_zeroes_face_nodes(scene_builder):
    from pointmpm.mpm.boundaries.BoundaryConstraint import NoSlipBoundary
    sims, scene, engine = scene_builder([[0.5, 0.5, 0.5]], cell_number=(2, 2, 2))
    make_fields(scene)
    boundary = NoSlipBoundary()
    boundary.evaluate_momentum_condition(scene.element, 4, scene.node.m, scene.node.momentum)
    boundary.evaluate_impulse_condition(scene.element, 1, scene.node.m, scene.node.impulse)

    floor = scene.element.get_boundary_nodes(4)
    right = scene.element.get_boundary_nodes(1)
    momentum = scene.node.momentum.to_numpy()
    impulse = scene.node.impulse.to_numpy()
    assert np.allclose(momentum[floor], 0.)
    assert np.allclose(np.delete(momentum, floor, axis=0), 1.)
    assert np.allclose(impulse[right], 0.)
    assert np.allclose(np.delete(impulse, right, axis=0), 2.)


def test_free_slip_boundary_zeroes_normal_component(scene_builder):
    from pointmpm.mpm.boundaries.BoundaryConstraint import FreeSlipBoundary
    sims, scene, engine = scene_builder([[0.5, 0.5, 0.5]], cell_number=(2, 2, 2))
    make_fields(scene)
    boundary = FreeSlipBoundary()
    boundary.evaluate_momentum_condition(scene.element, 2, scene.node.m, scene.node.momentum)

    face = scene.element.get_boundary_nodes(2)
    momentum = scene.node.momentum.to_numpy()
    assert np.allclose(momentum[face, 1], 0.)
    assert np.allclose(momentum[face][:, [0, 2]], 1.)
    assert np.allclose(np.delete(momentum, face, axis=0), 1.)


def test_boundary_factory():
    from pointmpm.mpm.boundaries.BoundaryConstraint import BoundaryFactory, FreeBoundary, FreeSlipBoundary, NoSlipBoundary
    assert isinstance(BoundaryFactory("Free"), FreeBoundary)
    assert isinstance(BoundaryFactory(None), FreeBoundary)
    assert isinstance(BoundaryFactory("NoSlip"), NoSlipBoundary)
    assert isinstance(BoundaryFactory("FreeSlip"), FreeSlipBoundary)
    custom = NoSlipBoundary()
    assert BoundaryFactory(custom) is custom
    with pytest.raises(RuntimeError):
        BoundaryFactory("Periodic")
