"""Shared set-up: one CPU Taichi runtime in double precision for the whole session."""

import numpy as np
import pytest

import pointmpm

pointmpm.init(arch="cpu", default_fp="float64", offline_cache=False, log=False)


def build_scene(position, velocity=None, mass=None, volume=None, materialID=None, cell_number=(1, 1, 1), cell_width=1.,
                boundaries=("Free",) * 6, materials=None, has_gravity=False, timestep=0.01):
    """Assemble a scene holding the given particles without going through the generator."""
    from pointmpm.mpm.engines.ExplicitEngine import ExplicitEngine
    from pointmpm.mpm.generator.ParticleBatch import ParticleBatch
    from pointmpm.mpm.materials.LinearElastic import LinearElastic
    from pointmpm.mpm.SceneManager import myScene
    from pointmpm.mpm.Simulation import Simulation

    position = np.array(position, dtype=np.float64).reshape(-1, 3)
    number = position.shape[0]
    sims = Simulation()
    sims.set_cell_number(cell_number)
    sims.set_cell_width(cell_width)
    sims.set_has_gravity(has_gravity)
    sims.set_timestep(timestep)

    scene = myScene()
    scene.activate_element(sims)
    scene.set_boundary_conditions(list(boundaries))
    if materials is None:
        material = LinearElastic()
        material.model_initialize({"YoungModulus": 1e3, "PossionRatio": 0.3})
        materials = [material]
    scene.material.set_material_models(materials)

    batch = ParticleBatch(position, np.full(number, 0.125) if volume is None else volume)
    batch.mass = np.ones(number) if mass is None else np.array(mass, dtype=np.float64)
    batch.velocity = np.zeros((number, 3)) if velocity is None else np.array(velocity, dtype=np.float64).reshape(-1, 3)
    batch.materialID = np.zeros(number, dtype=np.int32) if materialID is None else np.array(materialID, dtype=np.int32)
    scene.add_particles(batch)
    return sims, scene, ExplicitEngine(sims)


@pytest.fixture
def scene_builder():
    return build_scene
