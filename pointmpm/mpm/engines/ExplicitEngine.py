import warnings

import taichi as ti

from pointmpm.mpm.engines.EngineKernel import *
from pointmpm.mpm.SceneManager import myScene
from pointmpm.mpm.Simulation import Simulation
from pointmpm.utils.TypeDefination import vec3f


@ti.data_oriented
class ExplicitEngine(object):
    """Explicit particle-grid-particle cycle.

    Every step runs, in order: locate particles, nodal mass, nodal momentum, internal force,
    nodal impulse, FLIP particle update, nodal velocity, particle gradients and stresses.
    Boundary operators act on the nodal momentum, impulse and velocity in face order.
    """
    def __init__(self, sims: Simulation) -> None:
        self.gravity = vec3f(sims.get_gravity())

    def pre_calculation(self, sims: Simulation, scene: myScene):
        scene.check_configuration()
        self.gravity = vec3f(sims.get_gravity())
        self.check_critical_timestep(sims, scene)

    def check_critical_timestep(self, sims: Simulation, scene: myScene):
        sound_speed = scene.material.find_max_sound_speed(scene.get_material_density())
        critical_timestep = sims.CFL * scene.element.calc_critical_timestep(sound_speed)
        if sims.delta > critical_timestep:
            warnings.warn(f"Time step {sims.delta} exceeds the critical time step {critical_timestep} (CFL = {sims.CFL}), the explicit solution may be unstable")
        return critical_timestep

    def locate_particles(self, sims: Simulation, scene: myScene):
        scene.element.locate_particles(scene.particleNum, scene.particle)

    def compute_nodal_mass(self, sims: Simulation, scene: myScene):
        scene.node.m.fill(0)
        kernel_mass_p2g(scene.particleNum, scene.particle, scene.node.m)

    def apply_momentum_constraints(self, scene: myScene, node_field):
        for face, boundary in enumerate(scene.boundary):
            boundary.evaluate_momentum_condition(scene.element, face, scene.node.m, node_field)

    def apply_impulse_constraints(self, scene: myScene, node_field):
        for face, boundary in enumerate(scene.boundary):
            boundary.evaluate_impulse_condition(scene.element, face, scene.node.m, node_field)

    def compute_nodal_momentum(self, sims: Simulation, scene: myScene):
        scene.node.momentum.fill(0)
        kernel_momentum_p2g(scene.particleNum, scene.particle, scene.node.momentum)
        self.apply_momentum_constraints(scene, scene.node.momentum)

    def compute_internal_force(self, sims: Simulation, scene: myScene):
        scene.node.force.fill(0)
        kernel_internal_force_p2g(scene.particleNum, scene.particle, scene.node.force)

    def compute_nodal_impulse(self, sims: Simulation, scene: myScene):
        kernel_compute_nodal_impulse(scene.element.total_num_nodes(), sims.delta, self.gravity, scene.node.m, scene.node.force, scene.node.impulse)
        self.apply_impulse_constraints(scene, scene.node.impulse)

    def update_particle_position_velocity(self, sims: Simulation, scene: myScene):
        kernel_update_particle_position_velocity(scene.particleNum, sims.delta, scene.particle, scene.node.m, scene.node.momentum, scene.node.impulse)

    def compute_nodal_velocity(self, sims: Simulation, scene: myScene):
        scene.node.velocity.fill(0)
        kernel_momentum_p2g(scene.particleNum, scene.particle, scene.node.velocity)
        kernel_compute_grid_velocity(scene.element.total_num_nodes(), scene.node.m, scene.node.velocity)
        self.apply_momentum_constraints(scene, scene.node.velocity)

    def update_particle_gradient(self, sims: Simulation, scene: myScene):
        kernel_update_particle_gradient(scene.particleNum, sims.delta, scene.particle, scene.node.velocity)
        degenerate = kernel_count_degenerate_volume(scene.particleNum, scene.particle)
        if degenerate > 0:
            raise RuntimeError(f"{degenerate} particles have non-positive volume at time step {sims.current_step}, try a smaller time step")

    def compute_stress_strain(self, sims: Simulation, scene: myScene):
        scene.material.compute_stress_strain(scene.particleNum, scene.particle, sims.delta)

    def compute(self, sims: Simulation, scene: myScene):
        self.locate_particles(sims, scene)
        self.compute_nodal_mass(sims, scene)
        self.compute_nodal_momentum(sims, scene)
        self.compute_internal_force(sims, scene)
        self.compute_nodal_impulse(sims, scene)
        self.update_particle_position_velocity(sims, scene)
        self.compute_nodal_velocity(sims, scene)
        self.update_particle_gradient(sims, scene)
        self.compute_stress_strain(sims, scene)
